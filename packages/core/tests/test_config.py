"""Tests for configuration loading."""

import pytest

from eipdiff_core.config import load_config


@pytest.fixture(autouse=True)
def _clear_actions_env(monkeypatch):
    for name in ("GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_EVENT_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["repo"] is None
    assert config["pr_number"] is None
    assert config["include"] == ["EIPS/eip-*.md"]


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".eipdiff.yml"
    cfg.write_text("repo: ethereum/EIPs\ninclude:\n  - 'EIPS/*.md'\n  - 'ERCS/*.md'\n")
    config = load_config(config_path=str(cfg))
    assert config["repo"] == "ethereum/EIPs"
    assert config["include"] == ["EIPS/*.md", "ERCS/*.md"]


def test_empty_config_file_keeps_defaults(tmp_path):
    cfg = tmp_path / ".eipdiff.yml"
    cfg.write_text("")
    config = load_config(config_path=str(cfg))
    assert config["include"] == ["EIPS/eip-*.md"]


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".eipdiff.yml"
    cfg.write_text("repo: ethereum/EIPs\npr_number: 1\n")
    config = load_config(config_path=str(cfg), cli_overrides={"repo": "me/fork", "pr_number": 42})
    assert config["repo"] == "me/fork"
    assert config["pr_number"] == 42


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".eipdiff.yml"
    cfg.write_text("repo: ethereum/EIPs\n")
    config = load_config(config_path=str(cfg), cli_overrides={"repo": None})
    assert config["repo"] == "ethereum/EIPs"


def test_env_vars_loaded(monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "ethereum/EIPs")
    monkeypatch.setenv("GITHUB_EVENT_PATH", "/tmp/event.json")
    config = load_config(config_path="nonexistent.yml")
    assert config["repo"] == "ethereum/EIPs"
    assert config["event_path"] == "/tmp/event.json"


def test_token_is_left_to_the_cli(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
    config = load_config(config_path="nonexistent.yml")
    assert "github_token" not in config


def test_configured_repo_wins_over_actions_env(tmp_path, monkeypatch):
    monkeypatch.setenv("GITHUB_REPOSITORY", "ethereum/EIPs")
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"), cli_overrides={"repo": "me/fork"})
    assert config["repo"] == "me/fork"


def test_include_list_is_not_shared_reference(tmp_path):
    """Mutating one config's include list must not affect another."""
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["include"].append("ERCS/erc-*.md")
    assert config_b["include"] == ["EIPS/eip-*.md"]
