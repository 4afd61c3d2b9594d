import os
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "repo": None,  # owner/name; falls back to GITHUB_REPOSITORY
    "pr_number": None,  # falls back to the GitHub Actions event payload
    "include": ["EIPS/eip-*.md"],  # fnmatch patterns used when no filenames are given
}


def load_config(config_path: str = ".eipdiff.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .eipdiff.yml in the current directory
      3. CLI argument overrides

    GitHub Actions variables fill in whatever is still unset afterwards.
    The GitHub token is not read here; the CLI resolves it (see eipdiff_cli.auth).
    """
    config = {**DEFAULT_CONFIG, "include": list(DEFAULT_CONFIG["include"])}

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    if not config.get("repo"):
        config["repo"] = os.environ.get("GITHUB_REPOSITORY")
    config["event_path"] = os.environ.get("GITHUB_EVENT_PATH")

    return config
