from __future__ import annotations

import json
import logging
from pathlib import Path

from github import Github, GithubException

from eipdiff_core.errors import ContextMissingError
from eipdiff_core.models import ChangeRequest, DiffContext

logger = logging.getLogger(__name__)


def get_github(token: str | None) -> Github:
    return Github(token)


def get_repo(github: Github, repo_name: str):
    return github.get_repo(repo_name)


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def get_changed_files(pr):
    return pr.get_files()


def read_event_pr_number(event_path: str | None) -> int | None:
    """Return the pull request number from a GitHub Actions event payload, or None.

    ``pull_request`` events carry it under ``pull_request.number``; issue
    comment and similar events only expose a top-level ``number``.
    """
    if not event_path:
        return None
    path = Path(event_path)
    if not path.exists():
        return None
    with open(path) as f:
        payload = json.load(f)
    number = (payload.get("pull_request") or {}).get("number") or payload.get("number")
    return int(number) if number else None


def get_change_request(repo, pr_number: int) -> ChangeRequest:
    try:
        pr = get_pull(repo, pr_number)
    except GithubException as e:
        raise ContextMissingError(f"PR #{pr_number} not found in {repo.full_name}.") from e
    return ChangeRequest(number=pr.number, head_sha=pr.head.sha, base_sha=pr.base.sha)


def build_diff_context(config: dict) -> DiffContext:
    """Create the GitHub client, repository and active pull request from config.

    The pull request number comes from ``pr_number`` or, inside GitHub
    Actions, from the event payload. With neither, the context carries no
    change request and get_file_diff will refuse to run.
    """
    repo_name = config.get("repo")
    if not repo_name:
        raise ContextMissingError("No repository configured. Pass --repo or set GITHUB_REPOSITORY.")

    github = get_github(config.get("github_token"))
    try:
        repo = get_repo(github, repo_name)
    except GithubException as e:
        raise ContextMissingError(f"Repository {repo_name} not found.") from e

    pr_number = config.get("pr_number") or read_event_pr_number(config.get("event_path"))
    if pr_number is None:
        logger.debug("No pull request number configured for %s", repo_name)
        return DiffContext(github=github, repo=repo, change_request=None)

    return DiffContext(github=github, repo=repo, change_request=get_change_request(repo, pr_number))
