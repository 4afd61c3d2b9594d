"""diff command: compare EIP front matter at the base and head of a pull request."""

from __future__ import annotations

import asyncio
import fnmatch
import json

import click
import requests
from github import GithubException
from rich.console import Console
from rich.table import Table

from eipdiff_core.errors import EipDiffError
from eipdiff_core.file_diff import get_file_diff
from eipdiff_core.gh.pull_request import build_diff_context, get_changed_files, get_pull
from eipdiff_core.models import DiffContext, FileDiff, FileReference

console = Console()

_FIELDS = ("eip_num", "status", "authors", "name", "filename_eip_num", "category", "type")


def _is_included(filename: str, patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(filename, pattern) for pattern in patterns)


async def _collect_diffs(filenames: list[str], context: DiffContext) -> list[tuple[str, FileDiff | None, str | None]]:
    """Diff each file in turn; one failing file does not stop the others."""
    results = []
    for filename in filenames:
        try:
            diff = await get_file_diff(FileReference(filename=filename), context)
        except (EipDiffError, GithubException, requests.exceptions.RequestException) as e:
            results.append((filename, None, str(e)))
            continue
        results.append((filename, diff, None))
    return results


def _render_value(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, list):
        return ", ".join(value) if value else "(none)"
    return str(value)


def _print_diff_table(filename: str, diff: FileDiff) -> None:
    base = diff.base.to_dict()
    head = diff.head.to_dict()

    table = Table(title=filename, show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold")
    table.add_column("Base")
    table.add_column("Head")
    table.add_column("Changed", justify="center")

    for name in _FIELDS:
        changed = base[name] != head[name]
        table.add_row(
            name,
            _render_value(base[name]),
            _render_value(head[name]),
            "[yellow]yes[/yellow]" if changed else "",
        )

    console.print(table)


@click.command("diff")
@click.argument("filenames", nargs=-1)
@click.option("--repo", default=None, help="GitHub repository in owner/name format. Defaults to GITHUB_REPOSITORY.")
@click.option(
    "--pr",
    "pr_number",
    type=int,
    default=None,
    help="Pull request number. Defaults to the GitHub Actions event payload.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the diffs as JSON instead of tables.")
@click.pass_context
def diff_cmd(ctx, filenames: tuple[str, ...], repo: str | None, pr_number: int | None, as_json: bool):
    """Show how EIP front matter changes between the base and head of a PR.

    FILENAMES are repository paths such as EIPS/eip-1234.md. Omit them to
    check every changed file matching the configured include patterns.

    \b
    Required environment variables:
      GITHUB_TOKEN         GitHub personal access token (or use gh CLI)
    """
    from eipdiff_core.config import load_config
    from eipdiff_cli.auth import resolve_github_token

    config_path = ctx.obj.get("config_path", ".eipdiff.yml") if ctx.obj else ".eipdiff.yml"
    config = load_config(config_path, cli_overrides={"repo": repo, "pr_number": pr_number})

    token = resolve_github_token()
    if not token:
        raise click.UsageError(
            "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
            "Create a token at https://github.com/settings/tokens"
        )
    config["github_token"] = token

    try:
        context = build_diff_context(config)
    except EipDiffError as e:
        raise click.UsageError(str(e))
    if context.change_request is None:
        raise click.UsageError("No pull request given. Pass --pr or run inside a pull_request workflow.")

    targets = list(filenames)
    if not targets:
        pr = get_pull(context.repo, context.change_request.number)
        targets = [f.filename for f in get_changed_files(pr) if _is_included(f.filename, config["include"])]
        if not targets:
            console.print("[yellow]No EIP files changed in this pull request.[/yellow]")
            return

    results = asyncio.run(_collect_diffs(targets, context))
    failed = [r for r in results if r[2] is not None]

    if as_json:
        payload = [
            {"filename": filename, "error": error} if error else {"filename": filename, **diff.to_dict()}
            for filename, diff, error in results
        ]
        click.echo(json.dumps(payload, indent=2))
    else:
        for filename, diff, error in results:
            if error:
                console.print(f"[red]Could not diff {filename}: {error}[/red]")
                continue
            _print_diff_table(filename, diff)

    if failed:
        ctx.exit(1)
