"""CLI entry point for eipdiff.

Commands:
  diff: show the normalized front matter of EIP files at the base and head of a PR
"""

from __future__ import annotations

import importlib.metadata

import click

from eipdiff_cli.commands.diff import diff_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("eipdiff"),
    prog_name="eipdiff",
)
@click.option(
    "--config",
    "config_path",
    default=".eipdiff.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="EIPDIFF_CONFIG",
)
@click.pass_context
def main(ctx: click.Context, config_path: str):
    """Compare EIP front matter between the base and head of a pull request."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(diff_cmd)
