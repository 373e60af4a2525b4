"""Command-line entry point for gh-release-notes."""

from __future__ import annotations

import click
from rich.console import Console

from gh_release_notes import __version__
from gh_release_notes.cli.commands.generate import run_generate


@click.command(
    name="gh-release-notes",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="gh-release-notes")
@click.argument("github_url", metavar="GITHUB_URL")
@click.argument("start_version", metavar="START_VERSION")
@click.argument("end_version", metavar="END_VERSION")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Output file path (default: stdout).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file (default: nearest pyproject.toml).",
)
def main(
    github_url: str,
    start_version: str,
    end_version: str,
    output: str | None,
    config_path: str | None,
) -> None:
    """Generate merged release notes from GitHub releases between two versions.

    GITHUB_URL is a repository URL (https://github.com/owner/repo) or the
    owner/repo shorthand. Releases after START_VERSION (exclusive) up to
    END_VERSION (inclusive) are merged, oldest first.
    """
    run_generate(
        github_url,
        start_version,
        end_version,
        output,
        config_path,
        console=Console(),
        err_console=Console(stderr=True),
    )
