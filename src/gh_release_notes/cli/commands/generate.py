"""Implementation of the release notes generation command.

Fetches the releases of one repository and merges the notes of every
release in ``(start, end]`` into a single Markdown document.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from gh_release_notes.config import load_config
from gh_release_notes.core import VersionComparator, generate_release_notes
from gh_release_notes.exceptions import ConfigError, ReleaseNotesError
from gh_release_notes.github import GitHubClient, parse_github_url

if TYPE_CHECKING:
    from rich.console import Console


def run_generate(
    github_url: str,
    start_version: str,
    end_version: str,
    output: str | None,
    config_path: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the generate command.

    Progress and warnings go to ``err_console`` so that the document
    printed on ``console`` can be piped as-is.

    Args:
        github_url: Repository URL or owner/repo shorthand
        start_version: Exclusive lower bound
        end_version: Inclusive upper bound
        output: Optional file to write the document to
        config_path: Optional configuration file
        console: Console for standard output
        err_console: Console for progress, warnings and errors
    """
    # Load configuration
    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(e.message)}")
        raise SystemExit(1) from e

    err_console.print(f"Fetching release notes for [cyan]{escape(github_url)}[/]...")
    err_console.print(
        f"Version range: [cyan]{escape(start_version)}[/] (exclusive) → "
        f"[cyan]{escape(end_version)}[/] (inclusive)"
    )

    def warn(message: str) -> None:
        err_console.print(f"[yellow]Warning:[/] {escape(message)}")

    try:
        identity = parse_github_url(github_url)
        with GitHubClient(identity, config.github) as client:
            release_notes = generate_release_notes(
                client,
                start_version,
                end_version,
                comparator=VersionComparator(warn),
                output=config.output,
            )
    except ReleaseNotesError as e:
        err_console.print(f"[red]Error:[/] {escape(e.message)}")
        raise SystemExit(1) from e

    if output:
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(release_notes, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]Error writing {escape(output)}:[/] {escape(str(e))}")
            raise SystemExit(1) from e
        err_console.print(f"  [green]✓[/] Release notes saved to: [cyan]{escape(output)}[/]")
    else:
        console.print()
        console.print(release_notes, markup=False, highlight=False, emoji=False, soft_wrap=True)
