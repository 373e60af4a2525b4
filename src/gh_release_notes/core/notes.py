"""Merged release notes rendering.

Turns an ordered selection of releases into a single Markdown document,
one section per release, oldest first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gh_release_notes.config.models import OutputConfig
from gh_release_notes.core.selection import NoReleasesFound

if TYPE_CHECKING:
    from datetime import datetime

    from gh_release_notes.core.models import Release
    from gh_release_notes.core.selection import Selection
    from gh_release_notes.github.identity import RepositoryIdentity


def render_release(release: Release, output: OutputConfig | None = None) -> str:
    """Render a single release section.

    Args:
        release: Release to render
        output: Formatting options

    Returns:
        Markdown section terminated by a horizontal rule
    """
    output = output or OutputConfig()

    if release.published_at is not None:
        released = release.published_at.strftime(output.released_format)
    else:
        released = "Unknown"

    lines = [
        f"## {release.display_name}",
        f"**Released:** {released}",
    ]
    if release.prerelease:
        lines.append("**Pre-release**")

    lines.append("")
    lines.append(release.body or output.empty_body)
    lines.append("")
    lines.append("---")
    lines.append("")

    return "\n".join(lines) + "\n"


def render_release_notes(
    selection: Selection,
    identity: RepositoryIdentity,
    now: datetime,
    output: OutputConfig | None = None,
) -> str:
    """Render the merged release notes document.

    The result depends only on the arguments, so the same selection
    rendered with the same ``now`` always produces the same text.

    Args:
        selection: Result of select_releases()
        identity: Repository the releases belong to
        now: Generation time shown in the header
        output: Formatting options

    Returns:
        Markdown document, or the informational sentence when the
        selection is empty
    """
    if isinstance(selection, NoReleasesFound):
        return selection.message

    output = output or OutputConfig()
    version_range = selection.version_range

    header = [
        f"# Release Notes: {version_range.start} → {version_range.end}",
        "",
        f"Generated release notes for {identity}",
        f"Date: {now.strftime(output.date_format)}",
        "",
    ]

    return "\n".join(header) + "\n" + "".join(
        render_release(release, output) for release in selection
    )
