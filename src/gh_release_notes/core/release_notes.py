"""Release notes generation: validate, fetch, select, render."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from gh_release_notes.core.compare import VersionComparator
from gh_release_notes.core.notes import render_release_notes
from gh_release_notes.core.range import VersionRange, validate_range
from gh_release_notes.core.selection import select_releases

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gh_release_notes.config.models import OutputConfig
    from gh_release_notes.core.models import Release
    from gh_release_notes.github.identity import RepositoryIdentity


class ReleaseSource(Protocol):
    """Anything that can list the published releases of one repository."""

    @property
    def identity(self) -> RepositoryIdentity: ...

    def fetch_releases(self) -> Sequence[Release]: ...


def generate_release_notes(
    source: ReleaseSource,
    start_version: str,
    end_version: str,
    *,
    comparator: VersionComparator | None = None,
    now: datetime | None = None,
    output: OutputConfig | None = None,
) -> str:
    """Generate merged release notes for ``(start_version, end_version]``.

    The range is validated before the source is asked for anything, so an
    invalid range never costs a network round trip.

    Args:
        source: Release source, usually a GitHubClient
        start_version: Exclusive lower bound
        end_version: Inclusive upper bound
        comparator: Comparator carrying the warning sink
        now: Generation time (defaults to the current UTC time)
        output: Formatting options

    Returns:
        Merged Markdown document, or the informational "No releases found"
        sentence when nothing is in range

    Raises:
        InvalidRangeError: If start_version >= end_version
    """
    comparator = comparator or VersionComparator()
    version_range = VersionRange(start_version, end_version)

    validate_range(version_range, comparator)

    releases = source.fetch_releases()
    selection = select_releases(releases, version_range, comparator)

    return render_release_notes(
        selection,
        source.identity,
        now or datetime.now(UTC),
        output,
    )
