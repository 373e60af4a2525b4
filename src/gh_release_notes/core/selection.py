"""Selection of the releases that fall inside a version range."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from gh_release_notes.core.compare import VersionComparator
from gh_release_notes.core.models import Release
from gh_release_notes.core.range import VersionRange


@dataclass(frozen=True, slots=True)
class OrderedReleaseSet:
    """Non-empty, ascending sequence of releases within a range."""

    releases: tuple[Release, ...]
    version_range: VersionRange

    def __iter__(self) -> Iterator[Release]:
        return iter(self.releases)

    def __len__(self) -> int:
        return len(self.releases)

    @property
    def tags(self) -> list[str]:
        return [release.tag for release in self.releases]


@dataclass(frozen=True, slots=True)
class NoReleasesFound:
    """No release matched the range. A valid result, not an error."""

    version_range: VersionRange

    @property
    def message(self) -> str:
        return (
            f"No releases found between {self.version_range.start} (exclusive) "
            f"and {self.version_range.end} (inclusive)."
        )


Selection = OrderedReleaseSet | NoReleasesFound


def select_releases(
    releases: Sequence[Release],
    version_range: VersionRange,
    comparator: VersionComparator,
) -> Selection:
    """Keep releases in ``(start, end]`` and sort them oldest first.

    Drafts are expected to be filtered out already. Releases whose tags
    compare equal keep their input order.

    Args:
        releases: Releases as returned by the data source
        version_range: A range that already passed validate_range()
        comparator: Comparator used for filtering and ordering

    Returns:
        OrderedReleaseSet, or NoReleasesFound when nothing matched
    """
    in_range = [
        release
        for release in releases
        if comparator.compare(release.tag, version_range.start) > 0
        and comparator.compare(release.tag, version_range.end) <= 0
    ]

    if not in_range:
        return NoReleasesFound(version_range)

    key = comparator.sort_key()
    ordered = sorted(in_range, key=lambda release: key(release.tag))
    return OrderedReleaseSet(tuple(ordered), version_range)
