"""Version range validation.

A range is exclusive at its start and inclusive at its end: ``(start, end]``.
"""

from __future__ import annotations

from dataclasses import dataclass

from gh_release_notes.core.compare import VersionComparator
from gh_release_notes.core.version import is_valid_semver, normalize_version
from gh_release_notes.exceptions import InvalidRangeError


@dataclass(frozen=True, slots=True)
class VersionRange:
    """Versions after ``start`` up to and including ``end``.

    Both endpoints keep the literal strings the user typed so messages
    can echo them back.
    """

    start: str
    end: str

    def __str__(self) -> str:
        return f"{self.start} (exclusive) → {self.end} (inclusive)"


def validate_range(version_range: VersionRange, comparator: VersionComparator) -> None:
    """Reject ranges whose start is not strictly before their end.

    Endpoints that are not semantic versions are accepted, but a warning
    naming the endpoint is sent to the comparator's sink.

    Args:
        version_range: Range to validate
        comparator: Comparator used for ordering and diagnostics

    Raises:
        InvalidRangeError: If start >= end after normalization
    """
    # compare() normalizes both sides itself; passing the literals keeps
    # fallback warnings in the user's own spelling.
    if comparator.compare(version_range.start, version_range.end) >= 0:
        raise InvalidRangeError(version_range.start, version_range.end)

    if not is_valid_semver(normalize_version(version_range.start)):
        comparator.warn(f'Start version "{version_range.start}" is not valid semver format')
    if not is_valid_semver(normalize_version(version_range.end)):
        comparator.warn(f'End version "{version_range.end}" is not valid semver format')
