"""Core logic for gh-release-notes.

This package contains the fundamental building blocks:
- Version normalization and semantic-version parsing
- Version comparison with graceful fallbacks
- Range validation and release selection
- Merged release notes rendering
"""

from __future__ import annotations

from gh_release_notes.core.compare import (
    Comparison,
    VersionComparator,
    WarningSink,
    compare_versions,
)
from gh_release_notes.core.models import Release
from gh_release_notes.core.notes import render_release, render_release_notes
from gh_release_notes.core.range import VersionRange, validate_range
from gh_release_notes.core.release_notes import ReleaseSource, generate_release_notes
from gh_release_notes.core.selection import (
    NoReleasesFound,
    OrderedReleaseSet,
    Selection,
    select_releases,
)
from gh_release_notes.core.version import (
    is_valid_semver,
    normalize_version,
    parse_semver,
)

__all__ = [
    # Compare
    "Comparison",
    # Selection
    "NoReleasesFound",
    "OrderedReleaseSet",
    # Models
    "Release",
    "ReleaseSource",
    "Selection",
    # Version
    "VersionComparator",
    # Range
    "VersionRange",
    "WarningSink",
    "compare_versions",
    # Generation
    "generate_release_notes",
    "is_valid_semver",
    "normalize_version",
    "parse_semver",
    "render_release",
    "render_release_notes",
    "select_releases",
    "validate_range",
]
