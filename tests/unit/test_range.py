"""Tests for version range validation."""

from __future__ import annotations

import pytest

from gh_release_notes.core.compare import VersionComparator
from gh_release_notes.core.range import VersionRange, validate_range
from gh_release_notes.exceptions import InvalidRangeError, ReleaseNotesError


class TestValidateRange:
    """Tests for validate_range()."""

    def test_valid_range(self, comparator: VersionComparator, warnings: list[str]):
        """A well-ordered semver range passes silently."""
        validate_range(VersionRange("v1.0.0", "v2.0.0"), comparator)

        assert warnings == []

    def test_start_after_end_raises(self, comparator: VersionComparator):
        """start > end is rejected."""
        with pytest.raises(InvalidRangeError) as exc_info:
            validate_range(VersionRange("2.0.0", "1.0.0"), comparator)

        assert exc_info.value.start == "2.0.0"
        assert exc_info.value.end == "1.0.0"
        assert "(2.0.0)" in str(exc_info.value)
        assert "(1.0.0)" in str(exc_info.value)

    def test_equal_endpoints_raise(self, comparator: VersionComparator):
        """start == end is rejected."""
        with pytest.raises(InvalidRangeError):
            validate_range(VersionRange("1.0.0", "1.0.0"), comparator)

    def test_equal_after_normalization_raises(self, comparator: VersionComparator):
        """Endpoints that differ only by the "v" prefix are equal."""
        with pytest.raises(InvalidRangeError, match=r"start version \(v1\.0\.0\)"):
            validate_range(VersionRange("v1.0.0", "1.0"), comparator)

    def test_is_release_notes_error(self, comparator: VersionComparator):
        """InvalidRangeError belongs to the package hierarchy."""
        with pytest.raises(ReleaseNotesError):
            validate_range(VersionRange("3.0.0", "1.0.0"), comparator)

    def test_non_semver_endpoints_warn(self, comparator: VersionComparator, warnings: list[str]):
        """Non-semver endpoints are allowed but reported by name."""
        validate_range(VersionRange("release-1", "release-2"), comparator)

        assert 'Start version "release-1" is not valid semver format' in warnings
        assert 'End version "release-2" is not valid semver format' in warnings

    def test_only_offending_endpoint_warns(
        self, comparator: VersionComparator, warnings: list[str]
    ):
        """A semver start is not reported when only the end is malformed."""
        validate_range(VersionRange("1.0.0", "nightly"), comparator)

        assert not any(w.startswith("Start version") for w in warnings)
        assert 'End version "nightly" is not valid semver format' in warnings

    def test_loose_endpoints_do_not_warn(
        self, comparator: VersionComparator, warnings: list[str]
    ):
        """Endpoints that normalize to semver are not reported."""
        validate_range(VersionRange("v1.2", "2"), comparator)

        assert warnings == []

    def test_invalid_range_skips_endpoint_warnings(
        self, comparator: VersionComparator, warnings: list[str]
    ):
        """Endpoint warnings are only emitted for ranges that pass."""
        with pytest.raises(InvalidRangeError):
            validate_range(VersionRange("release-9", "release-2"), comparator)

        assert not any("not valid semver format" in w for w in warnings)


class TestVersionRange:
    """Tests for VersionRange."""

    def test_str(self):
        """String form spells out the boundary semantics."""
        assert str(VersionRange("v1", "v2")) == "v1 (exclusive) → v2 (inclusive)"
