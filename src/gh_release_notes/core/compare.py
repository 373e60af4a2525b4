"""Total ordering over release tags.

Tags are compared by semantic-versioning precedence when both sides
normalize to a strict semantic version. Otherwise the comparison degrades
through two weaker strategies, each engagement reported to a warning sink:

1. semver   - semantic-versioning precedence
2. natural  - case-insensitive comparison aware of numeric runs ("10" > "9")
3. lexical  - case-insensitive, then lowercase before uppercase, always decisive

Comparison never raises for any pair of strings.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable
from typing import Any, Literal, NamedTuple

from gh_release_notes.core.version import normalize_version, parse_semver

WarningSink = Callable[[str], None]
Strategy = Literal["semver", "natural", "lexical"]

_DIGITS_RE = re.compile(r"(\d+)", re.ASCII)


class Comparison(NamedTuple):
    """Outcome of a comparison and the strategy that decided it."""

    result: int
    strategy: Strategy


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _compare_semver(left: str, right: str) -> int | None:
    a, b = parse_semver(left), parse_semver(right)
    if a is None or b is None:
        return None
    return a.compare(b)


def _natural_key(text: str) -> list[int | str]:
    # re.split with a capture group alternates text, digits, text, ... so
    # keys of two strings always line up type by type.
    parts = _DIGITS_RE.split(text)
    return [int(part) if i % 2 else part.casefold() for i, part in enumerate(parts)]


def _compare_natural(left: str, right: str) -> int | None:
    result = _sign(_natural_key(left), _natural_key(right))
    if result == 0 and left != right:
        # "Build-7" vs "build-7" or "r01" vs "r1": equal here, but distinct.
        return None
    return result


def _compare_lexical(left: str, right: str) -> int:
    # lowercase before uppercase on a case-insensitive tie
    return _sign(
        (left.casefold(), left.swapcase(), left),
        (right.casefold(), right.swapcase(), right),
    )


def _discard(_message: str) -> None:
    return None


class VersionComparator:
    """Compare version strings, reporting fallbacks to a warning sink.

    Args:
        warn: Receives one message per fallback strategy engaged.
            Messages are advisory and never affect the result.
    """

    def __init__(self, warn: WarningSink | None = None) -> None:
        self._warn = warn or _discard

    def warn(self, message: str) -> None:
        """Forward a diagnostic message to the configured sink."""
        self._warn(message)

    def resolve(self, a: str, b: str) -> Comparison:
        """Compare two version strings and report which strategy decided."""
        left, right = normalize_version(a), normalize_version(b)

        result = _compare_semver(left, right)
        if result is not None:
            return Comparison(result, "semver")

        self._warn(f"Invalid semver format detected. Using string comparison for {a} vs {b}")
        result = _compare_natural(left, right)
        if result is not None:
            return Comparison(result, "natural")

        self._warn(
            f"String comparison was inconclusive for {a} vs {b}. Using lexical comparison."
        )
        return Comparison(_compare_lexical(left, right), "lexical")

    def compare(self, a: str, b: str) -> int:
        """Return -1, 0 or 1 as a sorts before, equal to, or after b."""
        return self.resolve(a, b).result

    def sort_key(self) -> Callable[[str], Any]:
        """Key function for sorted() ordering strings by compare()."""
        return functools.cmp_to_key(self.compare)


def compare_versions(a: str, b: str, warn: WarningSink | None = None) -> int:
    """Compare two version strings.

    Examples:
        >>> compare_versions("1.0.0-rc.1", "v1.0.0")
        -1
    """
    return VersionComparator(warn).compare(a, b)
