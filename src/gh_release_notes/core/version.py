"""Semantic version parsing and normalization.

Release tags found in the wild are rarely strict semantic versions:
they carry a "v" prefix, drop the patch component, or glue the
pre-release label onto the patch number. This module reconciles such
loose forms into strict MAJOR.MINOR.PATCH[-PRERELEASE] strings when the
intent is unambiguous, and leaves everything else untouched. Strict
parsing and precedence are delegated to the semver library.
"""

from __future__ import annotations

import re

import semver

# "1.0.0rc1": a pre-release label that starts with a letter and follows the
# numbers without a hyphen.
_GLUED_LABEL_RE = re.compile(r"^([0-9.]+)([A-Za-z][0-9A-Za-z.-]*)$")


def _is_number(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _strip_leading_zeroes(identifier: str) -> str:
    return str(int(identifier)) if _is_number(identifier) else identifier


def parse_semver(version: str) -> semver.Version | None:
    """Parse a strict semantic version.

    Args:
        version: Version string such as "1.0.0-rc.1+build.5"

    Returns:
        Parsed version, or None when the string is not strict semver
        (a "v" prefix already makes it non-strict)
    """
    try:
        return semver.Version.parse(version)
    except (TypeError, ValueError):
        return None


def is_valid_semver(version: str) -> bool:
    """Check whether a string is a strict semantic version."""
    return semver.Version.is_valid(version)


def _parse_loose(version: str) -> semver.Version | None:
    text = version.strip()
    if text.startswith("="):
        text = text[1:].lstrip()

    # strip leading `v`
    if text[:1] in ("v", "V"):
        text = text[1:]

    # in most cases, we should be fine now
    parsed = parse_semver(text)
    if parsed is not None:
        return parsed.replace(build=None)

    text, _, _build = text.partition("+")

    if "-" in text:
        numeric, _, label = text.partition("-")
        has_label = True
    elif match := _GLUED_LABEL_RE.match(text):
        numeric, label = match.groups()
        has_label = True
    else:
        numeric, label, has_label = text, "", False

    # append missing minor/patch levels and rm leading zeroes
    parts = numeric.split(".")
    if not 1 <= len(parts) <= 3 or not all(_is_number(part) for part in parts):
        return None
    parts += ["0"] * (3 - len(parts))
    candidate = ".".join(_strip_leading_zeroes(part) for part in parts)

    if has_label:
        candidate += "-" + ".".join(_strip_leading_zeroes(i) for i in label.split("."))

    # anything semver still rejects is not an unambiguous semantic version
    return parse_semver(candidate)


def normalize_version(version: str) -> str:
    """Canonicalize a version string into a comparable form.

    Strips a leading "v"/"V" and reconciles loose forms ("1.2",
    "01.2.3", "1.0.0rc1") into strict semantic-version form. Build
    metadata is dropped. Strings that have no semantic-version
    interpretation are returned unchanged.

    Normalization is idempotent.

    Examples:
        >>> normalize_version("v18.2")
        '18.2.0'
        >>> normalize_version("release-7")
        'release-7'
    """
    parsed = _parse_loose(version)
    if parsed is None:
        return version
    return str(parsed)
