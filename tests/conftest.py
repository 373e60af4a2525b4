"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from gh_release_notes.core.compare import VersionComparator
from gh_release_notes.core.models import Release

ReleaseFactory = Callable[..., Release]


@pytest.fixture
def make_release() -> ReleaseFactory:
    """Factory for releases with sensible defaults."""

    def _make(tag: str, **kwargs) -> Release:
        kwargs.setdefault("title", tag)
        kwargs.setdefault("body", f"Notes for {tag}")
        kwargs.setdefault("published_at", datetime(2024, 1, 15, 10, 30, tzinfo=UTC))
        return Release(tag=tag, **kwargs)

    return _make


@pytest.fixture
def warnings() -> list[str]:
    """Collected diagnostic warnings."""
    return []


@pytest.fixture
def comparator(warnings: list[str]) -> VersionComparator:
    """Comparator that records its warnings into the ``warnings`` fixture."""
    return VersionComparator(warnings.append)


@pytest.fixture
def sample_releases(make_release: ReleaseFactory) -> list[Release]:
    """Releases newest first, as the GitHub API returns them."""
    return [
        make_release("v2.1.0"),
        make_release("v2.0.0"),
        make_release("v2.0.0-rc.1", prerelease=True),
        make_release("v1.1.0"),
        make_release("v1.0.0"),
    ]


@pytest.fixture
def github_release_payload() -> list[dict]:
    """Raw GitHub API payload, newest first, including a draft."""
    return [
        {
            "tag_name": "v2.1.0",
            "name": "",
            "body": None,
            "published_at": None,
            "prerelease": False,
            "draft": True,
        },
        {
            "tag_name": "v2.0.0",
            "name": "Version 2",
            "body": "Big release",
            "published_at": "2024-02-01T12:00:00Z",
            "prerelease": False,
            "draft": False,
        },
        {
            "tag_name": "v2.0.0-rc.1",
            "name": "",
            "body": "Release candidate",
            "published_at": "2024-01-20T12:00:00Z",
            "prerelease": True,
            "draft": False,
        },
        {
            "tag_name": "v1.0.0",
            "name": "v1.0.0",
            "body": "First",
            "published_at": "2024-01-01T00:00:00Z",
            "prerelease": False,
            "draft": False,
        },
    ]
