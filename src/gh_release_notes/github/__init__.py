"""GitHub collaborators: repository identity and releases API."""

from __future__ import annotations

from gh_release_notes.github.client import GitHubClient
from gh_release_notes.github.identity import RepositoryIdentity, parse_github_url

__all__ = [
    "GitHubClient",
    "RepositoryIdentity",
    "parse_github_url",
]
