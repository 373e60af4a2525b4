"""Resolution of repository references into owner and name."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gh_release_notes.exceptions import InvalidRepositoryURLError

_PATTERNS = (
    # https://github.com/owner/repo(.git)(/anything)
    re.compile(r"github\.com[/:]([^/\s]+)/([^/\s]+?)(?:\.git)?(?:/.*)?$"),
    # owner/repo
    re.compile(r"^([^/\s:]+)/([^/\s]+?)(?:\.git)?$"),
)


@dataclass(frozen=True, slots=True)
class RepositoryIdentity:
    owner: str
    repo: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_github_url(url: str) -> RepositoryIdentity:
    """Resolve a GitHub URL or ``owner/repo`` shorthand.

    Supported forms:
        https://github.com/owner/repo
        https://github.com/owner/repo.git
        https://github.com/owner/repo/releases
        git@github.com:owner/repo.git
        owner/repo

    Raises:
        InvalidRepositoryURLError: If no form matches
    """
    text = url.strip()
    for pattern in _PATTERNS:
        match = pattern.search(text)
        if match and match.group(1) and match.group(2):
            return RepositoryIdentity(owner=match.group(1), repo=match.group(2))

    raise InvalidRepositoryURLError(url)
