"""Exception hierarchy for gh-release-notes.

Every error raised on purpose by this package derives from
ReleaseNotesError, so the CLI can report them uniformly.
"""

from __future__ import annotations


class ReleaseNotesError(Exception):
    """Base class for all gh-release-notes errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRangeError(ReleaseNotesError):
    """Start version is not strictly before the end version."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(
            f"Invalid version range: start version ({start}) "
            f"must be less than end version ({end})"
        )
        self.start = start
        self.end = end


class InvalidRepositoryURLError(ReleaseNotesError):
    """Repository URL could not be resolved to owner/repo."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid GitHub URL format: {url}")
        self.url = url


class GitHubAPIError(ReleaseNotesError):
    """GitHub API request failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RepositoryNotFoundError(GitHubAPIError):
    """GitHub answered 404 for the repository."""


class ConfigError(ReleaseNotesError):
    """Configuration problem."""


class ConfigNotFoundError(ConfigError):
    """Configuration file does not exist."""


class ConfigValidationError(ConfigError):
    """Configuration file exists but is invalid."""
