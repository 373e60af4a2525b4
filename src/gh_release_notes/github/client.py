"""GitHub REST API client for repository releases.

Only a single page of releases is requested; repositories with more
releases than ``per_page`` are truncated to the most recent ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from gh_release_notes.config.models import GitHubConfig
from gh_release_notes.core.models import Release
from gh_release_notes.exceptions import GitHubAPIError, RepositoryNotFoundError

if TYPE_CHECKING:
    from types import TracebackType

    from gh_release_notes.github.identity import RepositoryIdentity

API_VERSION = "2022-11-28"


class GitHubClient:
    """Fetches published releases of one repository.

    Args:
        identity: Repository to read releases from
        config: API settings (defaults to GitHubConfig())
        http_client: Pre-built httpx client; the caller keeps ownership

    Example:
        with GitHubClient(parse_github_url("owner/repo")) as client:
            releases = client.fetch_releases()
    """

    def __init__(
        self,
        identity: RepositoryIdentity,
        config: GitHubConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.identity = identity
        self.config = config or GitHubConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            base_url=self.config.api_url,
            timeout=self.config.timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "User-Agent": self.config.user_agent,
                "X-GitHub-Api-Version": API_VERSION,
            },
        )

    @property
    def releases_url(self) -> str:
        api_url = self.config.api_url.rstrip("/")
        return f"{api_url}/repos/{self.identity.owner}/{self.identity.repo}/releases"

    def fetch_releases(self) -> list[Release]:
        """Fetch published releases, most recent first as GitHub returns them.

        Draft releases are dropped.

        Returns:
            List of releases

        Raises:
            RepositoryNotFoundError: If GitHub answers 404
            GitHubAPIError: On any other failure
        """
        try:
            response = self._client.get(
                self.releases_url,
                params={"per_page": self.config.per_page},
            )
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"Failed to fetch releases: {e}") from e

        if response.status_code == 404:
            raise RepositoryNotFoundError(
                f"Repository not found: {self.identity}",
                status_code=404,
            )
        if not response.is_success:
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON in GitHub response: {e}") from e

        if not isinstance(payload, list):
            raise GitHubAPIError("Unexpected GitHub response: expected a list of releases")

        try:
            releases = [Release.from_api(item) for item in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise GitHubAPIError(f"Malformed release in GitHub response: {e}") from e

        return [release for release in releases if not release.draft]

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
