"""Configuration models for gh-release-notes.

Settings live under ``[tool.gh-release-notes]`` in pyproject.toml. Every
field has a default, so running without any configuration is fine.

Example:
    [tool.gh-release-notes.github]
    api_url = "https://github.mycompany.com/api/v3"
    timeout = 10

    [tool.gh-release-notes.output]
    date_format = "%d.%m.%Y"
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GitHubConfig(BaseModel):
    """GitHub API access."""

    model_config = ConfigDict(extra="forbid")

    api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the REST API (GitHub Enterprise uses <host>/api/v3)",
    )
    per_page: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Number of releases requested; only one page is fetched",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = "gh-release-notes"


class OutputConfig(BaseModel):
    """Rendering of the merged document."""

    model_config = ConfigDict(extra="forbid")

    date_format: str = Field(default="%Y-%m-%d", description="strftime format of the header date")
    released_format: str = Field(
        default="%a %b %d %Y",
        description="strftime format of each release's publication date",
    )
    empty_body: str = "No release notes provided."


class ReleaseNotesConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
