"""Data model shared by the selection and rendering steps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    # GitHub uses the "Z" suffix, which fromisoformat accepts since 3.11.
    return datetime.fromisoformat(value)


@dataclass(frozen=True, slots=True)
class Release:
    """A published release as reported by GitHub.

    Attributes:
        tag: Git tag the release points at (e.g. "v1.2.0")
        title: Release title, may be empty
        body: Release notes in Markdown, may be empty
        published_at: Publication time, None for unpublished releases
        prerelease: Whether GitHub flags the release as a pre-release
        draft: Whether the release is still a draft
    """

    tag: str
    title: str = ""
    body: str = ""
    published_at: datetime | None = None
    prerelease: bool = False
    draft: bool = False

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> Release:
        """Build a Release from a GitHub REST API release object."""
        return cls(
            tag=payload["tag_name"],
            title=payload.get("name") or "",
            body=payload.get("body") or "",
            published_at=_parse_timestamp(payload.get("published_at")),
            prerelease=bool(payload.get("prerelease", False)),
            draft=bool(payload.get("draft", False)),
        )

    @property
    def display_name(self) -> str:
        return self.title or self.tag
