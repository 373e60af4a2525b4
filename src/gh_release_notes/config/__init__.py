"""Configuration management for gh-release-notes."""

from __future__ import annotations

from gh_release_notes.config.loader import load_config
from gh_release_notes.config.models import (
    GitHubConfig,
    OutputConfig,
    ReleaseNotesConfig,
)

__all__ = [
    "GitHubConfig",
    "OutputConfig",
    "ReleaseNotesConfig",
    "load_config",
]
