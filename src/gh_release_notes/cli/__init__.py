"""Command-line interface for gh-release-notes."""

from __future__ import annotations

from gh_release_notes.cli.app import main

__all__ = ["main"]
