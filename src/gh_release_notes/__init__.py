"""gh-release-notes: merged release notes from GitHub releases between two versions."""

from __future__ import annotations

__version__ = "1.0.0"
