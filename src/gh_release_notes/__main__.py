"""Allow running as ``python -m gh_release_notes``."""

from __future__ import annotations

from gh_release_notes.cli import main

if __name__ == "__main__":
    main()
