"""Configuration loading from pyproject.toml and the environment."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from gh_release_notes.config.models import ReleaseNotesConfig
from gh_release_notes.exceptions import ConfigNotFoundError, ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

TOOL_NAME = "gh-release-notes"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "GH_RELEASE_NOTES_API_URL": ("github", "api_url"),
    "GH_RELEASE_NOTES_TIMEOUT": ("github", "timeout"),
}


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find the nearest pyproject.toml, searching upwards.

    Args:
        start: Directory to start from (defaults to cwd)

    Returns:
        Path to pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the root
    """
    directory = (start or Path.cwd()).resolve()
    for candidate in (directory, *directory.parents):
        pyproject = candidate / "pyproject.toml"
        if pyproject.is_file():
            return pyproject

    raise ConfigNotFoundError(f"No pyproject.toml found in {directory} or its parents")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_tool_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.gh-release-notes]`` table, or an empty dict."""
    return dict(pyproject.get("tool", {}).get(TOOL_NAME, {}))


def apply_env_overrides(
    data: dict[str, Any],
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Overlay supported environment variables onto raw config data."""
    env = os.environ if env is None else env
    merged = {
        section: dict(values) if isinstance(values, dict) else values
        for section, values in data.items()
    }

    for variable, (section, key) in ENV_OVERRIDES.items():
        value = env.get(variable)
        if not value:
            continue
        table = merged.setdefault(section, {})
        if not isinstance(table, dict):
            raise ConfigValidationError(f"[tool.{TOOL_NAME}.{section}] must be a table")
        table[key] = value

    return merged


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ReleaseNotesConfig:
    """Load configuration.

    Args:
        path: A TOML file to read, or a directory to search upwards from.
            When no pyproject.toml is found, defaults are used.
        env: Environment to read overrides from (defaults to os.environ)

    Returns:
        Validated configuration

    Raises:
        ConfigNotFoundError: If ``path`` names a file that does not exist
        ConfigValidationError: If the configuration is invalid
    """
    if path is not None and not path.is_dir():
        data = extract_tool_config(load_pyproject_toml(path))
    else:
        try:
            pyproject_path = find_pyproject_toml(path)
        except ConfigNotFoundError:
            data = {}
        else:
            data = extract_tool_config(load_pyproject_toml(pyproject_path))

    data = apply_env_overrides(data, env)

    try:
        return ReleaseNotesConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e
