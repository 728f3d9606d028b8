"""Configuration for expectkit.

Settings are read from ``[tool.expectkit]`` in the nearest ``pyproject.toml``
and then overridden by ``.env`` files and environment variables:

- ``NO_COLOR``: any non-empty value disables ANSI styling.
- ``EXPECTKIT_INDENT_SIZE``: indent used by the multi-line serializer.
- ``EXPECTKIT_MAX_STRING``: truncate serialized strings longer than this.
- ``EXPECTKIT_PLUGINS``: comma separated modules registering extra matchers.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

PYPROJECT_TABLE = "expectkit"


class ExpectConfig(BaseModel):
    """Resolved expectkit settings.

    Attributes:
    ----------
    no_color : bool
        Render failure messages without ANSI escape codes.
    indent_size : int
        Indentation of the multi-line value serializer.
    max_string : int | None
        Truncate serialized strings beyond this length.
    plugins : list[str]
        Import paths of modules that register additional matchers.
    """

    no_color: bool = False
    indent_size: int = Field(default=2, ge=1)
    max_string: int | None = Field(default=None, ge=1)
    plugins: list[str] = Field(default_factory=list)


_active_config: ExpectConfig | None = None


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` looking for a pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _read_pyproject(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable %s: %s", path, exc)
        return {}
    return dict(data.get("tool", {}).get(PYPROJECT_TABLE, {}))


def _read_environment(environ: Mapping[str, str | None]) -> dict[str, Any]:
    values: dict[str, Any] = {}

    if "NO_COLOR" in environ:
        values["no_color"] = bool(environ["NO_COLOR"])

    for env_name, key in (("EXPECTKIT_INDENT_SIZE", "indent_size"), ("EXPECTKIT_MAX_STRING", "max_string")):
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            values[key] = int(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not an integer", env_name, raw)

    plugins = environ.get("EXPECTKIT_PLUGINS")
    if plugins:
        values["plugins"] = [name.strip() for name in plugins.split(",") if name.strip()]

    return values


def load_config(start: Path | None = None, *, dotenv: bool = True) -> ExpectConfig:
    """Build a configuration from pyproject.toml, .env and the environment."""
    environ: dict[str, str | None] = {}
    dotenv_path = find_dotenv(usecwd=True) if dotenv else ""
    if dotenv_path:
        environ.update(dotenv_values(dotenv_path))
    environ.update(os.environ)

    values = _read_pyproject(find_pyproject(start))
    values.update(_read_environment(environ))

    try:
        return ExpectConfig.model_validate(values)
    except ValidationError as exc:
        logger.warning("Invalid expectkit configuration, using defaults: %s", exc)
        return ExpectConfig()


def get_config() -> ExpectConfig:
    """Return the active configuration, loading it on first use."""
    global _active_config
    if _active_config is None:
        _active_config = load_config()
    return _active_config


def configure(**overrides: Any) -> ExpectConfig:
    """Replace the active configuration with ``overrides`` applied."""
    global _active_config
    _active_config = get_config().model_copy(update=overrides)
    return _active_config


def reset_config() -> None:
    """Forget the active configuration so the next access reloads it."""
    global _active_config
    _active_config = None


__all__ = ["ExpectConfig", "configure", "find_pyproject", "get_config", "load_config", "reset_config"]
