"""Environment configuration and optional ``.env`` loading.

Purpose
-------
Centralise the environment variables the CLI reads and the opt-in loading of
the nearest ``.env`` file through ``python-dotenv``.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle that enables ``.env`` loading.
* :func:`enable_dotenv` – locate and load the nearest ``.env`` once.
* :func:`env_bool` – truthy/falsy parsing shared by CLI options.
* :class:`ConsoleSettings` / :func:`console_settings` – colour controls.

System Role
-----------
Existing environment variables always take precedence over ``.env`` entries;
CLI flags take precedence over both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "BLOCK_HELPERS_USE_DOTENV"
NO_COLOR_ENV_VAR = "BLOCK_HELPERS_NO_COLOR"
FORCE_COLOR_ENV_VAR = "BLOCK_HELPERS_FORCE_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def env_bool(name: str, default: bool = False) -> bool:
    """Interpret the environment variable ``name`` as a boolean.

    Raises
    ------
    ValueError
        When the value is neither truthy nor falsy.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUTHY | _FALSY - {''})}, got {raw!r}")


def enable_dotenv(start: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` above ``start`` (the working directory by default).

    Values already present in the environment are left untouched. The search
    runs once per process; later calls return the path found the first time.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    if _DOTENV_ATTEMPTED:
        return _DOTENV_LOADED
    _DOTENV_ATTEMPTED = True

    if start is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _search_upwards(start)
    if not found:
        logger.debug("no .env file found")
        return None

    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    logger.debug("loaded environment from %s", path)
    return path


def _search_upwards(start: Path) -> str:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    _DOTENV_LOADED = None
    _DOTENV_ATTEMPTED = False


@dataclass(slots=True, frozen=True)
class ConsoleSettings:
    """Colour controls for Rich consoles created by the CLI."""

    force_color: bool = False
    no_color: bool = False


def console_settings(*, force_color: bool | None = None, no_color: bool | None = None) -> ConsoleSettings:
    """Resolve colour settings; explicit arguments win over the environment."""

    resolved_force = env_bool(FORCE_COLOR_ENV_VAR) if force_color is None else force_color
    resolved_no_color = env_bool(NO_COLOR_ENV_VAR) if no_color is None else no_color
    if resolved_force and resolved_no_color:
        raise ValueError("force_color and no_color are mutually exclusive")
    return ConsoleSettings(force_color=resolved_force, no_color=resolved_no_color)


__all__ = [
    "ConsoleSettings",
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "console_settings",
    "enable_dotenv",
    "env_bool",
]
