"""Configuration helpers for loading environment variables.

This module ensures that variables defined in a project-level ``.env`` file
are loaded before attempting to access them.  The user preference and platform
capability lookups that feed a menu's :class:`~stationmenu.model.CapabilityFlags`
are built on top of :func:`get_env` so that configuration is read in a single,
well-defined place.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .model import CapabilityFlags

LOGGER = logging.getLogger(__name__)

PLAY_EXTERNAL_KEY = "STATIONMENU_PLAY_EXTERNAL"
PLATFORM_API_LEVEL_KEY = "STATIONMENU_PLATFORM_API_LEVEL"

# First platform release that supports pinned shortcuts.
SHORTCUT_MIN_API_LEVEL = 27

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    The loader first attempts to read ``.env`` from the repository root.  If the
    file does not exist we still call :func:`load_dotenv` to allow the default
    discovery mechanism to run.  Subsequent calls are cached so the file is only
    read once per process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def get_bool_env(key: str, default: bool = False) -> bool:
    """Return ``key`` interpreted as a boolean flag."""

    raw = get_env(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    LOGGER.warning("Ignoring unparseable boolean %s=%r, using %s", key, raw, default)
    return default


@dataclass(frozen=True)
class PreferenceSource:
    """Read-only access to the user's playback preference."""

    key: str = PLAY_EXTERNAL_KEY

    def prefer_external_player(self) -> bool:
        return get_bool_env(self.key, default=False)


@dataclass(frozen=True)
class PlatformProbe:
    """Derive platform capabilities from the host API level.

    When ``api_level`` is not given it is read from
    ``STATIONMENU_PLATFORM_API_LEVEL``. An unknown level means no support.
    """

    api_level: Optional[int] = None
    shortcut_min_api_level: int = SHORTCUT_MIN_API_LEVEL

    def current_api_level(self) -> Optional[int]:
        if self.api_level is not None:
            return self.api_level
        raw = get_env(PLATFORM_API_LEVEL_KEY)
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw.strip())
        except ValueError:
            LOGGER.warning("Ignoring non-integer %s=%r", PLATFORM_API_LEVEL_KEY, raw)
            return None

    def supports_shortcuts(self) -> bool:
        level = self.current_api_level()
        return level is not None and level >= self.shortcut_min_api_level


def capability_flags(
    preferences: PreferenceSource | None = None,
    probe: PlatformProbe | None = None,
) -> CapabilityFlags:
    """Take a fresh :class:`CapabilityFlags` snapshot."""

    preferences = preferences or PreferenceSource()
    probe = probe or PlatformProbe()
    return CapabilityFlags(
        prefer_external_player=preferences.prefer_external_player(),
        platform_supports_shortcuts=probe.supports_shortcuts(),
    )


__all__ = [
    "PLATFORM_API_LEVEL_KEY",
    "PLAY_EXTERNAL_KEY",
    "SHORTCUT_MIN_API_LEVEL",
    "PlatformProbe",
    "PreferenceSource",
    "capability_flags",
    "get_bool_env",
    "get_env",
]
