"""Platform selection shared across sepaware modules.

Every helper works under one of two path conventions. The process-wide
default is detected once at import, while callers and tests can pass an
explicit :class:`PathPlatform` to exercise either convention on any host.
"""

from __future__ import annotations

import enum
import logging
import os
import sys
import typing as t

logger = logging.getLogger(__name__)

# Tests and embedding applications set this override to emulate alternative
# platforms (for example Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "SEPAWARE_PLATFORM_OVERRIDE"

# ``sys.platform`` prefixes and ``os.name`` values that select Windows rules.
_WINDOWS_PREFIXES: t.Final[tuple[str, ...]] = ("win",)
_WINDOWS_NAMES: t.Final[frozenset[str]] = frozenset({"nt"})


class PathPlatform(enum.Enum):
    """Path convention applied by the helpers in :mod:`sepaware.paths`."""

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def sep(self) -> str:
        """Return the native separator for this convention."""
        return "\\" if self is PathPlatform.WINDOWS else "/"

    @property
    def is_windows(self) -> bool:
        """Return ``True`` when drive letters and UNC roots are recognised."""
        return self is PathPlatform.WINDOWS


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform_name(platform: str | None = None) -> str:
    """Return the effective platform name, honouring the override variable."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        logger.debug(
            "Platform override %s=%r in effect", PLATFORM_OVERRIDE_ENV, override
        )
        return _normalise(override)

    return _normalise(sys.platform)


def detect_platform(platform: str | None = None) -> PathPlatform:
    """Map *platform* (default: the running interpreter) to a path convention."""
    name = _current_platform_name(platform)
    if name in _WINDOWS_NAMES or name.startswith(_WINDOWS_PREFIXES):
        return PathPlatform.WINDOWS
    return PathPlatform.POSIX


DEFAULT_PLATFORM: t.Final[PathPlatform] = detect_platform()
logger.debug("Default path platform fixed to %s", DEFAULT_PLATFORM.name)


def resolve_platform(platform: PathPlatform | None = None) -> PathPlatform:
    """Return *platform* when given, otherwise :data:`DEFAULT_PLATFORM`."""
    return DEFAULT_PLATFORM if platform is None else platform


__all__ = [
    "DEFAULT_PLATFORM",
    "PLATFORM_OVERRIDE_ENV",
    "PathPlatform",
    "detect_platform",
    "resolve_platform",
]
