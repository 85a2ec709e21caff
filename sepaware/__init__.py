"""Platform-aware normalisation and classification of path strings.

The helpers reconcile POSIX and Windows path conventions (drive letters and
UNC roots included) without touching the filesystem.
"""

from __future__ import annotations

from .errors import InvalidArgumentError, SepAwareError
from .paths import (
    PathHelper,
    dirname,
    ensure_rooted,
    is_rooted,
    normalize_separators,
    safe_trim_trailing_separator,
)
from .platform import (
    DEFAULT_PLATFORM,
    PLATFORM_OVERRIDE_ENV,
    PathPlatform,
    detect_platform,
    resolve_platform,
)

__all__ = [
    "DEFAULT_PLATFORM",
    "PLATFORM_OVERRIDE_ENV",
    "InvalidArgumentError",
    "PathHelper",
    "PathPlatform",
    "SepAwareError",
    "detect_platform",
    "dirname",
    "ensure_rooted",
    "is_rooted",
    "normalize_separators",
    "resolve_platform",
    "safe_trim_trailing_separator",
]
