r"""Separator normalisation and root classification for path strings.

Every helper is a pure string transform. Nothing here touches the
filesystem, so results depend only on the arguments and the selected
:class:`~sepaware.platform.PathPlatform`.

On POSIX::

    /          => dirname => /
    /hello     => dirname => /

On Windows::

    C:\            => dirname => C:\
    C:\hello       => dirname => C:\
    C:hello        => dirname => C:
    \hello         => dirname => \
    \\hello        => dirname => \\hello
    \\hello\world  => dirname => \\hello\world
"""

from __future__ import annotations

import dataclasses as dc
import logging
import ntpath
import posixpath

from . import _patterns as patterns
from ._validators import require_non_empty
from .platform import DEFAULT_PLATFORM, PathPlatform, detect_platform, resolve_platform

logger = logging.getLogger(__name__)


def normalize_separators(p: str | None, *, platform: PathPlatform | None = None) -> str:
    r"""Collapse redundant separators and convert ``/`` to ``\`` on Windows.

    ``None`` and the empty string both normalise to ``""``. A leading ``\\``
    survives on Windows so UNC paths keep their marker.
    """
    p = p or ""
    mode = resolve_platform(platform)

    if not mode.is_windows:
        return patterns.REDUNDANT_SLASHES.sub("/", p)

    p = p.replace("/", "\\")
    collapsed = patterns.REDUNDANT_BACKSLASHES.sub(r"\\", p)
    if patterns.UNC_PREFIX.match(p):
        # Collapsing reduced the UNC marker to a single separator.
        return "\\" + collapsed
    return collapsed


def safe_trim_trailing_separator(
    p: str | None, *, platform: PathPlatform | None = None
) -> str:
    r"""Normalise separators and drop a trailing separator when safe.

    ``/foo/`` becomes ``/foo`` but ``/`` stays ``/``. On Windows the drive
    root ``C:\`` is also left alone.
    """
    if not p:
        return ""

    mode = resolve_platform(platform)
    p = normalize_separators(p, platform=mode)

    if not p.endswith(mode.sep):
        return p

    if p == mode.sep:
        return p

    if mode.is_windows and patterns.DRIVE_ROOT.match(p):
        return p

    return p[:-1]


def is_rooted(p: str, *, platform: PathPlatform | None = None) -> bool:
    r"""Return ``True`` when *p* is absolute under the selected convention.

    On POSIX the path must start with ``/``. On Windows ``\``, ``\hello``,
    ``\\hello\share``, ``C:`` and ``C:\hello`` all count as rooted, with
    either separator accepted.

    Raises
    ------
    InvalidArgumentError
        If *p* is empty.
    """
    require_non_empty(p, function="is_rooted", parameter="p")
    mode = resolve_platform(platform)
    p = normalize_separators(p, platform=mode)

    if mode.is_windows:
        return p.startswith("\\") or patterns.DRIVE_PREFIX.match(p) is not None

    return p.startswith("/")


def ensure_rooted(root: str, p: str, *, platform: PathPlatform | None = None) -> str:
    r"""Prefix *p* with *root* unless *p* is already rooted.

    A rooted *p* is returned verbatim. On Windows a bare drive such as
    ``C:`` is joined without a separator, giving the drive-relative
    ``C:hello``. Otherwise a separator is inserted when *root* lacks one.
    The result is not normalised.

    Raises
    ------
    InvalidArgumentError
        If *root* or *p* is empty.
    """
    require_non_empty(root, function="ensure_rooted", parameter="root")
    require_non_empty(p, function="ensure_rooted", parameter="p")
    mode = resolve_platform(platform)

    if is_rooted(p, platform=mode):
        return p

    if mode.is_windows and patterns.DRIVE_ONLY.match(root):
        logger.debug("Joining %r to drive-relative root %r", p, root)
        return root + p

    if not (root.endswith("/") or (mode.is_windows and root.endswith("\\"))):
        root += mode.sep

    return root + p


def dirname(p: str | None, *, platform: PathPlatform | None = None) -> str:
    r"""Return the parent of *p*, keeping filesystem and UNC roots intact.

    Behaves like :func:`os.path.dirname` for the selected convention, but
    normalises separators first and treats ``\\server`` and
    ``\\server\share`` as their own parents.
    """
    mode = resolve_platform(platform)
    p = safe_trim_trailing_separator(p, platform=mode)

    if mode.is_windows and patterns.UNC_ROOT.match(p):
        logger.debug("UNC root %r is its own parent", p)
        return p

    if not mode.is_windows:
        return posixpath.dirname(p)

    result = ntpath.dirname(p)
    # ntpath keeps the separator after the share, e.g. \\hello\world\
    if patterns.UNC_ROOT_TRAILING_SEP.match(result):
        result = safe_trim_trailing_separator(result, platform=mode)
    return result


@dc.dataclass(frozen=True, slots=True)
class PathHelper:
    """
    Path helpers bound to a single :class:`PathPlatform`.

    Attributes
    ----------
    platform : PathPlatform
        Convention applied by every method. Defaults to the process-wide
        :data:`~sepaware.platform.DEFAULT_PLATFORM`.
    """

    platform: PathPlatform = DEFAULT_PLATFORM

    @classmethod
    def for_platform(cls, name: str) -> PathHelper:
        """Build a helper from a ``sys.platform`` style *name*."""
        return cls(detect_platform(name))

    @property
    def sep(self) -> str:
        """Return the native separator of the bound convention."""
        return self.platform.sep

    def dirname(self, p: str | None) -> str:
        """See :func:`dirname`."""
        return dirname(p, platform=self.platform)

    def ensure_rooted(self, root: str, p: str) -> str:
        """See :func:`ensure_rooted`."""
        return ensure_rooted(root, p, platform=self.platform)

    def is_rooted(self, p: str) -> bool:
        """See :func:`is_rooted`."""
        return is_rooted(p, platform=self.platform)

    def normalize_separators(self, p: str | None) -> str:
        """See :func:`normalize_separators`."""
        return normalize_separators(p, platform=self.platform)

    def safe_trim_trailing_separator(self, p: str | None) -> str:
        """See :func:`safe_trim_trailing_separator`."""
        return safe_trim_trailing_separator(p, platform=self.platform)


__all__ = [
    "PathHelper",
    "dirname",
    "ensure_rooted",
    "is_rooted",
    "normalize_separators",
    "safe_trim_trailing_separator",
]
