"""Compiled patterns recognising Windows drive and UNC shapes.

Patterns assume separators were already normalised to backslashes. Drive
letters are matched case-insensitively and only in the ASCII range.
"""

from __future__ import annotations

import re
import typing as t

# ``\\server`` with any number of leading separators before the first name.
UNC_PREFIX: t.Final[re.Pattern[str]] = re.compile(r"^\\{2,}[^\\]")

# ``\\server`` or ``\\server\share`` with nothing after the share.
UNC_ROOT: t.Final[re.Pattern[str]] = re.compile(r"^\\\\[^\\]+(?:\\[^\\]+)?\Z")

# ``\\server\share\`` as left behind by ``ntpath.dirname``.
UNC_ROOT_TRAILING_SEP: t.Final[re.Pattern[str]] = re.compile(
    r"^\\\\[^\\]+\\[^\\]+\\\Z"
)

# ``C:`` as a prefix, e.g. ``C:`` ``C:hello`` ``C:\hello``.
DRIVE_PREFIX: t.Final[re.Pattern[str]] = re.compile(
    r"^[A-Z]:", re.IGNORECASE | re.ASCII
)

# Exactly ``C:`` with no separator (drive-relative reference).
DRIVE_ONLY: t.Final[re.Pattern[str]] = re.compile(
    r"^[A-Z]:\Z", re.IGNORECASE | re.ASCII
)

# Exactly ``C:\`` (drive root).
DRIVE_ROOT: t.Final[re.Pattern[str]] = re.compile(
    r"^[A-Z]:\\\Z", re.IGNORECASE | re.ASCII
)

REDUNDANT_BACKSLASHES: t.Final[re.Pattern[str]] = re.compile(r"\\{2,}")
REDUNDANT_SLASHES: t.Final[re.Pattern[str]] = re.compile(r"/{2,}")
