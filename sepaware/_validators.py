"""Shared validation helpers."""

from __future__ import annotations

from .errors import InvalidArgumentError


def require_non_empty(value: str | None, *, function: str, parameter: str) -> str:
    """Return *value* or raise :class:`InvalidArgumentError` when it is empty."""
    if not value:
        raise InvalidArgumentError(function, parameter)
    return value
