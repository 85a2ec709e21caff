"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import sepaware.platform


@pytest.fixture(autouse=True)
def isolate_platform_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Clear the platform override for calls to ``detect_platform()``.

    ``DEFAULT_PLATFORM`` was fixed when ``sepaware.platform`` was first
    imported, so a host-level override still decides the default mode.
    """
    monkeypatch.delenv(sepaware.platform.PLATFORM_OVERRIDE_ENV, raising=False)
    yield
