"""Unit tests for platform detection and resolution."""

from __future__ import annotations

import pytest

import sepaware.platform as platform
from sepaware.paths import PathHelper
from sepaware.platform import PathPlatform


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("win32", PathPlatform.WINDOWS),
        ("nt", PathPlatform.WINDOWS),
        ("  Win32 ", PathPlatform.WINDOWS),
        ("linux", PathPlatform.POSIX),
        ("darwin", PathPlatform.POSIX),
        ("cygwin", PathPlatform.POSIX),
        ("unknown-os", PathPlatform.POSIX),
    ],
)
def test_detect_platform_maps_names(name: str, expected: PathPlatform) -> None:
    """Explicit platform names map onto the two path conventions."""
    assert platform.detect_platform(name) is expected


def test_override_env_forces_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    """The override variable wins over ``sys.platform``."""
    monkeypatch.setattr(platform.sys, "platform", "linux")
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")
    assert platform.detect_platform() is PathPlatform.WINDOWS


def test_override_env_forces_posix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Overrides can simulate POSIX on a Windows host as well."""
    monkeypatch.setattr(platform.sys, "platform", "win32")
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "linux")
    assert platform.detect_platform() is PathPlatform.POSIX


def test_explicit_name_ignores_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """A name passed by the caller takes precedence over the environment."""
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")
    assert platform.detect_platform("linux") is PathPlatform.POSIX


def test_detect_platform_falls_back_to_sys_platform(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Without an override the interpreter's platform decides."""
    monkeypatch.delenv(platform.PLATFORM_OVERRIDE_ENV, raising=False)
    monkeypatch.setattr(platform.sys, "platform", "win32")
    assert platform.detect_platform() is PathPlatform.WINDOWS


def test_override_is_logged(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Applying the override leaves a debug breadcrumb."""
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, "win32")
    with caplog.at_level("DEBUG", logger="sepaware.platform"):
        platform.detect_platform()
    assert platform.PLATFORM_OVERRIDE_ENV in caplog.text


def test_resolve_platform_defaults_to_process_platform() -> None:
    """``None`` resolves to the mode fixed at import time."""
    assert platform.resolve_platform(None) is platform.DEFAULT_PLATFORM
    assert platform.resolve_platform(PathPlatform.WINDOWS) is PathPlatform.WINDOWS


@pytest.mark.parametrize(
    ("mode", "sep", "is_windows"),
    [
        (PathPlatform.POSIX, "/", False),
        (PathPlatform.WINDOWS, "\\", True),
    ],
)
def test_platform_properties(
    mode: PathPlatform, sep: str, is_windows: bool  # noqa: FBT001
) -> None:
    """Each convention exposes its separator and Windows flag."""
    assert mode.sep == sep
    assert mode.is_windows is is_windows


def test_default_platform_ignores_later_overrides(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Changing the environment after import leaves the default mode alone."""
    default = platform.DEFAULT_PLATFORM
    opposite = "linux" if default is PathPlatform.WINDOWS else "win32"
    monkeypatch.setenv(platform.PLATFORM_OVERRIDE_ENV, opposite)

    assert platform.detect_platform() is not default
    assert platform.DEFAULT_PLATFORM is default
    assert platform.resolve_platform(None) is default
    assert PathHelper().platform is default
