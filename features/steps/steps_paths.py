"""Step definitions for path helper behavioural tests."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import typing as t

from behave import given, then, when  # type: ignore[attr-defined]

from sepaware.errors import InvalidArgumentError
from sepaware.paths import PathHelper


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    helper: PathHelper
    result: str
    rooted: bool
    error: InvalidArgumentError | None


@given('the "{name}" path convention')
def step_select_convention(context: BehaveContext, name: str) -> None:
    """Bind helpers to the convention used by *name*."""
    context.helper = PathHelper.for_platform(name)


@when('I take the dirname of "{path}"')
def step_dirname(context: BehaveContext, path: str) -> None:
    """Compute the parent of *path*."""
    context.result = context.helper.dirname(path)


@when('I normalize the separators of "{path}"')
def step_normalize(context: BehaveContext, path: str) -> None:
    """Normalise separators in *path*."""
    context.result = context.helper.normalize_separators(path)


@when('I trim the trailing separator of "{path}"')
def step_trim(context: BehaveContext, path: str) -> None:
    """Trim a redundant trailing separator from *path*."""
    context.result = context.helper.safe_trim_trailing_separator(path)


@when('I check whether "{path}" is rooted')
def step_check_rooted(context: BehaveContext, path: str) -> None:
    """Classify *path* as rooted or relative."""
    context.rooted = context.helper.is_rooted(path)


@when('I root "{path}" at "{root}"')
def step_root(context: BehaveContext, path: str, root: str) -> None:
    """Ensure *path* is rooted beneath *root*."""
    context.result = context.helper.ensure_rooted(root, path)


@when("I check whether an empty path is rooted")
def step_check_empty_rooted(context: BehaveContext) -> None:
    """Capture the error raised for an empty path."""
    context.error = None
    try:
        context.helper.is_rooted("")
    except InvalidArgumentError as exc:
        context.error = exc


@when('I root "{path}" at an empty root')
def step_root_at_empty(context: BehaveContext, path: str) -> None:
    """Capture the error raised for an empty root."""
    context.error = None
    try:
        context.helper.ensure_rooted("", path)
    except InvalidArgumentError as exc:
        context.error = exc


@then('the result should be "{expected}"')
def step_check_result(context: BehaveContext, expected: str) -> None:
    """Compare the last computed path with *expected*."""
    assert context.result == expected  # noqa: S101


@then("the path should be rooted")
def step_is_rooted(context: BehaveContext) -> None:
    """Assert the last classification was rooted."""
    assert context.rooted is True  # noqa: S101


@then("the path should not be rooted")
def step_is_not_rooted(context: BehaveContext) -> None:
    """Assert the last classification was relative."""
    assert context.rooted is False  # noqa: S101


@then('an invalid argument error should name parameter "{parameter}"')
def step_check_error_parameter(context: BehaveContext, parameter: str) -> None:
    """The captured error identifies the empty parameter."""
    assert context.error is not None, "expected InvalidArgumentError"  # noqa: S101
    assert context.error.parameter == parameter  # noqa: S101
