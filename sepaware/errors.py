"""Exception types raised by sepaware."""

from __future__ import annotations


class SepAwareError(Exception):
    """Base class for sepaware errors."""


class InvalidArgumentError(SepAwareError, ValueError):
    """
    Raised when a required path argument is empty.

    Parameters
    ----------
    function : str
        Name of the public helper whose precondition failed.
    parameter : str
        Name of the offending parameter.

    Attributes
    ----------
    function : str
        Name of the public helper whose precondition failed.
    parameter : str
        Name of the offending parameter.
    """

    def __init__(self, function: str, parameter: str) -> None:
        msg = f"{function} parameter {parameter!r} must not be empty"
        super().__init__(msg)
        self.function = function
        self.parameter = parameter


__all__ = ["InvalidArgumentError", "SepAwareError"]
