"""Exceptions raised when a Result is unwrapped against the wrong variant."""

from __future__ import annotations


class ResultError(Exception):
    """Base class for errors raised by the outcome library itself."""


class InvalidResultStateError(ResultError):
    """
    Raised when the failure payload is requested from a Success.

    Carries no payload: a Success has no failure value to hand back.
    """

    def __init__(self, message: str = "Tried to obtain the error value from a success.") -> None:
        super().__init__(message)


class UnwrappedFailureError(ResultError):
    """
    Raised by ``get_or_throw()`` when the failure payload is not an exception.

    Attributes:
        error: The exact failure payload stored in the Failure.
    """

    def __init__(self, error: object) -> None:
        super().__init__(str(error))
        self.error = error
