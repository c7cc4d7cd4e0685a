"""
Result pattern for explicit error handling.

This module provides a Result type that makes error handling explicit
by returning either a Success or Failure value instead of raising exceptions.

Example:
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Failure("Division by zero")
    ...     return Success(a / b)
    ...
    >>> divide(10, 2).map(lambda x: x * 2).fold(str, lambda e: f"Error: {e}")
    '10.0'
    >>> str(divide(1, 0))
    'Failure: Division by zero'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Never

from outcome.errors import InvalidResultStateError, UnwrappedFailureError

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class Success[T]:
    """
    Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def __str__(self) -> str:
        """Return ``Success: <value>``."""
        return f"Success: {self.value}"

    def is_success(self) -> bool:
        """Return True if this is a Success."""
        return True

    def is_failure(self) -> bool:
        """Return False if this is a Success."""
        return False

    @property
    def success(self) -> Success[T]:
        """This Success itself."""
        return self

    @property
    def failure(self) -> None:
        """Always None for a Success."""
        return None

    def get_or_none(self) -> T:
        """Return the success value."""
        return self.value

    def get_or_throw(self) -> T:
        """
        Return the success value.

        Returns:
            The contained success value.
        """
        return self.value

    def get_failure_or_throw(self) -> Never:
        """
        Raise, since a Success has no failure value.

        Raises:
            InvalidResultStateError: Always.
        """
        raise InvalidResultStateError

    def get_or_else(self, or_else: Callable[[], T]) -> T:
        """
        Return the success value without calling the fallback.

        Args:
            or_else: Fallback factory (not called for Success).

        Returns:
            The contained success value.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:
        """
        Return the success value (ignores default).

        Args:
            default: Default value (ignored for Success).

        Returns:
            The contained success value.
        """
        return self.value

    def fold[U](self, on_success: Callable[[T], U], on_failure: Callable[..., U]) -> U:
        """
        Collapse the result by applying ``on_success`` to the value.

        Args:
            on_success: Function applied to the success value.
            on_failure: Function for the failure branch (not called).

        Returns:
            Whatever ``on_success`` returns.
        """
        return on_success(self.value)

    def match(
        self,
        on_success: Callable[[T], object] | None = None,
        on_failure: Callable[..., object] | None = None,
    ) -> None:
        """
        Run ``on_success`` with the value if it was given.

        Args:
            on_success: Side-effecting callback for the success value.
            on_failure: Callback for the failure branch (not called).
        """
        if on_success is not None:
            on_success(self.value)

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call ``func`` with the success value."""
        func(self.value)

    def map[U](self, func: Callable[[T], U]) -> Success[U]:
        """
        Apply a function to the success value.

        Args:
            func: Function to apply to the value.

        Returns:
            New Success with the mapped value.
        """
        return Success(func(self.value))

    def map_failure[E, U](self, func: Callable[[E], U]) -> Success[T]:
        """
        Do nothing for Success (error mapping doesn't apply).

        Args:
            func: Function to apply to error (not used).

        Returns:
            Self unchanged.
        """
        return self

    def flat_map[U, E](self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Apply a Result-producing function to the success value.

        The returned Result is passed back as is, never nested.

        Args:
            func: Function from the value to a new Result.

        Returns:
            The Result produced by ``func``.
        """
        return func(self.value)


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """
    Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def __str__(self) -> str:
        """Return ``Failure: <error>``."""
        return f"Failure: {self.error}"

    def is_success(self) -> bool:
        """Return False if this is a Failure."""
        return False

    def is_failure(self) -> bool:
        """Return True if this is a Failure."""
        return True

    @property
    def success(self) -> None:
        """Always None for a Failure."""
        return None

    @property
    def failure(self) -> Failure[E]:
        """This Failure itself."""
        return self

    def get_or_none(self) -> None:
        """Return None since there is no success value."""
        return None

    def get_or_throw(self) -> Never:
        """
        Raise the stored error.

        Raises:
            BaseException: The stored error itself, when it is an exception.
            UnwrappedFailureError: Wrapping any other error payload.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrappedFailureError(self.error)

    def get_failure_or_throw(self) -> E:
        """
        Return the error value.

        Returns:
            The contained error value.
        """
        return self.error

    def get_or_else[T](self, or_else: Callable[[], T]) -> T:
        """
        Return the value produced by the fallback factory.

        Args:
            or_else: Called only now, to produce the replacement value.

        Returns:
            Whatever ``or_else`` returns.
        """
        return or_else()

    def unwrap_or[T](self, default: T) -> T:
        """
        Return the default value since this is a Failure.

        Args:
            default: Default value to return.

        Returns:
            The provided default value.
        """
        return default

    def fold[U](self, on_success: Callable[..., U], on_failure: Callable[[E], U]) -> U:
        """
        Collapse the result by applying ``on_failure`` to the error.

        Args:
            on_success: Function for the success branch (not called).
            on_failure: Function applied to the error value.

        Returns:
            Whatever ``on_failure`` returns.
        """
        return on_failure(self.error)

    def match(
        self,
        on_success: Callable[..., object] | None = None,
        on_failure: Callable[[E], object] | None = None,
    ) -> None:
        """
        Run ``on_failure`` with the error if it was given.

        Args:
            on_success: Callback for the success branch (not called).
            on_failure: Side-effecting callback for the error value.
        """
        if on_failure is not None:
            on_failure(self.error)

    def for_each(self, func: Callable[..., object]) -> None:
        """Do nothing for Failure."""

    def map[T, U](self, func: Callable[[T], U]) -> Failure[E]:
        """
        Do nothing for Failure (value mapping doesn't apply).

        Args:
            func: Function to apply to value (not used).

        Returns:
            Self unchanged.
        """
        return self

    def map_failure[U](self, func: Callable[[E], U]) -> Failure[U]:
        """
        Apply a function to the error value.

        Args:
            func: Function to apply to the error.

        Returns:
            New Failure with the mapped error.
        """
        return Failure(func(self.error))

    def flat_map[T, U](self, func: Callable[[T], Result[U, E]]) -> Failure[E]:
        """
        Do nothing for Failure; the continuation is never called.

        Args:
            func: Result-producing function (not used).

        Returns:
            Self unchanged.
        """
        return self


# Type alias for Result
type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """
    Create a Success result.

    Args:
        value: The success value.

    Returns:
        A Success containing the value.
    """
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """
    Create a Failure result.

    Args:
        error: The error value.

    Returns:
        A Failure containing the error.
    """
    return Failure(error)
