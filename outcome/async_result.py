"""
AsyncResult: the Result algebra lifted over a pending computation.

An AsyncResult wraps an awaitable that eventually yields a Result.
Transformations (``map``, ``map_failure``, ``flat_map``) return a new
AsyncResult immediately and run once the wrapped awaitable settles;
eliminators (``fold``, ``match``, ``get_or_throw``...) are coroutines.

Example:
    >>> async def fetch_user(user_id: int) -> Result[str, str]:
    ...     return Success("john") if user_id == 1 else Failure("not found")
    ...
    >>> async def main() -> str:
    ...     return await AsyncResult(fetch_user(1)).map(str.upper).get_or_else(lambda: "?")
"""

from __future__ import annotations

import asyncio
import functools
import inspect
from typing import TYPE_CHECKING

from outcome.result import Failure

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine, Generator

    from outcome.result import Result


class AsyncResult[T, E]:
    """
    Awaitable wrapper around a pending Result.

    The wrapped awaitable is scheduled on the running loop the first time
    this object is awaited, and every later await, concurrent or not, shares
    that one future. Errors raised while it settles are not captured; each
    awaiter sees the same exception.

    Attributes:
        _awaitable: The pending computation producing the Result.
        _future: The scheduled computation, once awaited.
        _settled: The Result once it is available.
    """

    __slots__ = ("_awaitable", "_future", "_settled")

    def __init__(
        self,
        awaitable: Awaitable[Result[T, E]] | None = None,
        *,
        result: Result[T, E] | None = None,
    ) -> None:
        """
        Wrap a pending Result, or an already settled one.

        Args:
            awaitable: Coroutine, task or future that yields a Result.
            result: A settled Result, used instead of ``awaitable``.

        Raises:
            TypeError: Unless exactly one of ``awaitable`` and ``result`` is given.
        """
        if (awaitable is None) == (result is None):
            msg = "AsyncResult needs exactly one of awaitable or result"
            raise TypeError(msg)
        self._awaitable = awaitable
        self._future: asyncio.Future[Result[T, E]] | None = None
        self._settled = result

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Lift an already settled Result."""
        return cls(result=result)

    def __await__(self) -> Generator[object, None, Result[T, E]]:
        return self._settle().__await__()

    def __repr__(self) -> str:
        if self._settled is None:
            return "AsyncResult(<pending>)"
        return f"AsyncResult({self._settled!r})"

    async def _settle(self) -> Result[T, E]:
        if self._settled is not None:
            return self._settled
        if self._future is None:
            self._future = asyncio.ensure_future(self._awaitable)
            self._awaitable = None
        result = await self._future
        self._settled = result
        return result

    # Transformations

    def map[U](self, func: Callable[[T], U]) -> AsyncResult[U, E]:
        """
        Map the success value once the Result settles.

        Args:
            func: Function to apply to the value.

        Returns:
            AsyncResult of the mapped Result.
        """

        async def run() -> Result[U, E]:
            return (await self).map(func)

        return AsyncResult(run())

    def map_failure[U](self, func: Callable[[E], U]) -> AsyncResult[T, U]:
        """
        Map the error value once the Result settles.

        Args:
            func: Function to apply to the error.

        Returns:
            AsyncResult of the mapped Result.
        """

        async def run() -> Result[T, U]:
            return (await self).map_failure(func)

        return AsyncResult(run())

    def flat_map[U](
        self,
        func: Callable[[T], Result[U, E] | Awaitable[Result[U, E]]],
    ) -> AsyncResult[U, E]:
        """
        Chain a fallible step, synchronous or asynchronous.

        ``func`` may return a Result, or anything awaitable that yields one
        (a coroutine or another AsyncResult). One level of pending-ness is
        removed so the outcome is never a nested Result. ``func`` is not
        called when the settled Result is a Failure.

        Args:
            func: Continuation applied to the success value.

        Returns:
            AsyncResult of the continuation's Result.
        """

        async def run() -> Result[U, E]:
            result = await self
            if isinstance(result, Failure):
                return result
            produced = func(result.value)
            if inspect.isawaitable(produced):
                return await produced
            return produced

        return AsyncResult(run())

    # Eliminators

    async def fold[U](
        self,
        on_success: Callable[[T], U],
        on_failure: Callable[[E], U],
    ) -> U:
        """Apply exactly one of the two functions to the settled Result."""
        return (await self).fold(on_success, on_failure)

    async def match(
        self,
        on_success: Callable[[T], object] | None = None,
        on_failure: Callable[[E], object] | None = None,
    ) -> None:
        """Run the callback matching the settled variant, if given."""
        (await self).match(on_success=on_success, on_failure=on_failure)

    async def for_each(self, func: Callable[[T], object]) -> None:
        """Call ``func`` with the success value, if any."""
        (await self).for_each(func)

    async def is_success(self) -> bool:
        """Return True if the settled Result is a Success."""
        return (await self).is_success()

    async def is_failure(self) -> bool:
        """Return True if the settled Result is a Failure."""
        return (await self).is_failure()

    async def get_or_none(self) -> T | None:
        """Return the success value, or None for a Failure."""
        return (await self).get_or_none()

    async def get_or_throw(self) -> T:
        """
        Return the success value.

        Raises:
            BaseException: The stored error, when the Result is a Failure.
            UnwrappedFailureError: When the stored error is not an exception.
        """
        return (await self).get_or_throw()

    async def get_failure_or_throw(self) -> E:
        """
        Return the error value.

        Raises:
            InvalidResultStateError: When the Result is a Success.
        """
        return (await self).get_failure_or_throw()

    async def get_or_else(self, or_else: Callable[[], T]) -> T:
        """Return the success value or, for a Failure, ``or_else()``."""
        return (await self).get_or_else(or_else)

    async def unwrap_or(self, default: T) -> T:
        """Return the success value or ``default``."""
        return (await self).unwrap_or(default)


def async_result[**P, T, E](
    func: Callable[P, Coroutine[object, object, Result[T, E]]],
) -> Callable[P, AsyncResult[T, E]]:
    """
    Decorate a coroutine function so that it returns an AsyncResult.

    Example:
        >>> @async_result
        ... async def load(key: str) -> Result[int, str]:
        ...     return Success(len(key))
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> AsyncResult[T, E]:
        return AsyncResult(func(*args, **kwargs))

    return wrapper

