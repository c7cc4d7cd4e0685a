"""
Guarded execution: turn raised exceptions into Failure values.

Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
``SystemExit`` and ``asyncio.CancelledError`` propagate untouched.
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING

from pydantic import ValidationError

from outcome.async_result import AsyncResult
from outcome.config import get_settings
from outcome.logging import get_logger
from outcome.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from types import TracebackType

    from outcome.result import Result

    type ErrorMapper[E] = Callable[[Exception, TracebackType | None], E]

logger = get_logger(__name__)


def _log_captured_errors() -> bool:
    try:
        return get_settings().log_captured_errors
    except ValidationError:
        # Invalid settings surface through configure_logging, never here.
        return False


def _capture[E](exc: Exception, on_error: ErrorMapper[E], run: object) -> Failure[E]:
    if _log_captured_errors():
        target = getattr(run, "func", run)
        logger.debug(
            "Guarded call raised",
            callable=getattr(target, "__qualname__", repr(target)),
            error_type=type(exc).__name__,
            error=str(exc),
        )
    return Failure(on_error(exc, exc.__traceback__))


def try_catch[T, E](run: Callable[[], T], on_error: ErrorMapper[E]) -> Result[T, E]:
    """
    Run ``run`` and wrap its outcome in a Result.

    Args:
        run: Zero-argument callable to execute.
        on_error: Maps the raised exception and its traceback to a failure value.

    Returns:
        Success with the return value, or Failure with ``on_error``'s value.

    Example:
        >>> try_catch(lambda: int("42"), lambda exc, _tb: str(exc))
        Success(value=42)
    """
    try:
        return Success(run())
    except Exception as exc:
        return _capture(exc, on_error, run)


def try_catch_async[T, E](
    run: Callable[[], Awaitable[T] | T],
    on_error: ErrorMapper[E],
) -> AsyncResult[T, E]:
    """
    Await ``run`` and wrap its outcome in a Result.

    ``run`` may return an awaitable or a plain value. The returned
    AsyncResult always settles with a Result, never with the exception.

    Nothing runs until the returned AsyncResult is first awaited:
    ``run`` is called then, inside the awaiting event loop. Callers that
    need the work started right away should wrap it in a task
    (``asyncio.ensure_future(try_catch_async(...))``).

    Args:
        run: Zero-argument callable, typically a coroutine function.
        on_error: Maps the raised exception and its traceback to a failure value.

    Returns:
        AsyncResult settling to Success or Failure.
    """

    async def guarded() -> Result[T, E]:
        try:
            value = run()
            if inspect.isawaitable(value):
                value = await value
            return Success(value)
        except Exception as exc:
            return _capture(exc, on_error, run)

    return AsyncResult(guarded())


def catching[**P, T, E](
    on_error: ErrorMapper[E],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]:
    """Decorator form of ``try_catch``."""

    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, E]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            return try_catch(functools.partial(func, *args, **kwargs), on_error)

        return wrapper

    return decorator


def catching_async[**P, T, E](
    on_error: ErrorMapper[E],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, AsyncResult[T, E]]]:
    """Decorator form of ``try_catch_async``."""

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, AsyncResult[T, E]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> AsyncResult[T, E]:
            return try_catch_async(functools.partial(func, *args, **kwargs), on_error)

        return wrapper

    return decorator
