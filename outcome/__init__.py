"""Result and AsyncResult types for explicit, composable error handling."""

from outcome.async_result import AsyncResult, async_result
from outcome.errors import InvalidResultStateError, ResultError, UnwrappedFailureError
from outcome.guard import catching, catching_async, try_catch, try_catch_async
from outcome.result import Failure, Result, Success, failure, success

__all__ = [
    "AsyncResult",
    "Failure",
    "InvalidResultStateError",
    "Result",
    "ResultError",
    "Success",
    "UnwrappedFailureError",
    "async_result",
    "catching",
    "catching_async",
    "failure",
    "success",
    "try_catch",
    "try_catch_async",
]
