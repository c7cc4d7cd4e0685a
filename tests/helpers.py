"""Shared test doubles."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from outcome.result import Failure, Result, Success


@dataclass(frozen=True, slots=True)
class NotFoundError:
    """Failure payload used throughout the tests."""

    code: int


def get_user(*, found: bool) -> Result[str, NotFoundError]:
    """Return John Doe, or a 404 failure."""
    return Success("John Doe") if found else Failure(NotFoundError(404))


async def fetch_user(*, found: bool, delay: float = 0.01) -> Result[str, NotFoundError]:
    """Resolve to ``get_user`` after a short delay."""
    await asyncio.sleep(delay)
    return get_user(found=found)
