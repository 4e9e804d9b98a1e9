"""Deadline race for in-flight requests."""

import asyncio
from collections.abc import Awaitable
from typing import Any, TypeVar

from edgecli_sdk.exceptions import EdgeTimeoutError

T = TypeVar("T")

# Calls that lost a race keep running; hold a reference until they finish.
_abandoned: set[asyncio.Future[Any]] = set()


def _discard(task: asyncio.Future[Any]) -> None:
    _abandoned.discard(task)
    if not task.cancelled():
        task.exception()


def _abandon(task: asyncio.Future[Any]) -> None:
    _abandoned.add(task)
    task.add_done_callback(_discard)


async def race(timeout_ms: int, pending: Awaitable[T]) -> T:
    """Wait for ``pending`` for at most ``timeout_ms`` milliseconds.

    Whichever settles first wins. When the call settles first its result or
    exception is passed through unchanged. When the deadline wins,
    EdgeTimeoutError is raised and the call is left running; its outcome is
    ignored.

    Args:
        timeout_ms: Deadline in milliseconds. Not validated.
        pending: Coroutine or future to race against the deadline.

    Returns:
        The result of ``pending``.
    """
    task = asyncio.ensure_future(pending)
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
    except asyncio.CancelledError:
        _abandon(task)
        raise
    if task in done:
        return task.result()
    _abandon(task)
    raise EdgeTimeoutError(timeout_ms)
