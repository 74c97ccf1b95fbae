"""
Async delay and retry-with-schedule helpers.

The retry loop consumes one delay from a fixed schedule per failed attempt;
once the schedule is exhausted the last exception propagates. There is no
per-attempt timeout and no cancellation beyond the caller's own.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, Sequence, TypeVar

from ..config import retry_schedule_from_env
from ..logging_config import get_logger

T = TypeVar("T")


async def delay(seconds: float) -> None:
    """Sleep for seconds, rounded to whole milliseconds."""
    await asyncio.sleep(round(seconds * 1000) / 1000)


async def retry_async_function(
    func: Callable[..., Awaitable[T]],
    args: Optional[Sequence[Any]] = None,
    retry_schedule: Optional[Sequence[float]] = None,
) -> T:
    """
    Await func(*args), retrying on any exception.

    Args:
        func: Coroutine function to invoke
        args: Positional arguments passed on every attempt
        retry_schedule: Seconds to wait before each retry. None reads
            PRIMKIT_RETRY_SCHEDULE (default [3, 5]); [] disables retries.

    Returns:
        The first successful result

    Raises:
        Exception: Whatever the last attempt raised, once the schedule is spent
    """
    call_args = tuple(args or ())
    schedule = list(retry_schedule_from_env() if retry_schedule is None else retry_schedule)
    logger = get_logger(__name__, operation=getattr(func, "__name__", repr(func)))

    attempt = 1
    while True:
        try:
            return await func(*call_args)
        except Exception as e:
            if not schedule:
                logger.error("Giving up after %d attempt(s): %s", attempt, e)
                raise
            wait = schedule.pop(0)
            logger.warning("Attempt %d failed (%s), retrying in %ss", attempt, e, wait)
            await delay(wait)
            attempt += 1
