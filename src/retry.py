"""Retry-on-rate-limit wrapper shared by every network-facing call."""
import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from src.constants import (
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    MSG_RATE_LIMITED,
    RATE_LIMIT_STATUS,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
Sleep = Callable[[float], Awaitable[Any]]


async def backoff_sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def is_rate_limited(error: BaseException) -> bool:
    """True when the error carries a 429 status code or mentions 429 in its message."""
    codes = (
        getattr(error, attr, None) for attr in ("code", "status", "status_code")
    )
    return any(code == RATE_LIMIT_STATUS for code in codes) or str(RATE_LIMIT_STATUS) in str(error)


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    retries: int = DEFAULT_RETRY_ATTEMPTS,
    delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    sleep: Optional[Sleep] = None,
) -> T:
    """Await ``operation()``, retrying rate-limited failures with doubling delay.

    ``retries`` is the number of extra attempts after the first. Any other error,
    or the last rate-limit error once the budget is spent, is re-raised as-is.
    """
    while True:
        try:
            return await operation()
        except Exception as e:
            match (retries > 0, is_rate_limited(e)):
                case (True, True):
                    logger.warning(MSG_RATE_LIMITED, delay_ms, retries)
                    await (sleep or backoff_sleep)(delay_ms / 1000)
                    retries -= 1
                    delay_ms *= 2
                case _:
                    raise


def with_retry(
    retries: int = DEFAULT_RETRY_ATTEMPTS,
    delay_ms: int = DEFAULT_RETRY_DELAY_MS,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator form of :func:`run_with_retry` for async functions."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await run_with_retry(
                lambda: func(*args, **kwargs), retries=retries, delay_ms=delay_ms
            )

        return wrapper

    return decorator
