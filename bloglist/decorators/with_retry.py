"""Retry policy for transient storage failures."""

from collections.abc import Awaitable, Callable
from logging import WARNING, getLogger

from sqlalchemy.exc import OperationalError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bloglist.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))

# Failures that can clear up on their own: an unreachable server, a timeout,
# or a locked/unavailable database. Anything else fails on the first attempt.
TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    ConnectionError,
    TimeoutError,
    OperationalError,
)


def with_retry[**P, T](
    *,
    attempts: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
    retry_on: tuple[type[Exception], ...] = TRANSIENT_ERRORS,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async callable with exponential backoff.

    Args:
        attempts: Total number of calls, the first one included.
        base_delay: Delay before the first retry, in seconds.
        max_delay: Upper bound for any single delay, in seconds.
        retry_on: Exception types worth another attempt.

    Returns:
        Decorator; the last error is re-raised unchanged once attempts run out.
    """
    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(retry_on),
        before_sleep=before_sleep_log(logger, WARNING),
        reraise=True,
    )
