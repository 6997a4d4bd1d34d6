"""Retry decorator for handling GitHub and Notion API rate limits.

Both services ask clients to back off when they are rate limited: GitHub with
403/429 responses (and dedicated githubkit exceptions), Notion with 429
``rate_limited`` responses. This decorator waits for the advertised interval
(or an exponential back-off when none is advertised) and retries. Every other
error propagates untouched.
"""

import asyncio
import functools
import time
from typing import Any, Callable, Mapping, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded
from notion_client import APIErrorCode, APIResponseError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _wait_time_from_headers(headers: Mapping[str, str], default: float, function_name: str) -> float:
    """Derive a wait time from retry-after or x-ratelimit-reset headers."""
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after, function=function_name)
            return default

    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset, function=function_name)
            return default
        current_timestamp = int(time.time())
        if reset_timestamp > current_timestamp:
            return reset_timestamp - current_timestamp + 1
    return default


def rate_limit_wait_time(exc: BaseException, default: float, function_name: str) -> float | None:
    """Return how long to wait before retrying, or None if the error is not a rate limit."""
    if isinstance(exc, (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded)):
        if exc.retry_after:
            return exc.retry_after.total_seconds()
        return default

    if isinstance(exc, RequestFailed):
        status_code = exc.response.status_code
        is_rate_limit = status_code == 429 or (status_code == 403 and "rate limit" in str(exc).lower())
        if not is_rate_limit:
            return None
        return _wait_time_from_headers(exc.response.headers, default, function_name)

    if isinstance(exc, APIResponseError):
        if exc.code != APIErrorCode.RateLimited:
            return None
        return _wait_time_from_headers(exc.headers, default, function_name)

    return None


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 1.0,
    max_delay: float = 60.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async API calls that hit a GitHub or Notion rate limit.

    Args:
        max_retries: Maximum number of retry attempts (default: 5)
        initial_delay: Delay in seconds used when the service does not advertise one (default: 1.0)
        max_delay: Upper bound for any single wait in seconds (default: 60.0)
        exponential_base: Growth factor of the fallback delay between attempts (default: 2.0)

    Returns:
        Decorated coroutine function with retry logic
    """

    def decorator(func: F) -> F:
        if not asyncio.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except (RequestFailed, APIResponseError) as exc:
                    wait_time = rate_limit_wait_time(exc, delay, func.__name__)
                    if wait_time is None:
                        raise
                    if attempt >= max_retries:
                        logger.error(
                            "Max retries reached for rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            error_type=type(exc).__name__,
                        )
                        raise
                    wait_time = min(wait_time, max_delay)
                    logger.warning(
                        f"Rate limit hit, retrying in {wait_time} seconds",
                        function=func.__name__,
                        attempt=attempt + 1,
                        max_retries=max_retries,
                        wait_time=wait_time,
                    )
                    await asyncio.sleep(wait_time)
                    delay = min(delay * exponential_base, max_delay)
                    attempt += 1

        return async_wrapper  # type: ignore

    return decorator
