"""SDK helpers."""

import time
from functools import wraps
from typing import Tuple, Type

import requests

from .exceptions import SquidRateLimitError, SquidServerError

TRANSIENT_ERRORS: Tuple[Type[BaseException], ...] = (
    SquidServerError,
    SquidRateLimitError,
    requests.ConnectionError,
    requests.Timeout,
)


def with_retry(
    attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    retry_on: Tuple[Type[BaseException], ...] = TRANSIENT_ERRORS,
):
    """Retry a call on transient API or transport errors.

    Args:
        attempts: Total number of tries, including the first one.
        delay: Seconds to wait before the first retry.
        backoff: Multiplier applied to the delay after every retry.
        retry_on: Exception types considered transient.

    The last error is re-raised once all attempts are used.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            wait = delay
            for attempt in range(1, attempts + 1):
                try:
                    return func(*args, **kwargs)
                except retry_on:
                    if attempt == attempts:
                        raise
                    time.sleep(wait)
                    wait *= backoff
        return wrapper
    return decorator


def join_url(base_url: str, endpoint: str) -> str:
    """Join a base URL and an endpoint with exactly one slash."""
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
