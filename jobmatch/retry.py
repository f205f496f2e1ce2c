"""Retry decorator with exponential backoff for catalog fetches."""
from __future__ import annotations

import functools
import random
import time
from typing import Any, Callable, Tuple, Type

from jobmatch.log import get_logger

log = get_logger(__name__)


def is_transient_status(status_code: int) -> bool:
    """Rate limiting and server-side failures are worth another attempt."""
    return status_code == 429 or 500 <= status_code < 600


def backoff_delay(
    attempt: int,
    *,
    base_delay: float,
    max_delay: float,
    backoff_factor: float,
    jitter: bool,
) -> float:
    delay = min(base_delay * (backoff_factor ** (attempt - 1)), max_delay)
    if jitter:
        delay *= 0.5 + random.random()
    return delay


def retry(
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    backoff_factor: float = 2.0,
    jitter: bool = True,
    retryable: Tuple[Type[BaseException], ...] = (Exception,),
) -> Callable:
    """Decorator: retries the wrapped function, re-raising the last error."""

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, max_attempts + 1):
                try:
                    return fn(*args, **kwargs)
                except retryable as exc:
                    if attempt >= max_attempts:
                        log.error(
                            "%s failed after %d attempts: %s",
                            fn.__qualname__, max_attempts, exc,
                        )
                        raise
                    delay = backoff_delay(
                        attempt,
                        base_delay=base_delay,
                        max_delay=max_delay,
                        backoff_factor=backoff_factor,
                        jitter=jitter,
                    )
                    log.warning(
                        "%s attempt %d/%d failed (%s), retrying in %.1fs",
                        fn.__qualname__, attempt, max_attempts, exc, delay,
                    )
                    time.sleep(delay)
            raise RuntimeError(f"{fn.__qualname__}: max_attempts must be >= 1")

        return wrapper

    return decorator
