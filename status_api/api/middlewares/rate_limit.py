# status_api/api/middlewares/rate_limit.py
"""Fixed-window rate limiting.

Time is cut into consecutive windows of ``window_seconds`` counted from the
moment the limiter is created. Each key may take ``permit_limit`` permits per
window; once they are spent every further request in that window is rejected
immediately (no queue). Counters reset when the next window starts.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, TypeVar

from flask import current_app, request

from status_api.core.exceptions import RateLimitedError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

RATE_LIMITER_EXTENSION = "rate_limiter"


@dataclass
class _Window:
    index: int
    count: int = 0


class FixedWindowRateLimiter:
    def __init__(
        self,
        permit_limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if permit_limit <= 0:
            raise ValueError("permit_limit must be positive")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

        self.permit_limit = permit_limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._started_at = clock()
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    def _current_index(self, now: float) -> int:
        return int((now - self._started_at) // self.window_seconds)

    def try_acquire(self, key: str) -> bool:
        """Take one permit for ``key``; False when the window is exhausted."""
        with self._lock:
            index = self._current_index(self._clock())
            window = self._windows.get(key)
            if window is None or window.index != index:
                window = _Window(index=index)
                self._windows[key] = window

            if window.count >= self.permit_limit:
                return False

            window.count += 1
            return True

    def retry_after(self) -> int:
        """Whole seconds until the current window ends (at least 1)."""
        now = self._clock()
        window_end = self._started_at + (self._current_index(now) + 1) * self.window_seconds
        return max(1, math.ceil(window_end - now))


def rate_limited(policy: str, key_func: Callable[[], str] | None = None):
    """Reject the wrapped view with 429 once the app's limiter says no.

    The limiter key defaults to the policy name, so all callers share one
    partition.
    """

    def decorator(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            limiter: FixedWindowRateLimiter = current_app.extensions[RATE_LIMITER_EXTENSION]
            key = key_func() if key_func is not None else policy

            if not limiter.try_acquire(key):
                retry_after = limiter.retry_after()
                logger.warning(
                    "Rate limit exceeded",
                    extra={"limiter_key": key, "path": request.path, "retry_after": retry_after},
                )
                raise RateLimitedError(retry_after=retry_after)

            return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
