# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from threading import Lock

from flask import request

from userauth.shared.config import SecurityConfig
from userauth.shared.errors import RateLimitedError

from .request_logger import client_ip


class InMemoryRateLimiter:
    """Sliding-window request counter per key.

    A bucket is dropped as soon as its window has fully elapsed, and every
    stale bucket is swept before the map grows past ``max_keys``.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        max_keys: int = 10_000,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._max_keys = max(1, int(max_keys))
        self._lock = Lock()
        self._buckets: dict[str, deque[float]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)

    def allow(self, key: str) -> bool:
        with self._lock:
            now = self._clock()
            bucket = self._live_bucket(key, now)
            if bucket is None:
                if len(self._buckets) >= self._max_keys:
                    self._sweep(now)
                bucket = self._buckets[key] = deque(maxlen=self._limit)
            if len(bucket) >= self._limit:
                return False
            bucket.append(now)
            return True

    def retry_after(self, key: str) -> float:
        with self._lock:
            now = self._clock()
            bucket = self._live_bucket(key, now)
            if bucket is None:
                return 0.0
            return max(0.0, self._window - (now - bucket[0]))

    def _live_bucket(self, key: str, now: float) -> deque[float] | None:
        bucket = self._buckets.get(key)
        if bucket is None:
            return None
        while bucket and now - bucket[0] > self._window:
            bucket.popleft()
        if not bucket:
            del self._buckets[key]
            return None
        return bucket

    def _sweep(self, now: float) -> None:
        for key in list(self._buckets):
            self._live_bucket(key, now)


def rate_limit(
    security: SecurityConfig,
    *,
    limit: int | None = None,
    window_seconds: float | None = None,
):
    limiter = InMemoryRateLimiter(
        limit or security.rate_limit_requests,
        window_seconds or security.rate_limit_window,
        max_keys=security.rate_limit_max_keys,
    )

    def decorator(f: Callable):
        if not security.enable_rate_limit:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{request.path}:{client_ip()}"
            if not limiter.allow(key):
                raise RateLimitedError(retry_after=limiter.retry_after(key))
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
