from __future__ import annotations

import time
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict


@dataclass
class RateLimitResult:
    allowed: bool
    retry_after: float


class RateLimiter:
    def __init__(self, max_calls: int, period_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.max_calls = max_calls
        self.period_seconds = period_seconds
        self._clock = clock
        self._calls: Dict[str, Deque[float]] = defaultdict(deque)
        self._last_prune = clock()

    def __len__(self) -> int:
        return len(self._calls)

    def _prune(self, now: float) -> None:
        if now - self._last_prune < self.period_seconds:
            return
        self._last_prune = now
        idle = [key for key, window in self._calls.items() if not window or now - window[-1] >= self.period_seconds]
        for key in idle:
            del self._calls[key]

    def allow(self, key: str) -> RateLimitResult:
        now = self._clock()
        self._prune(now)
        window = self._calls[key]
        while window and now - window[0] >= self.period_seconds:
            window.popleft()
        if len(window) >= self.max_calls:
            retry_after = self.period_seconds - (now - window[0])
            return RateLimitResult(False, max(retry_after, 0))
        window.append(now)
        return RateLimitResult(True, 0)
