"""
Fixed-window rate limiter keyed by client address.

Each address gets a counter and a window end time. The first request after
the window end starts a new window. A burst straddling a window boundary can
admit up to twice the limit in a short span; that is accepted.

State lives in process memory only and is bounded: once the map reaches
``max_entries`` expired windows are swept, and if it is still full the oldest
window is evicted.
"""
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from app.core.config import settings
from app.core.logger import logger


@dataclass
class RateLimitEntry:
    count: int
    window_reset_at: float


@dataclass(frozen=True)
class AdmissionDecision:
    allowed: bool
    remaining: int


class FixedWindowRateLimiter:
    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        max_entries: int = 10000,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError(f"max_requests must be >= 1, got {max_requests}")
        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be > 0, got {window_seconds}")
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: "OrderedDict[str, RateLimitEntry]" = OrderedDict()
        self._lock = threading.Lock()

    def admit(self, client_address: str) -> AdmissionDecision:
        """Count one request from ``client_address`` and decide whether it may proceed."""
        with self._lock:
            now = self._clock()
            entry = self._entries.get(client_address)

            if entry is None or now >= entry.window_reset_at:
                if entry is None:
                    self._make_room(now)
                else:
                    # New window, move to the back of the eviction order
                    self._entries.move_to_end(client_address)
                self._entries[client_address] = RateLimitEntry(
                    count=1, window_reset_at=now + self.window_seconds
                )
                return AdmissionDecision(allowed=True, remaining=self.max_requests - 1)

            if entry.count < self.max_requests:
                entry.count += 1
                return AdmissionDecision(allowed=True, remaining=self.max_requests - entry.count)

            return AdmissionDecision(allowed=False, remaining=0)

    def get_entry(self, client_address: str) -> Optional[RateLimitEntry]:
        with self._lock:
            return self._entries.get(client_address)

    def reset(self):
        with self._lock:
            self._entries.clear()

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def _make_room(self, now: float):
        # Caller holds the lock
        if len(self._entries) < self.max_entries:
            return

        # Entries are kept in window-start order, so expired ones sit at the front
        swept = 0
        while self._entries:
            key, entry = next(iter(self._entries.items()))
            if now < entry.window_reset_at:
                break
            del self._entries[key]
            swept += 1

        if swept:
            logger.debug(f"🧹 Swept {swept} expired rate limit windows")

        while len(self._entries) >= self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.warning(f"⚠️ Rate limit map full, evicting window for {evicted}")


booking_rate_limiter = FixedWindowRateLimiter(
    max_requests=settings.BOOKING_RATE_LIMIT_MAX_REQUESTS,
    window_seconds=settings.BOOKING_RATE_LIMIT_WINDOW_SECONDS,
    max_entries=settings.RATE_LIMIT_MAX_TRACKED_CLIENTS,
)
