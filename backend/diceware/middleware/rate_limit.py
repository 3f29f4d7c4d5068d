"""
In-memory per-IP rate limiting for passphrase requests
"""

import time
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Optional, Tuple

from diceware.config import Settings


@dataclass
class RateLimitConfig:
    """Rate limit configuration"""
    requests_per_minute: int = 60
    burst_size: int = 10
    # clients idle this long are forgotten
    idle_timeout_seconds: float = 3600
    # minimum time between pruning passes on the request path
    cleanup_interval_seconds: float = 300

    @classmethod
    def from_settings(cls, active_settings: Settings) -> "RateLimitConfig":
        return cls(
            requests_per_minute=active_settings.RATE_LIMIT_PER_MINUTE,
            burst_size=active_settings.RATE_LIMIT_BURST,
        )


class RateLimiter:
    """
    Token bucket rate limiter
    Each client IP starts with a full bucket of burst_size tokens.
    Idle clients are pruned from is_allowed at most once per cleanup interval.
    """

    def __init__(self, config: Optional[RateLimitConfig] = None, clock=time.monotonic):
        self.config = config or RateLimitConfig()
        self._clock = clock
        # ip -> (last refill time, tokens left)
        self._buckets: Dict[str, Tuple[float, float]] = {}
        self._lock = Lock()
        self._last_cleanup = clock()

    def is_allowed(self, ip: str) -> bool:
        """Consume one token for ip; False when the bucket is empty"""
        with self._lock:
            now = self._clock()
            if now - self._last_cleanup >= self.config.cleanup_interval_seconds:
                self._prune(now, self.config.idle_timeout_seconds)

            last_update, tokens = self._buckets.get(ip, (now, float(self.config.burst_size)))

            refill = (now - last_update) * self.config.requests_per_minute / 60.0
            tokens = min(float(self.config.burst_size), tokens + refill)

            allowed = tokens >= 1
            if allowed:
                tokens -= 1
            self._buckets[ip] = (now, tokens)
            return allowed

    def cleanup_old_entries(self, max_age_seconds: Optional[float] = None):
        """Forget clients idle for longer than max_age_seconds"""
        if max_age_seconds is None:
            max_age_seconds = self.config.idle_timeout_seconds
        with self._lock:
            self._prune(self._clock(), max_age_seconds)

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _prune(self, now: float, max_age_seconds: float):
        # caller holds self._lock
        stale = [
            ip for ip, (last_update, _) in self._buckets.items()
            if now - last_update > max_age_seconds
        ]
        for ip in stale:
            del self._buckets[ip]
        self._last_cleanup = now
