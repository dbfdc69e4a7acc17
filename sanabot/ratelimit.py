"""Rate limiting per user.

Every lookup costs one or two page fetches from Wiktionary, so each user
gets a sliding window of lookups (default 4 per 60 seconds).
"""

import logging
import time
from collections import defaultdict
from typing import Optional

logger = logging.getLogger("sanabot.ratelimit")


class RateLimiter:
    """Rate limiter with sliding window per user."""

    def __init__(self, max_requests: int = 4, window_seconds: int = 60):
        self.max_requests = max(1, max_requests)
        self.window = max(1, window_seconds)
        self._requests: dict[str, list[float]] = defaultdict(list)

    def _prune(self, user_id: str, now: float) -> list[float]:
        recent = [t for t in self._requests[user_id] if now - t < self.window]
        self._requests[user_id] = recent
        return recent

    def check(self, user_id: str) -> tuple[bool, str]:
        """Record a request if the user is within the limit.

        Returns:
            Tuple of (allowed, message). The message is empty when allowed,
            otherwise it says how long to wait.
        """
        now = time.time()
        recent = self._prune(user_id, now)

        if len(recent) >= self.max_requests:
            remaining = max(1, int(self.window - (now - recent[0])))
            logger.info(f"Rate limit hit for user {user_id}: {remaining}s remaining")
            return False, (
                f"Too many lookups. Please wait {remaining}s. "
                f"(Max {self.max_requests} per {self.window}s)"
            )

        recent.append(now)
        return True, ""

    def update_limits(self, max_requests: Optional[int] = None, window_seconds: Optional[int] = None):
        if max_requests is not None:
            self.max_requests = max(1, max_requests)
        if window_seconds is not None:
            self.window = max(1, window_seconds)
        logger.info(f"Rate limits updated: {self.max_requests} requests / {self.window}s")


_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the global rate limiter instance."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter
