"""Rate limiting utility for API endpoints."""

import time
from collections import defaultdict, deque
from typing import Deque, Dict, Tuple


class RateLimiter:
    """Simple in-memory rate limiter using sliding window."""

    def __init__(self, max_requests: int, window_seconds: int, clock=time.time):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self.requests: Dict[str, Deque[float]] = defaultdict(deque)

    def _prune(self, client_id: str, now: float) -> int:
        """Drop expired requests; clients with none left are forgotten. Returns requests in window."""
        client_requests = self.requests.get(client_id)
        if client_requests is None:
            return 0

        while client_requests and client_requests[0] <= now - self.window_seconds:
            client_requests.popleft()

        if not client_requests:
            del self.requests[client_id]
            return 0

        return len(client_requests)

    def is_allowed(self, client_id: str) -> bool:
        """Check if request is allowed for client."""
        now = self.clock()

        if self._prune(client_id, now) < self.max_requests:
            self.requests[client_id].append(now)
            return True

        return False

    def get_remaining(self, client_id: str) -> Tuple[int, int]:
        """Get remaining requests and reset time."""
        now = self.clock()

        remaining = max(0, self.max_requests - self._prune(client_id, now))
        client_requests = self.requests.get(client_id)
        reset_time = int(client_requests[0] + self.window_seconds) if client_requests else int(now)

        return remaining, reset_time

    def retry_after(self, client_id: str) -> int:
        """Seconds until the oldest request in the window expires."""
        _, reset_time = self.get_remaining(client_id)
        return max(1, reset_time - int(self.clock()))
