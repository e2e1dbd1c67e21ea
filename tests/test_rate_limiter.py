"""Unit tests for the sliding window rate limiter."""

import pytest

from mallu_api.utils.rate_limiter import RateLimiter


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestRateLimiter:
    """Test suite for RateLimiter."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def limiter(self, clock):
        return RateLimiter(max_requests=3, window_seconds=60, clock=clock)

    def test_allows_up_to_limit(self, limiter):
        assert all(limiter.is_allowed("client:a") for _ in range(3))
        assert limiter.is_allowed("client:a") is False

    def test_clients_are_independent(self, limiter):
        for _ in range(3):
            limiter.is_allowed("client:a")

        assert limiter.is_allowed("client:b") is True

    def test_window_slides(self, limiter, clock):
        for _ in range(3):
            limiter.is_allowed("client:a")

        clock.now += 60

        assert limiter.is_allowed("client:a") is True

    def test_expired_clients_are_forgotten(self, limiter, clock):
        """Test clients whose window has emptied leave no entry behind."""
        for i in range(50):
            limiter.is_allowed(f"client:{i}")

        clock.now += 61

        for i in range(50):
            limiter.get_remaining(f"client:{i}")

        assert limiter.requests == {}

    def test_lookup_of_unknown_client_creates_no_entry(self, limiter):
        limiter.get_remaining("client:never-seen")
        limiter.retry_after("client:never-seen")

        assert "client:never-seen" not in limiter.requests

    def test_get_remaining(self, limiter, clock):
        limiter.is_allowed("client:a")
        remaining, reset_time = limiter.get_remaining("client:a")

        assert remaining == 2
        assert reset_time == int(clock.now + 60)

    def test_get_remaining_for_new_client(self, limiter, clock):
        assert limiter.get_remaining("client:new") == (3, int(clock.now))

    def test_retry_after(self, limiter, clock):
        for _ in range(3):
            limiter.is_allowed("client:a")

        clock.now += 15

        assert limiter.retry_after("client:a") == 45
