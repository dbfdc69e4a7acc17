"""Tests for per-user lookup rate limiting."""

from unittest.mock import patch

from sanabot.ratelimit import RateLimiter, get_rate_limiter


class TestRateLimiter:
    def test_allows_up_to_limit(self):
        """Test that requests beyond the limit are refused."""
        limiter = RateLimiter(max_requests=2, window_seconds=60)
        assert limiter.check("u1") == (True, "")
        assert limiter.check("u1") == (True, "")
        allowed, msg = limiter.check("u1")
        assert not allowed
        assert "wait" in msg

    def test_users_are_independent(self):
        """Test that each user has their own window."""
        limiter = RateLimiter(max_requests=1, window_seconds=60)
        assert limiter.check("u1")[0]
        assert limiter.check("u2")[0]
        assert not limiter.check("u1")[0]

    def test_window_slides(self):
        """Test that old requests leave the window."""
        limiter = RateLimiter(max_requests=1, window_seconds=60)
        with patch("sanabot.ratelimit.time.time", return_value=1000.0):
            assert limiter.check("u1")[0]
            assert not limiter.check("u1")[0]
        with patch("sanabot.ratelimit.time.time", return_value=1061.0):
            assert limiter.check("u1")[0]

    def test_update_limits_has_floor(self):
        """Test that limits never drop below 1."""
        limiter = RateLimiter()
        limiter.update_limits(max_requests=0, window_seconds=-5)
        assert limiter.max_requests == 1
        assert limiter.window == 1


def test_global_limiter_is_shared():
    """Test that the global limiter is a single instance."""
    assert get_rate_limiter() is get_rate_limiter()
    assert get_rate_limiter().check("global-test-user")[0]
