"""
Unit tests for shopify_rest.rate_limit and shopify_rest.context modules.

Tests call-limit header parsing, the throttle delay computed from the
recorded bucket state, and per-call deadlines and cancellation.
"""

import threading
from unittest.mock import patch

import pytest

from shopify_rest.context import RequestContext, background
from shopify_rest.exceptions import RequestCancelledError
from shopify_rest.models import RateLimitInfo
from shopify_rest.rate_limit import RateLimiter, parse_call_limit


class TestParseCallLimit:

    @pytest.mark.parametrize("value,expected", [
        ("32/40", (32, 40)),
        (" 1 / 80 ", (1, 80)),
        ("40/40", (40, 40)),
    ])
    def test_valid(self, value, expected):
        assert parse_call_limit(value) == expected

    @pytest.mark.parametrize("value", [None, "", "32", "a/40", "1/2/3"])
    def test_invalid(self, value):
        assert parse_call_limit(value) is None


class TestRateLimiter:
    """Test RateLimiter bookkeeping and the throttle policy."""

    @pytest.fixture
    def clock(self):
        with patch("shopify_rest.rate_limit.time") as mock_time:
            mock_time.monotonic.return_value = 100.0
            yield mock_time.monotonic

    def test_initial_state(self):
        limiter = RateLimiter()

        assert limiter.info == RateLimitInfo()
        assert limiter.delay() == 0.0

    def test_update_records_call_limit(self, clock):
        limiter = RateLimiter()

        info = limiter.update({"X-Shopify-Shop-Api-Call-Limit": "32/40"})

        assert info.request_count == 32
        assert info.bucket_size == 40
        assert info.retry_after_seconds == 0
        assert limiter.info == info

    def test_update_without_header_keeps_bucket(self, clock):
        limiter = RateLimiter()
        limiter.update({"X-Shopify-Shop-Api-Call-Limit": "10/40"})

        info = limiter.update({"Retry-After": "2.0"})

        assert (info.request_count, info.bucket_size) == (10, 40)
        assert info.retry_after_seconds == 2.0

    def test_info_is_a_snapshot(self, clock):
        limiter = RateLimiter()
        limiter.update({"X-Shopify-Shop-Api-Call-Limit": "1/40"})

        snapshot = limiter.info
        snapshot.request_count = 99

        assert limiter.info.request_count == 1

    def test_no_delay_below_limit(self, clock):
        limiter = RateLimiter(leak_rate=2.0, headroom=1)
        limiter.update({"X-Shopify-Shop-Api-Call-Limit": "20/40"})

        assert limiter.delay() == 0.0

    def test_delay_for_full_bucket(self, clock):
        limiter = RateLimiter(leak_rate=2.0, headroom=1)
        limiter.update({"X-Shopify-Shop-Api-Call-Limit": "40/40"})

        # two credits over the limit at two credits per second
        assert limiter.delay() == pytest.approx(1.0)

        clock.return_value = 100.5
        assert limiter.delay() == pytest.approx(0.5)

        clock.return_value = 102.0
        assert limiter.delay() == 0.0

    def test_retry_after_wins(self, clock):
        limiter = RateLimiter()
        limiter.update({"X-Shopify-Shop-Api-Call-Limit": "40/40", "Retry-After": "4"})

        assert limiter.delay() == pytest.approx(4.0)

    def test_delay_is_capped(self, clock):
        limiter = RateLimiter(max_wait=3.0)
        limiter.update({"Retry-After": "30"})

        assert limiter.delay() == 3.0

    def test_reset(self, clock):
        limiter = RateLimiter()
        limiter.update({"X-Shopify-Shop-Api-Call-Limit": "40/40"})

        limiter.reset()

        assert limiter.info == RateLimitInfo()
        assert limiter.delay() == 0.0


class TestRequestContext:
    """Test deadlines and cancellation."""

    def test_background(self):
        ctx = background()

        assert ctx.remaining() is None
        assert ctx.timeout_for(30) == 30
        ctx.check()

    def test_cancel(self):
        ctx = RequestContext()
        ctx.cancel()

        with pytest.raises(RequestCancelledError) as exc_info:
            ctx.check()

        assert not exc_info.value.deadline_exceeded

    def test_shared_cancel_event(self):
        event = threading.Event()
        first, second = RequestContext(cancel_event=event), RequestContext(cancel_event=event)

        event.set()

        assert first.cancelled
        assert second.cancelled

    def test_expired_deadline(self):
        ctx = RequestContext(timeout=0)

        assert ctx.remaining() == 0.0
        with pytest.raises(RequestCancelledError) as exc_info:
            ctx.check()

        assert exc_info.value.deadline_exceeded

    def test_timeout_for(self):
        ctx = RequestContext(timeout=5)

        assert ctx.timeout_for(30) <= 5
        assert ctx.timeout_for(1) == 1
        assert 0 < ctx.timeout_for(None) <= 5

    def test_wait_past_deadline(self):
        ctx = RequestContext(timeout=0.05)

        with pytest.raises(RequestCancelledError) as exc_info:
            ctx.wait(10)

        assert exc_info.value.deadline_exceeded

    def test_wait_interrupted_by_cancel(self):
        ctx = RequestContext()
        timer = threading.Timer(0.05, ctx.cancel)
        timer.start()

        try:
            with pytest.raises(RequestCancelledError) as exc_info:
                ctx.wait(10)
        finally:
            timer.cancel()

        assert not exc_info.value.deadline_exceeded

    def test_wait_zero(self):
        RequestContext().wait(0)
