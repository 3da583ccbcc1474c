"""
Rate-limit bookkeeping for the REST Admin API.

Shopify meters REST calls with a leaky bucket: every response reports the
credits in use and the bucket size in X-Shopify-Shop-Api-Call-Limit
("32/40"), and a 429 response carries Retry-After. The limiter records
both after every response and, when throttling is enabled, tells the
client how long to wait before the next request.

Policy inputs:
    leak_rate: credits the bucket drains per second
    headroom: credits kept free before a request is delayed
    max_wait: upper bound for a single computed delay
"""

import logging
import threading
import time
from dataclasses import replace
from typing import Mapping, Optional

from .constants import (
    Headers,
    DEFAULT_LEAK_RATE,
    DEFAULT_HEADROOM,
    MAX_THROTTLE_WAIT,
)
from .models import RateLimitInfo

logger = logging.getLogger(__name__)


def parse_call_limit(value: Optional[str]) -> Optional[tuple]:
    """
    Parse an X-Shopify-Shop-Api-Call-Limit value.

    Examples:
        >>> parse_call_limit('32/40')
        (32, 40)
        >>> parse_call_limit('garbage') is None
        True
    """
    if not value:
        return None
    parts = value.split("/")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        return None


class RateLimiter:
    """
    Thread-safe record of the call bucket shared by one client.

    Attributes:
        leak_rate: Credits replenished per second
        headroom: Credits kept free when throttling
        max_wait: Maximum delay returned by delay()
    """

    def __init__(
        self,
        leak_rate: float = DEFAULT_LEAK_RATE,
        headroom: int = DEFAULT_HEADROOM,
        max_wait: float = MAX_THROTTLE_WAIT
    ):
        self.leak_rate = leak_rate
        self.headroom = headroom
        self.max_wait = max_wait
        self._info = RateLimitInfo()
        self._updated_at: Optional[float] = None
        self._lock = threading.Lock()

    @property
    def info(self) -> RateLimitInfo:
        """Snapshot of the last reported bucket state."""
        with self._lock:
            return replace(self._info)

    def update(self, headers: Mapping[str, str]) -> RateLimitInfo:
        """
        Record the bucket state reported by a response.

        Args:
            headers: Response headers

        Returns:
            RateLimitInfo: Snapshot after the update
        """
        call_limit = parse_call_limit(headers.get(Headers.CALL_LIMIT))

        try:
            retry_after = float(headers.get(Headers.RETRY_AFTER) or 0)
        except ValueError:
            retry_after = 0.0

        with self._lock:
            if call_limit is not None:
                self._info.request_count, self._info.bucket_size = call_limit
            self._info.retry_after_seconds = retry_after
            self._updated_at = time.monotonic()
            snapshot = replace(self._info)

        if call_limit is not None:
            logger.debug(f"API call limit {snapshot.request_count}/{snapshot.bucket_size}")
        return snapshot

    def delay(self) -> float:
        """
        Seconds to wait before the next request under the throttle policy.

        A pending Retry-After wins. Otherwise the bucket is assumed to drain
        at leak_rate since the last response, and the wait is the time
        until it drops below bucket_size - headroom.
        """
        with self._lock:
            if self._updated_at is None:
                return 0.0
            elapsed = time.monotonic() - self._updated_at
            info = self._info

            if info.retry_after_seconds > 0:
                wait = info.retry_after_seconds - elapsed
            elif info.bucket_size and self.leak_rate > 0:
                limit = max(info.bucket_size - self.headroom, 0)
                excess = info.request_count - limit + 1
                wait = excess / self.leak_rate - elapsed if excess > 0 else 0.0
            else:
                wait = 0.0

        return min(max(wait, 0.0), self.max_wait)

    def reset(self) -> None:
        """Forget the recorded bucket state."""
        with self._lock:
            self._info = RateLimitInfo()
            self._updated_at = None
