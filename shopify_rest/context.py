"""
Per-call deadline and cancellation for client operations.

Every service method accepts an optional ``ctx``. The client checks it
before sending and again when the response arrives, bounds the transport
timeout by the time left, and uses it for every wait (rate-limit retries,
throttling) so that a cancelled or expired call stops promptly.

Usage:
    ctx = RequestContext(timeout=10)
    products = client.products.list(ctx=ctx)

    # from another thread
    ctx.cancel()
"""

import threading
import time
from typing import Optional

from .constants import ErrorMessages
from .exceptions import RequestCancelledError


class RequestContext:
    """
    Deadline plus cancellation token for one logical operation.

    Attributes:
        deadline: time.monotonic() value after which the call is abandoned,
            or None for no deadline
        cancel_event: Event that aborts the call when set
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None
    ):
        self.deadline = time.monotonic() + timeout if timeout is not None else None
        self.cancel_event = cancel_event or threading.Event()

    def cancel(self) -> None:
        """Cancel every call using this context."""
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, None without a deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def check(self) -> None:
        """
        Raise if the call should not continue.

        Raises:
            RequestCancelledError: If cancelled or past the deadline
        """
        if self.cancelled:
            raise RequestCancelledError(ErrorMessages.CANCELLED)
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise RequestCancelledError(ErrorMessages.DEADLINE_EXCEEDED)

    def timeout_for(self, default: Optional[float]) -> Optional[float]:
        """Transport timeout for the next attempt, capped by the deadline."""
        remaining = self.remaining()
        if remaining is None:
            return default
        if default is None:
            return remaining
        return min(default, remaining)

    def wait(self, seconds: float) -> None:
        """
        Sleep for ``seconds`` unless cancelled or the deadline comes first.

        Raises:
            RequestCancelledError: If the wait was interrupted
        """
        self.check()
        remaining = self.remaining()
        if remaining is not None and remaining < seconds:
            if self.cancel_event.wait(remaining):
                raise RequestCancelledError(ErrorMessages.CANCELLED)
            raise RequestCancelledError(ErrorMessages.DEADLINE_EXCEEDED)
        if seconds > 0 and self.cancel_event.wait(seconds):
            raise RequestCancelledError(ErrorMessages.CANCELLED)


def background() -> RequestContext:
    """A context that is never cancelled and has no deadline."""
    return RequestContext()
