"""
Backoff and deadline logic for readiness polling
"""

import time
from typing import Callable

DEFAULT_METADATA_TIMEOUT_MS = 5000
BROKER_METADATA_REQUEST_BACKOFF_MS = 1000


class RetryPolicy:
    """
    Fixed-interval retry policy bounded by a remaining time budget

    Both the per-request timeout and the backoff sleep are capped at the
    remaining budget so the final attempt never overshoots the deadline.
    """

    def __init__(
        self,
        backoff_ms: int = BROKER_METADATA_REQUEST_BACKOFF_MS,
        max_request_timeout_ms: int = DEFAULT_METADATA_TIMEOUT_MS
    ):
        """
        Initialize retry policy

        Args:
            backoff_ms: Delay between attempts in milliseconds
            max_request_timeout_ms: Ceiling for a single metadata request
        """
        self.backoff_ms = backoff_ms
        self.max_request_timeout_ms = max_request_timeout_ms

    def get_request_timeout_ms(self, remaining_ms: int) -> int:
        """Timeout for the next request given the remaining budget"""
        return max(min(self.max_request_timeout_ms, remaining_ms), 0)

    def get_backoff_ms(self, remaining_ms: int) -> int:
        """Sleep before the next attempt given the remaining budget"""
        return max(min(self.backoff_ms, remaining_ms), 0)


class Deadline:
    """
    Millisecond deadline measured against an injectable clock

    Example:
        deadline = Deadline(timeout_ms=30000)
        while deadline.remaining_ms() > 0:
            ...
    """

    def __init__(self, timeout_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Start the deadline

        Args:
            timeout_ms: Total budget in milliseconds
            clock: Function returning seconds as a float
        """
        self.timeout_ms = timeout_ms
        self.clock = clock
        self.start_time = clock()

    def elapsed_ms(self) -> int:
        return int((self.clock() - self.start_time) * 1000)

    def remaining_ms(self) -> int:
        return self.timeout_ms - self.elapsed_ms()
