"""
Timing utility for throttling execution in game loops
"""

import time
from typing import Optional


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    The game loop ticks the module every frame (e.g. 20ms) but status and
    system-usage logging only needs to happen every few seconds.

    Example:
        # In __init__:
        self._status_timer = OnceInMs(5000)

        # In update loop (runs every 20ms):
        if self._status_timer.should_execute(now):
            self._log_status(now)
    """

    def __init__(self, interval_ms: int):
        """
        Initialize timer with interval.

        Args:
            interval_ms: Minimum milliseconds between executions
        """
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self.last_execution: Optional[float] = None

    def should_execute(self, now: Optional[float] = None) -> bool:
        """
        Check if enough time has passed and update timer if so.

        The first call always executes.

        Args:
            now: Current timestamp in seconds (defaults to time.time())

        Returns:
            True if interval has passed (and timer is updated), False otherwise
        """
        current = time.time() if now is None else now
        if self.last_execution is None or current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force next should_execute() call to return True"""
        self.last_execution = None
