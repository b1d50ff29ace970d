"""Cooperative cancellation for long-running searches."""

from __future__ import annotations

import threading
import time
from typing import Optional


class CancellationToken:
    """
    Thread-safe stop flag with an optional deadline.

    A token is cancelled when :meth:`cancel` was called on it or on its parent,
    or when its deadline (``time.monotonic()`` based) has passed.
    """

    def __init__(
        self,
        deadline: Optional[float] = None,
        parent: Optional["CancellationToken"] = None,
    ) -> None:
        self._event = threading.Event()
        self.deadline = deadline
        self.parent = parent

    @classmethod
    def with_timeout(cls, seconds: Optional[float], parent: Optional["CancellationToken"] = None) -> "CancellationToken":
        """Token that expires ``seconds`` from now; never expires when ``seconds`` is None."""
        deadline = None if seconds is None else time.monotonic() + seconds
        return cls(deadline=deadline, parent=parent)

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            return True
        return self.parent is not None and self.parent.cancelled

    @property
    def timed_out(self) -> bool:
        """True when the deadline passed without an explicit cancel."""
        return (
            not self._event.is_set()
            and self.deadline is not None
            and time.monotonic() >= self.deadline
        )

    def remaining(self) -> Optional[float]:
        """Seconds until the deadline, or None without one."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def wait(self, timeout: float) -> bool:
        """Block up to ``timeout`` seconds; returns True once cancelled."""
        self._event.wait(timeout)
        return self.cancelled
