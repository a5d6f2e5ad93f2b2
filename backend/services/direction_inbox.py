"""
Single-slot inbox for direction-change requests.

Input sources may run on another thread than the tick loop. Requests are
written under one mutex and the loop drains the slot once per tick, so at
most one direction change is honored per tick and the first valid request
wins.
"""

import threading
from typing import Optional

from domain.constants import Direction


class DirectionInbox:
    """Holds at most one pending direction until the next tick takes it."""

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: Optional[Direction] = None

    def offer(self, direction: Direction, current: Direction) -> bool:
        """
        Store `direction` if the slot is empty and it does not reverse `current`.

        Returns:
            True if the request was accepted, False if it was dropped.
        """
        if direction is current.opposite:
            return False
        with self._lock:
            if self._pending is not None:
                return False
            self._pending = direction
            return True

    def take(self) -> Optional[Direction]:
        """Empty the slot and return what it held."""
        with self._lock:
            pending, self._pending = self._pending, None
            return pending

    def clear(self) -> None:
        with self._lock:
            self._pending = None

    @property
    def pending(self) -> Optional[Direction]:
        with self._lock:
            return self._pending
