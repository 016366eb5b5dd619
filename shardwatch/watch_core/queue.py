"""Coalescing rescan signal shared by the event and scan threads."""

from __future__ import annotations

import threading
from typing import Optional


class SignalSlot:
    """Holds at most one pending "rescan needed" signal.

    ``post`` never blocks: if a signal is already pending the new one is
    dropped. ``wait`` blocks until a signal is pending (consuming it and
    returning True) or the slot is closed (returning False). Once closed the
    slot ignores posts and any pending signal is discarded.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._pending = False
        self._closed = False

    def post(self) -> bool:
        """Offer a signal; returns True if it was stored, False if coalesced."""
        with self._cond:
            if self._closed or self._pending:
                return False
            self._pending = True
            self._cond.notify()
            return True

    def wait(self, timeout: Optional[float] = None) -> Optional[bool]:
        """Consume a signal. Returns None if ``timeout`` expired first."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._pending or self._closed, timeout):
                return None
            if self._closed:
                return False
            self._pending = False
            return True

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._pending = False
            self._cond.notify_all()

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed


__all__ = ["SignalSlot"]
