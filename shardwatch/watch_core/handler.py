"""Watchdog event handler and scan consumer for the shard directory."""

from __future__ import annotations

import threading
from typing import Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from shardwatch.logger import EmptyDirectoryError, EventOverflowError, WatchError

from .config import HEALTH_SECS, LOGGER
from .queue import SignalSlot
from .snapshot import SnapshotDiffer


def is_overflow(exc: BaseException) -> bool:
    return isinstance(exc, (EventOverflowError, OverflowError))


def observer_alive(observer) -> bool:
    """True while the observer thread and all of its emitters still run."""
    if not observer.is_alive():
        return False
    return all(emitter.is_alive() for emitter in getattr(observer, "emitters", ()))


class ShardEventHandler(FileSystemEventHandler):
    """Turns every raw event for the directory into a coalesced rescan signal.

    Events are not filtered: the scan re-derives the truth from the
    directory, so any event is just a hint that something changed.
    """

    def __init__(self, slot: SignalSlot, logger=LOGGER):
        super().__init__()
        self.slot = slot
        self.logger = logger

    def dispatch(self, event: FileSystemEvent) -> None:
        try:
            self.slot.post()
        except Exception as exc:
            self.on_error(exc)

    def on_error(self, exc: BaseException) -> None:
        """Handle an error from the notification side.

        watchdog has no error callback of its own; this is reached from
        ``dispatch`` and from ``ScanConsumer`` when it finds the observer or
        one of its emitters dead.
        """
        if is_overflow(exc):
            # Lost events only mean "rescan", which a signal already covers.
            self.slot.post()
            return
        self.logger.warning("watcher error: %s", exc)


class ScanConsumer(threading.Thread):
    """Runs one scan per consumed signal until the slot closes.

    While idle it checks every ``health_interval`` seconds that ``observer``
    still delivers events, reporting a dead one once through
    ``handler.on_error``.
    """

    def __init__(
        self,
        slot: SignalSlot,
        differ: SnapshotDiffer,
        stopped: Optional[threading.Event] = None,
        logger=LOGGER,
        *,
        observer=None,
        handler: Optional[ShardEventHandler] = None,
        stop_requested: Optional[threading.Event] = None,
        health_interval: float = HEALTH_SECS,
    ):
        super().__init__(name=f"shard-scan:{differ.directory}", daemon=True)
        self.slot = slot
        self.differ = differ
        self.stopped = stopped or threading.Event()
        self.logger = logger
        self.observer = observer
        self.handler = handler or ShardEventHandler(slot, logger=logger)
        self.stop_requested = stop_requested or threading.Event()
        self.health_interval = health_interval
        self._observer_reported = False

    def check_observer(self) -> None:
        if self.observer is None or self._observer_reported or self.stop_requested.is_set():
            return
        if not observer_alive(self.observer):
            self._observer_reported = True
            self.handler.on_error(
                WatchError(f"observer for {self.differ.directory} stopped; no further events")
            )

    def run(self) -> None:
        try:
            while True:
                got = self.slot.wait(self.health_interval if self.observer is not None else None)
                if got is None:
                    self.check_observer()
                    continue
                if not got:
                    break
                try:
                    self.differ.scan()
                except EmptyDirectoryError as exc:
                    self.logger.debug("rescan skipped: %s", exc)
                except Exception:
                    self.logger.error(
                        "Background scan failed for %s", self.differ.directory, exc_info=True
                    )
        finally:
            self.stopped.set()


__all__ = ["ShardEventHandler", "ScanConsumer", "is_overflow", "observer_alive"]
