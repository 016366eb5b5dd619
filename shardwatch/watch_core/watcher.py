"""Keeps a loader in sync with the shard files of one directory."""

from __future__ import annotations

import enum
import os
import threading
from typing import Optional

from shardwatch.logger import ContextLogger, WatchError, safe_bool

from .config import LOGGER, PROGRESS_SECS, SHARD_SUFFIX
from .dispatch import BoundedDispatcher
from .handler import ScanConsumer, ShardEventHandler
from .loader import ShardLoader
from .queue import SignalSlot
from .snapshot import SnapshotDiffer
from .utils import create_observer


class WatcherState(enum.Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    STOP_REQUESTED = "stop_requested"
    STOPPED = "stopped"


class DirectoryWatcher:
    """Cold-scans ``directory`` then follows it until ``stop()``.

    Construction runs the first scan synchronously and raises if it fails
    (``ListingError``, ``EmptyDirectoryError``) or if the watchdog
    subscription cannot be set up (``WatchError``). No thread survives a
    failed construction.

    ``stop()`` may be called any number of times from any thread; every call
    returns only once the observer and the scan thread are gone, after which
    the loader receives no further calls.
    """

    def __init__(
        self,
        directory: str,
        loader: ShardLoader,
        *,
        suffix: str = SHARD_SUFFIX,
        concurrency: Optional[int] = None,
        progress_interval: float = PROGRESS_SECS,
        use_polling: Optional[bool] = None,
    ):
        self.state = WatcherState.INITIALIZING
        self.directory = os.path.abspath(directory)
        self.logger = ContextLogger(LOGGER, directory=self.directory)
        self.differ = SnapshotDiffer(
            self.directory,
            loader,
            suffix=suffix,
            dispatcher=BoundedDispatcher(
                concurrency, progress_interval=progress_interval, logger=self.logger
            ),
            logger=self.logger,
        )
        if use_polling is None:
            use_polling = safe_bool(os.environ.get("WATCH_USE_POLLING"), False)

        self._stop_lock = threading.Lock()
        self._stop_requested = threading.Event()
        self._stopped = threading.Event()
        self._slot = SignalSlot()
        self._observer = None
        self._consumer: Optional[ScanConsumer] = None

        self.differ.scan()
        self._watch(use_polling)
        self.state = WatcherState.RUNNING

    def __repr__(self) -> str:
        return f"DirectoryWatcher({self.directory}, state={self.state.value})"

    def __enter__(self) -> "DirectoryWatcher":
        return self

    def __exit__(self, *exc) -> None:
        self.stop()

    @property
    def timestamps(self):
        return self.differ.timestamps

    def _watch(self, use_polling: bool) -> None:
        observer = create_observer(use_polling)
        handler = ShardEventHandler(self._slot, logger=self.logger)
        try:
            observer.schedule(handler, self.directory, recursive=False)
            observer.start()
        except Exception as exc:
            if observer.is_alive():
                observer.stop()
                observer.join()
            raise WatchError(f"cannot watch {self.directory}: {exc}") from exc
        self._observer = observer

        self._consumer = ScanConsumer(
            self._slot,
            self.differ,
            stopped=self._stopped,
            logger=self.logger,
            observer=observer,
            handler=handler,
            stop_requested=self._stop_requested,
        )
        self._consumer.start()
        self.logger.debug("watching for shard changes")

    def stop(self) -> None:
        with self._stop_lock:
            if not self._stop_requested.is_set():
                self._stop_requested.set()
                self.state = WatcherState.STOP_REQUESTED
                # No more raw events once the observer has joined.
                self._observer.stop()
                self._observer.join()
                self._slot.close()
        self._stopped.wait()
        if self._consumer is not None:
            self._consumer.join()
        self.state = WatcherState.STOPPED

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()


__all__ = ["DirectoryWatcher", "WatcherState"]
