"""Loader capability consumed by the shard watcher."""

from __future__ import annotations

import threading
from typing import List, Protocol, runtime_checkable

from .config import LOGGER


@runtime_checkable
class ShardLoader(Protocol):
    """Receives load/drop instructions for shard files.

    Both methods may be called concurrently from several threads and must
    handle their own errors; the watcher does not observe them.
    """

    def load(self, path: str) -> None:
        ...

    def drop(self, path: str) -> None:
        ...


class LoggingLoader:
    """Loader that only reports what it was asked to do."""

    def __init__(self, logger=LOGGER):
        self.logger = logger

    def load(self, path: str) -> None:
        self.logger.info("[load] %s", path)

    def drop(self, path: str) -> None:
        self.logger.info("[drop] %s", path)


class RecordingLoader:
    """Thread-safe loader that remembers every call, in arrival order."""

    def __init__(self):
        self._lock = threading.Lock()
        self.loaded: List[str] = []
        self.dropped: List[str] = []

    def load(self, path: str) -> None:
        with self._lock:
            self.loaded.append(path)

    def drop(self, path: str) -> None:
        with self._lock:
            self.dropped.append(path)


__all__ = ["ShardLoader", "LoggingLoader", "RecordingLoader"]
