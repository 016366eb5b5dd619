"""Core building blocks of the shard watcher.

Modules:
    config: shared configuration constants and logger
    utils: list formatting and observer helpers
    loader: the load/drop capability the watcher drives
    dispatch: bounded concurrent shard loads
    snapshot: directory diffing against tracked timestamps
    queue: coalescing rescan signal
    handler: watchdog event handler and scan consumer thread
    watcher: DirectoryWatcher lifecycle
"""

from . import config, utils, loader, dispatch, snapshot, queue, handler, watcher
from .watcher import DirectoryWatcher, WatcherState

__all__ = [
    "config",
    "utils",
    "loader",
    "dispatch",
    "snapshot",
    "queue",
    "handler",
    "watcher",
    "DirectoryWatcher",
    "WatcherState",
]
