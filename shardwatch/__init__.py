"""Keep an in-memory shard index in sync with a directory of shard files."""

from shardwatch.logger import (
    ConfigurationError,
    EmptyDirectoryError,
    ListingError,
    ShardWatchError,
    WatchError,
)
from shardwatch.watch_core.loader import ShardLoader
from shardwatch.watch_core.utils import human_truncate_list
from shardwatch.watch_core.watcher import DirectoryWatcher, WatcherState

__all__ = [
    "DirectoryWatcher",
    "WatcherState",
    "ShardLoader",
    "human_truncate_list",
    "ShardWatchError",
    "ConfigurationError",
    "EmptyDirectoryError",
    "ListingError",
    "WatchError",
]
