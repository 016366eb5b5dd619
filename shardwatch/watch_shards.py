#!/usr/bin/env python3
"""Daemon entrypoint: follow SHARD_DIR and report load/drop until interrupted."""
from __future__ import annotations

import sys
import time

from shardwatch.logger import ShardWatchError
from shardwatch.watch_core.config import LOGGER, SHARD_DIR, SHARD_SUFFIX
from shardwatch.watch_core.loader import LoggingLoader
from shardwatch.watch_core.watcher import DirectoryWatcher

logger = LOGGER


def main() -> int:
    logger.info("Watch mode: dir=%s suffix=%s", SHARD_DIR, SHARD_SUFFIX)
    try:
        watcher = DirectoryWatcher(str(SHARD_DIR), LoggingLoader())
    except ShardWatchError as e:
        logger.error("cannot start shard watcher: %s", e)
        return 1

    try:
        while True:
            time.sleep(1.0)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
