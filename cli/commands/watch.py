"""Watch command: follow a shard directory and report load/drop (daemon mode)."""
from __future__ import annotations

import argparse
import sys
import time

from cli.core import resolve_dir, resolve_suffix


def cmd_watch(args: argparse.Namespace) -> None:
    """Watch a shard directory until interrupted."""
    from shardwatch.watch_core.loader import LoggingLoader
    from shardwatch.watch_core.watcher import DirectoryWatcher

    root = resolve_dir(args)
    suffix = resolve_suffix(args)
    watcher = DirectoryWatcher(
        str(root),
        LoggingLoader(),
        suffix=suffix,
        concurrency=getattr(args, "concurrency", None),
        use_polling=True if getattr(args, "polling", False) else None,
    )
    print(f"Watching {root} for *{suffix}", file=sys.stderr)

    try:
        while True:
            time.sleep(1.0)
    except KeyboardInterrupt:
        print("\nStopping watcher...", file=sys.stderr)
    finally:
        watcher.stop()
