"""Scan command: one cold scan, listing what a loader would be given."""
from __future__ import annotations

import argparse
import json
import sys

from cli.core import resolve_dir, resolve_suffix


def cmd_scan(args: argparse.Namespace) -> None:
    """Cold-scan a shard directory with a recording loader."""
    from shardwatch.watch_core.loader import RecordingLoader
    from shardwatch.watch_core.snapshot import SnapshotDiffer

    root = resolve_dir(args)
    loader = RecordingLoader()
    differ = SnapshotDiffer(str(root), loader, suffix=resolve_suffix(args))
    result = differ.scan()

    if getattr(args, "json", False):
        json.dump(
            {"ok": True, "directory": differ.directory, "shards": result.loaded},
            sys.stdout,
        )
        sys.stdout.write("\n")
        return
    for path in result.loaded:
        print(path)
    print(f"{len(result.loaded)} shard(s) in {differ.directory}", file=sys.stderr)
