"""Shared helpers for CLI commands."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path (fallback for development mode)
try:
    import shardwatch  # noqa: F401
except ImportError:
    ROOT_DIR = Path(__file__).resolve().parent.parent
    if str(ROOT_DIR) not in sys.path:
        sys.path.insert(0, str(ROOT_DIR))

from shardwatch.watch_core.config import SHARD_DIR, SHARD_SUFFIX  # noqa: E402


def resolve_dir(args: argparse.Namespace) -> Path:
    """Directory from the positional argument, else $SHARD_DIR."""
    path = getattr(args, "path", None)
    return Path(path).resolve() if path else SHARD_DIR


def resolve_suffix(args: argparse.Namespace) -> str:
    return getattr(args, "suffix", None) or SHARD_SUFFIX
