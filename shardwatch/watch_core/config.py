"""Shared configuration and logging helpers for the shard watcher."""

from __future__ import annotations

import os
from pathlib import Path

from shardwatch.logger import get_logger, safe_bool, safe_float, safe_int


def build_logger():
    """Create the watcher logger, honoring LOG_JSON for structured output."""
    return get_logger(
        "shardwatch.watch_core",
        json_format=safe_bool(os.environ.get("LOG_JSON"), False),
    )


LOGGER = build_logger()

SHARD_DIR = Path(os.environ.get("SHARD_DIR", "/data/index")).resolve()
SHARD_SUFFIX = os.environ.get("SHARD_SUFFIX", ".zoekt") or ".zoekt"

# How often a long cold load reports the remaining count
PROGRESS_SECS = safe_float(
    os.environ.get("SHARD_PROGRESS_SECS"), 10.0, logger=LOGGER, context="SHARD_PROGRESS_SECS"
)

# How often an idle scan thread checks that the observer is still alive
HEALTH_SECS = safe_float(
    os.environ.get("WATCH_HEALTH_SECS"), 5.0, logger=LOGGER, context="WATCH_HEALTH_SECS"
)

# Number of shard names spelled out in "loading" log lines
LOG_LIST_MAX = safe_int(
    os.environ.get("SHARD_LOG_LIST_MAX"), 5, logger=LOGGER, context="SHARD_LOG_LIST_MAX"
)


def default_concurrency() -> int:
    """Ceiling for concurrent shard loads; defaults to the host CPU count."""
    cpus = os.cpu_count() or 1
    val = safe_int(
        os.environ.get("SHARD_LOAD_CONCURRENCY"),
        cpus,
        logger=LOGGER,
        context="SHARD_LOAD_CONCURRENCY",
    )
    return val if val > 0 else cpus
