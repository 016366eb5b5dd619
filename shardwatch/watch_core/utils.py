"""Misc utilities shared across watch_core modules."""

from __future__ import annotations

import os
from typing import Iterable, Type

from watchdog.observers import Observer

from .config import LOGGER


def human_truncate_list(paths: Iterable[str], max_items: int) -> str:
    """Render shard basenames for a log line, e.g. ``"a, b... 3 more"``.

    Paths are sorted and shortened to their last component; only the first
    ``max_items`` are spelled out.
    """
    ordered = sorted(paths)
    out = []
    for i, p in enumerate(ordered):
        if i >= max_items:
            out.append(f"... {len(ordered) - i} more")
            break
        if i > 0:
            out.append(", ")
        out.append(os.path.basename(p))
    return "".join(out)


def create_observer(use_polling: bool, observer_cls: Type[Observer] = Observer) -> Observer:
    """Create a watchdog observer based on configuration."""
    if use_polling:
        try:
            from watchdog.observers.polling import PollingObserver  # type: ignore

            LOGGER.info("[watch_mode] Using polling observer for filesystem events")
            return PollingObserver()
        except ImportError:
            LOGGER.warning(
                "[watch_mode] Polling observer unavailable, falling back to default Observer"
            )
    return observer_cls()


__all__ = [
    "human_truncate_list",
    "create_observer",
]
