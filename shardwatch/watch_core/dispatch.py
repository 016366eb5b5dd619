"""Bounded fan-out of shard loads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Optional, Sequence

from .config import LOGGER, PROGRESS_SECS, default_concurrency


class BoundedDispatcher:
    """Runs a callable per path with a ceiling on concurrent calls.

    The pool's worker count is the ceiling; a call that raises just frees its
    worker. ``run`` returns only after every call finished.
    """

    def __init__(
        self,
        limit: Optional[int] = None,
        progress_interval: float = PROGRESS_SECS,
        logger=LOGGER,
    ):
        if limit is None or limit <= 0:
            limit = default_concurrency()
        self.limit = limit
        self.progress_interval = progress_interval
        self.logger = logger

    def run(self, paths: Sequence[str], fn: Callable[[str], None]) -> None:
        def _call(path: str) -> None:
            try:
                fn(path)
            except Exception:
                self.logger.warning("loader raised while loading %s", path, exc_info=True)

        with ThreadPoolExecutor(max_workers=self.limit, thread_name_prefix="shard-load") as pool:
            pending = {pool.submit(_call, path) for path in paths}
            while pending:
                _, pending = wait(pending, timeout=self.progress_interval)
                # Occasionally report progress during a long start-up
                if pending:
                    self.logger.info("still need to load %d shards...", len(pending))


__all__ = ["BoundedDispatcher"]
