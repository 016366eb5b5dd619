"""Directory snapshot diffing: decides which shards to load and drop."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from shardwatch.logger import EmptyDirectoryError, ListingError

from .config import LOG_LIST_MAX, LOGGER, SHARD_SUFFIX
from .dispatch import BoundedDispatcher
from .loader import ShardLoader
from .utils import human_truncate_list


@dataclass
class ScanResult:
    loaded: List[str] = field(default_factory=list)
    dropped: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.loaded or self.dropped)


class SnapshotDiffer:
    """Compares remembered shard timestamps against the directory.

    ``timestamps`` maps absolute shard paths to ``st_mtime_ns``. Only the
    thread running ``scan`` touches it, so it carries no lock.
    """

    def __init__(
        self,
        directory: str,
        loader: ShardLoader,
        suffix: str = SHARD_SUFFIX,
        dispatcher: Optional[BoundedDispatcher] = None,
        logger=LOGGER,
    ):
        self.directory = os.path.abspath(directory)
        self.suffix = suffix
        self.loader = loader
        self.dispatcher = dispatcher or BoundedDispatcher()
        self.logger = logger
        self.timestamps: Dict[str, int] = {}

    def __repr__(self) -> str:
        return f"shardWatcher({self.directory})"

    def _list(self) -> List[str]:
        # Non-recursive; hidden files count like any other.
        try:
            with os.scandir(self.directory) as it:
                return [
                    os.path.join(self.directory, entry.name)
                    for entry in it
                    if entry.name.endswith(self.suffix)
                ]
        except OSError as exc:
            raise ListingError(self.directory, exc) from exc

    def _stat_all(self, names: List[str]) -> Dict[str, int]:
        seen: Dict[str, int] = {}
        for fn in names:
            try:
                st = os.lstat(fn)
            except OSError:
                # Vanished between listing and stat; the next scan settles it.
                continue
            seen[fn] = st.st_mtime_ns
        return seen

    def scan(self) -> ScanResult:
        names = self._list()
        if not self.timestamps and not names:
            raise EmptyDirectoryError(self.directory)

        seen = self._stat_all(names)

        to_load = sorted(
            fn for fn, mtime in seen.items() if self.timestamps.get(fn) != mtime
        )
        to_drop = sorted(fn for fn in self.timestamps if fn not in seen)
        for fn in to_load:
            self.timestamps[fn] = seen[fn]
        for fn in to_drop:
            del self.timestamps[fn]

        # Unload deleted shards before loading new data.
        if to_drop:
            self.logger.info("unloading %d shard(s)", len(to_drop))
        for fn in to_drop:
            self.logger.info("unloading: %s", os.path.basename(fn))
            try:
                self.loader.drop(fn)
            except Exception:
                self.logger.warning("loader raised while unloading %s", fn, exc_info=True)

        if to_load:
            self.logger.info(
                "loading %d shard(s): %s",
                len(to_load),
                human_truncate_list(to_load, LOG_LIST_MAX),
            )
            self.dispatcher.run(to_load, self.loader.load)

        return ScanResult(loaded=to_load, dropped=to_drop)


__all__ = ["ScanResult", "SnapshotDiffer"]
