import os
import queue
import sys
import time
from pathlib import Path

import pytest

# Ensure repository root is on sys.path so `import shardwatch...` works locally
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class QueueLoader:
    """Loader that hands every call to a test through blocking queues."""

    def __init__(self):
        self.loads = queue.Queue()
        self.drops = queue.Queue()

    def load(self, path):
        self.loads.put(path)

    def drop(self, path):
        self.drops.put(path)

    def next_load(self, timeout=5.0):
        return self.loads.get(timeout=timeout)

    def next_drop(self, timeout=5.0):
        return self.drops.get(timeout=timeout)

    def assert_quiet(self, settle=0.3):
        time.sleep(settle)
        assert self.loads.empty(), f"spurious load of {self.loads.get_nowait()!r}"
        assert self.drops.empty(), f"spurious drop of {self.drops.get_nowait()!r}"


def write_shard(path: Path, data: bytes, mtime_ns=None) -> Path:
    """Atomically (re)write a shard so a scan only ever sees the final file."""
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_bytes(data)
    if mtime_ns is not None:
        os.utime(tmp, ns=(mtime_ns, mtime_ns))
    os.replace(tmp, path)
    return path


@pytest.fixture
def loader():
    return QueueLoader()


@pytest.fixture
def shard_dir(tmp_path):
    d = tmp_path / "index"
    d.mkdir()
    return d
