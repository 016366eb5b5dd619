import threading
import time

import pytest

from shardwatch.watch_core.dispatch import BoundedDispatcher

pytestmark = pytest.mark.unit


def test_runs_every_path_and_joins():
    done = []
    lock = threading.Lock()

    def load(path):
        time.sleep(0.01)
        with lock:
            done.append(path)

    paths = [f"/s/{i}.zoekt" for i in range(20)]
    BoundedDispatcher(limit=4).run(paths, load)
    assert sorted(done) == sorted(paths)


def test_respects_concurrency_ceiling():
    lock = threading.Lock()
    in_flight = 0
    peak = 0

    def load(path):
        nonlocal in_flight, peak
        with lock:
            in_flight += 1
            peak = max(peak, in_flight)
        time.sleep(0.02)
        with lock:
            in_flight -= 1

    BoundedDispatcher(limit=3).run([str(i) for i in range(15)], load)
    assert 1 <= peak <= 3
    assert in_flight == 0


def test_failing_load_does_not_leak_slots():
    calls = []

    def load(path):
        calls.append(path)
        raise RuntimeError("boom")

    # With a single slot every failure must hand the slot back, or this hangs.
    BoundedDispatcher(limit=1).run(["a", "b", "c"], load)
    assert calls == ["a", "b", "c"]


def test_default_limit_uses_cpu_count(monkeypatch):
    monkeypatch.delenv("SHARD_LOAD_CONCURRENCY", raising=False)
    monkeypatch.setattr("os.cpu_count", lambda: 6)
    assert BoundedDispatcher().limit == 6
    assert BoundedDispatcher(limit=0).limit == 6
    assert BoundedDispatcher(limit=2).limit == 2


def test_reports_progress_on_slow_start(caplog):
    dispatcher = BoundedDispatcher(limit=2, progress_interval=0.01)

    with caplog.at_level("INFO", logger="shardwatch.watch_core"):
        dispatcher.run([str(i) for i in range(6)], lambda p: time.sleep(0.05))

    assert any("still need to load" in m for m in caplog.messages)


def test_large_batch_runs_on_a_fixed_pool():
    names = set()
    lock = threading.Lock()

    def load(path):
        with lock:
            names.add(threading.current_thread().name)

    BoundedDispatcher(limit=2).run([str(i) for i in range(200)], load)
    assert 1 <= len(names) <= 2
    assert all(n.startswith("shard-load") for n in names)
