#!/usr/bin/env python3
"""CLI commands: argument parsing and delegation to the watcher core."""
from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from cli.main import build_parser, main

pytestmark = pytest.mark.unit


def test_parser_knows_scan_and_watch():
    parser = build_parser()
    args = parser.parse_args(["watch", "/shards", "-j", "4", "--polling", "-s", ".idx"])
    assert args.command == "watch"
    assert args.path == "/shards"
    assert args.concurrency == 4
    assert args.polling is True
    assert args.suffix == ".idx"

    args = parser.parse_args(["scan", "--json"])
    assert args.command == "scan"
    assert args.path is None
    assert args.json is True


def test_scan_lists_shards(tmp_path, capsys):
    (tmp_path / "b.zoekt").write_bytes(b"x")
    (tmp_path / "a.zoekt").write_bytes(b"x")
    (tmp_path / "c.txt").write_bytes(b"x")

    main(["scan", str(tmp_path)])

    out = capsys.readouterr()
    assert out.out.splitlines() == [str(tmp_path / "a.zoekt"), str(tmp_path / "b.zoekt")]
    assert "2 shard(s)" in out.err


def test_scan_json(tmp_path, capsys):
    (tmp_path / "a.idx").write_bytes(b"x")

    main(["scan", str(tmp_path), "--suffix", ".idx", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert payload["shards"] == [str(tmp_path / "a.idx")]


def test_scan_empty_directory_exits_nonzero(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["scan", str(tmp_path)])
    assert excinfo.value.code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is False
    assert "empty" in payload["error"]


def test_watch_stops_watcher_on_interrupt(tmp_path):
    from cli.commands import watch as watch_cmd

    args = MagicMock()
    args.path = str(tmp_path)
    args.suffix = None
    args.concurrency = 2
    args.polling = False

    fake_watcher = MagicMock()
    with patch("shardwatch.watch_core.watcher.DirectoryWatcher", return_value=fake_watcher) as ctor, \
            patch.object(watch_cmd.time, "sleep", side_effect=KeyboardInterrupt):
        watch_cmd.cmd_watch(args)

    _, kwargs = ctor.call_args
    assert kwargs["concurrency"] == 2
    assert kwargs["suffix"] == ".zoekt"
    assert kwargs["use_polling"] is None
    fake_watcher.stop.assert_called_once_with()


def test_daemon_entrypoint_reports_empty_directory(tmp_path, monkeypatch):
    import shardwatch.watch_shards as daemon

    monkeypatch.setattr(daemon, "SHARD_DIR", tmp_path)
    assert daemon.main() == 1


def test_daemon_entrypoint_stops_on_interrupt(tmp_path, monkeypatch):
    import shardwatch.watch_shards as daemon

    fake_watcher = MagicMock()
    monkeypatch.setattr(daemon, "DirectoryWatcher", MagicMock(return_value=fake_watcher))
    monkeypatch.setattr(daemon.time, "sleep", MagicMock(side_effect=KeyboardInterrupt))

    assert daemon.main() == 0
    fake_watcher.stop.assert_called_once_with()
