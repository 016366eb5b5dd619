"""CLI entry point — argparse dispatcher for all subcommands."""
from __future__ import annotations

import argparse
import json
import sys
import traceback


# ---------------------------------------------------------------------------
# Command registry: command name → (module_path, function_name)
# Lazy-imported at dispatch time to keep startup fast.
# ---------------------------------------------------------------------------
COMMANDS = {
    "scan":  ("cli.commands.scan",  "cmd_scan"),
    "watch": ("cli.commands.watch", "cmd_watch"),
}


# ---------------------------------------------------------------------------
# Shared argparse helpers
# ---------------------------------------------------------------------------
def _add_dir_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("path", nargs="?", default=None, help="Shard directory (default: $SHARD_DIR)")
    p.add_argument("-s", "--suffix", default=None, help="Shard file suffix (default: $SHARD_SUFFIX)")


# ---------------------------------------------------------------------------
# Parser builder
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    from cli._version import __version__

    parser = argparse.ArgumentParser(
        prog="shardwatch",
        description="Shard watcher CLI — keep a loader in sync with a shard directory",
    )
    parser.add_argument("--debug", action="store_true", help="Show stack traces on error")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    # scan
    p = sub.add_parser("scan", help="Cold-scan a directory and list the shards it would load")
    _add_dir_args(p)
    p.add_argument("--json", action="store_true", help="JSON output")

    # watch
    p = sub.add_parser("watch", help="Follow a directory and report load/drop (daemon)")
    _add_dir_args(p)
    p.add_argument("-j", "--concurrency", type=int, default=None, help="Max concurrent loads")
    p.add_argument("--polling", action="store_true", help="Use the polling observer")

    return parser


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    entry = COMMANDS.get(args.command)
    if not entry:
        parser.print_help()
        sys.exit(1)

    mod_path, fn_name = entry
    try:
        import importlib
        mod = importlib.import_module(mod_path)
        fn = getattr(mod, fn_name)
        fn(args)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as exc:
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, default=str)
        sys.stdout.write("\n")
        if args.debug:
            traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
