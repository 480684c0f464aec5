"""Inspect and edit a prefs JSON file from the command line.

Example:
    python -m tools.prefs_inspector.main --file appdata/prefs.json queue outbox 8
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from playerprefs.api.errors import PrefsError
from playerprefs.api.logging import get_logger
from playerprefs.api.store import PrefsEntry, PrefsStore, PrefsValueKind
from playerprefs.queue.circular import PrefsQueue
from playerprefs.runtime.app_data import resolve_prefs_file
from playerprefs.runtime.logging import setup_prefs_logging, stop_prefs_logging
from playerprefs.store.json_file import JsonFilePrefsStore
from playerprefs.values.primitives import PrefsString

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="prefs_inspector")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Prefs JSON file (defaults to <PLAYERPREFS_DATA_DIR>/prefs.json).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for prefs events (defaults to PLAYERPREFS_LOG_LEVEL).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List every key with its kind and value.")

    get_cmd = commands.add_parser("get", help="Print one key.")
    get_cmd.add_argument("key")

    for kind in ("int", "float", "string"):
        set_cmd = commands.add_parser(f"set-{kind}", help=f"Store a {kind} value.")
        set_cmd.add_argument("key")
        set_cmd.add_argument("value")

    delete_cmd = commands.add_parser("delete", help="Remove one key.")
    delete_cmd.add_argument("key")

    queue_cmd = commands.add_parser("queue", help="Show a string queue's count and items.")
    queue_cmd.add_argument("prefix")
    queue_cmd.add_argument("length", type=int)
    return parser


def format_entry(key: str, entry: PrefsEntry) -> str:
    value = entry.value
    if entry.kind is PrefsValueKind.STRING:
        value = repr(value)
    return f"{key}\t{entry.kind.value}\t{value}"


def run_command(args: argparse.Namespace, store: PrefsStore) -> int:
    if args.command == "list":
        for key in store.keys():
            entry = store.entry(key)
            if entry is not None:
                print(format_entry(key, entry))
        return 0
    if args.command == "get":
        entry = store.entry(args.key)
        if entry is None:
            print(f"missing key: {args.key}", file=sys.stderr)
            return 1
        print(format_entry(args.key, entry))
        return 0
    if args.command == "set-int":
        store.set_int(args.key, int(args.value))
        return 0
    if args.command == "set-float":
        store.set_float(args.key, float(args.value))
        return 0
    if args.command == "set-string":
        store.set_string(args.key, args.value)
        return 0
    if args.command == "delete":
        if not store.has_key(args.key):
            print(f"missing key: {args.key}", file=sys.stderr)
            return 1
        store.delete_key(args.key)
        return 0
    if args.command == "queue":
        queue = PrefsQueue(PrefsString, args.prefix, args.length, store=store)
        print(f"count={queue.count} length={queue.length} full={queue.is_full}")
        for position, item in enumerate(queue.snapshot()):
            print(f"{position}\t{item!r}")
        return 0
    raise ValueError(f"unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    path = args.file if args.file is not None else resolve_prefs_file()
    owns_logging = setup_prefs_logging(level_name=args.log_level)
    try:
        logger.debug("prefs_inspector_command command=%s path=%s", args.command, path)
        store = JsonFilePrefsStore(path, autosave=True)
        return run_command(args, store)
    except (PrefsError, ValueError, OverflowError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    finally:
        if owns_logging:
            stop_prefs_logging()


if __name__ == "__main__":
    raise SystemExit(main())
