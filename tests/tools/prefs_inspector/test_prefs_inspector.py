from __future__ import annotations

import logging
from pathlib import Path

from playerprefs.queue.circular import PrefsQueue
from playerprefs.store.json_file import JsonFilePrefsStore
from playerprefs.values.primitives import PrefsString
from tools.prefs_inspector.main import build_parser, main


def test_parser_requires_command() -> None:
    parser = build_parser()
    args = parser.parse_args(["--file", "x.json", "get", "score"])
    assert args.command == "get"
    assert args.key == "score"
    assert args.file == Path("x.json")


def test_set_then_list_and_get(tmp_path: Path, capsys) -> None:
    path = tmp_path / "prefs.json"
    assert main(["--file", str(path), "set-int", "score", "12"]) == 0
    assert main(["--file", str(path), "set-string", "name", "ada"]) == 0
    assert main(["--file", str(path), "set-float", "volume", "0.5"]) == 0
    capsys.readouterr()

    assert main(["--file", str(path), "list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["name\tstring\t'ada'", "score\tint\t12", "volume\tfloat\t0.5"]

    assert main(["--file", str(path), "get", "score"]) == 0
    assert capsys.readouterr().out.strip() == "score\tint\t12"


def test_missing_key_exits_one(tmp_path: Path, capsys) -> None:
    path = tmp_path / "prefs.json"
    assert main(["--file", str(path), "get", "missing"]) == 1
    assert main(["--file", str(path), "delete", "missing"]) == 1
    assert "missing key" in capsys.readouterr().err


def test_delete_removes_key(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    main(["--file", str(path), "set-int", "score", "1"])

    assert main(["--file", str(path), "delete", "score"]) == 0
    assert not JsonFilePrefsStore(path).has_key("score")


def test_invalid_values_exit_two(tmp_path: Path, capsys) -> None:
    path = tmp_path / "prefs.json"
    assert main(["--file", str(path), "set-int", "score", "nope"]) == 2
    assert main(["--file", str(path), "set-int", "score", str(2**40)]) == 2
    path.write_text("{broken", encoding="utf-8")
    assert main(["--file", str(path), "list"]) == 2
    assert "error:" in capsys.readouterr().err


def test_queue_command_prints_fifo_snapshot(tmp_path: Path, capsys) -> None:
    path = tmp_path / "prefs.json"
    queue = PrefsQueue(PrefsString, "outbox", 3, store=JsonFilePrefsStore(path))
    queue.enqueue("first")
    queue.enqueue("second")

    assert main(["--file", str(path), "queue", "outbox", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["count=2 length=3 full=False", "0\t'first'", "1\t'second'"]


def test_corrupted_file_is_logged_through_prefs_pipeline(tmp_path: Path, capsys) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("{broken", encoding="utf-8")
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    root.handlers.clear()
    try:
        assert main(["--file", str(path), "--log-level", "error", "list"]) == 2
    finally:
        root.handlers.extend(original_handlers)

    err = capsys.readouterr().err
    assert "ERROR playerprefs.store.json_file: prefs_store_corrupted" in err
    assert "error: " in err
    assert logging.getLogger("playerprefs").handlers == []
    assert logging.getLogger("playerprefs").propagate is True
