#!/usr/bin/env python3
"""Composite quality checks for playerprefs, for local and CI use."""

from __future__ import annotations

import argparse
import os
import subprocess
import tempfile
from pathlib import Path


def _run_checked(*, label: str, command: list[str], env: dict[str, str]) -> str:
    print(label, flush=True)
    completed = subprocess.run(command, env=env, check=False, capture_output=True, text=True)
    print(completed.stdout, end="", flush=True)
    print(completed.stderr, end="", flush=True)
    if completed.returncode != 0:
        raise SystemExit(f"{label} failed with exit code {completed.returncode}.")
    return completed.stdout


def _check_inspector_round_trip(env: dict[str, str]) -> None:
    """Drive the inspector CLI against a scratch prefs file in a fresh process per call."""
    with tempfile.TemporaryDirectory(prefix="playerprefs-check-") as scratch:
        prefs_file = str(Path(scratch) / "prefs.json")
        inspector = ["uv", "run", "python", "-m", "tools.prefs_inspector.main", "--file", prefs_file]
        _run_checked(
            label="Writing prefs through the inspector...",
            command=[*inspector, "set-float", "volume", "0.1"],
            env=env,
        )
        output = _run_checked(
            label="Reading prefs back from disk...",
            command=[*inspector, "get", "volume"],
            env=env,
        )
        if output.strip() != "volume\tfloat\t0.10000000149011612":
            raise SystemExit(f"Inspector read back unexpected entry: {output.strip()!r}")
        output = _run_checked(
            label="Inspecting an empty queue...",
            command=[*inspector, "queue", "outbox", "4"],
            env=env,
        )
        if output.strip() != "count=0 length=4 full=False":
            raise SystemExit(f"Inspector reported unexpected queue state: {output.strip()!r}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument("--skip-typecheck", action="store_true")
    parser.add_argument("--skip-tests", action="store_true")
    parser.add_argument("--skip-smoke", action="store_true")
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    os.chdir(root)

    env = os.environ.copy()
    env["PYTHONPATH"] = "."

    if not args.skip_typecheck:
        _run_checked(label="Running mypy...", command=["uv", "run", "mypy"], env=env)

    if not args.skip_tests:
        _run_checked(
            label="Running playerprefs tests with coverage gate...",
            command=[
                "uv",
                "run",
                "pytest",
                "tests/playerprefs",
                "--cov=playerprefs",
                "--cov-report=term-missing",
                "--cov-fail-under=90",
            ],
            env=env,
        )
        _run_checked(
            label="Running persistence critical coverage gate...",
            command=[
                "uv",
                "run",
                "pytest",
                "tests/playerprefs/unit/store",
                "tests/playerprefs/unit/values",
                "tests/playerprefs/unit/queue",
                "--cov=playerprefs.store",
                "--cov=playerprefs.values",
                "--cov=playerprefs.queue",
                "--cov-report=term-missing",
                "--cov-fail-under=95",
            ],
            env=env,
        )
        _run_checked(
            label="Running inspector tests with coverage gate...",
            command=[
                "uv",
                "run",
                "pytest",
                "tests/tools",
                "--cov=tools.prefs_inspector",
                "--cov-report=term-missing",
                "--cov-fail-under=85",
            ],
            env=env,
        )

    if not args.skip_smoke:
        _check_inspector_round_trip(env)

    print("All selected checks passed.", flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
