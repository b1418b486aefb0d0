"""Shared helpers for gocompile (console text, naming, filesystem cleanup).

Used by build and cli modules.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

log = logging.getLogger(__name__)

# --- Text ---


def format_aligned(rows: list[tuple[str, str]]) -> list[str]:
    """Left-align the first column to its longest entry: ["all     Build ...", ...]."""
    if not rows:
        return []
    width = max(len(word) for word, _ in rows)
    return [f"{word:<{width}} {value}" for word, value in rows]


def print_aligned(rows: list[tuple[str, str]]) -> None:
    for line in format_aligned(rows):
        print(line)


# --- Naming ---


def program_name(cwd: Path | None = None) -> str:
    """Program name: base name of the working directory. Raises ValueError when there is none."""
    try:
        d = cwd or Path.cwd()
    except FileNotFoundError as e:
        msg = f"Working directory no longer exists: {e}"
        raise ValueError(msg) from e
    if not d.name:
        msg = f"Cannot derive a program name from {d}; run gocompile from the project directory"
        raise ValueError(msg)
    return d.name


# --- Filesystem ---


def delete_dir(dir_path: Path | None) -> bool:
    """Best-effort recursive delete. Prints the result; never raises. Returns True if removed."""
    if dir_path is None or str(dir_path) == "":
        return False
    if not dir_path.exists():
        return False
    try:
        shutil.rmtree(dir_path)
    except OSError as e:
        log.warning("Could not delete %s: %s", dir_path, e)
        print(f"❌ Could not delete {dir_path}: {e}", file=sys.stderr)
        return False
    print(f"🗑️  Directory deleted: {dir_path}")
    return True
