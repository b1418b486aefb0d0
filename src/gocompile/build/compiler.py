"""Run `go build` for one GOOS/GOARCH target.

GOOS and GOARCH are passed to the child process through an explicit env
mapping; os.environ is never modified.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

log = logging.getLogger(__name__)


def target_env(
    goos: str,
    goarch: str,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Copy of base (default: os.environ) with GOOS/GOARCH set for the target."""
    env = dict(os.environ if base is None else base)
    env["GOOS"] = goos
    env["GOARCH"] = goarch
    return env


def build_command(
    source: Path,
    output_path: Path,
    go: str = "go",
    build_flags: Sequence[str] = (),
) -> list[str]:
    """`go build` argv. A directory source is built as a project rooted there (-C)."""
    if source.is_dir():
        # -C changes directory before -o is interpreted; output must be absolute.
        return [go, "build", "-C", str(source), *build_flags, "-o", str(output_path.resolve())]
    return [go, "build", *build_flags, "-o", str(output_path), str(source)]


def run_go_build(
    source: Path,
    goos: str,
    goarch: str,
    output_path: Path,
    go: str = "go",
    build_flags: Sequence[str] = (),
) -> bool:
    """Compile source for goos/goarch into output_path. Returns True on success (prints to stderr on failure)."""
    cmd = build_command(source, output_path, go=go, build_flags=build_flags)
    log.debug("GOOS=%s GOARCH=%s %s", goos, goarch, " ".join(cmd))
    try:
        r = subprocess.run(cmd, env=target_env(goos, goarch))
    except FileNotFoundError as e:
        print(f"❌ Go toolchain not found ({go}): {e}", file=sys.stderr)
        return False
    except OSError as e:
        print(f"❌ Cannot run Go toolchain ({go}): {e}", file=sys.stderr)
        return False
    if r.returncode != 0:
        print(f"❌ go build failed for {goos}/{goarch} (exit {r.returncode})", file=sys.stderr)
        return False
    return True
