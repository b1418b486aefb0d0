"""Build one target: create its output directory, compile, optionally zip."""

from __future__ import annotations

import logging
import sys
import zipfile
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gocompile.build.archive import archive_path_for, zip_directory
from gocompile.build.compiler import run_go_build
from gocompile.build.naming import NameFormat, executable_name, resolve_dir_name
from gocompile.helpers import program_name as cwd_program_name

log = logging.getLogger(__name__)

CompileFn = Callable[[Path, str, str, Path], bool]
ArchiveFn = Callable[[Path, Path], int]


class FailureKind(Enum):
    DIRECTORY = "directory"
    COMPILE = "compile"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class BuildRequest:
    """Everything needed to build one target. program_name defaults to the cwd base name."""

    source_unit: Path
    output_root: Path
    target_os: str
    target_arch: str
    name_format: NameFormat = NameFormat.DEFAULT
    version: str = ""
    archive_after_build: bool = False
    program_name: str = ""

    @property
    def name(self) -> str:
        return self.program_name or cwd_program_name()

    @property
    def dir_name(self) -> str:
        return resolve_dir_name(
            self.name_format, self.name, self.version, self.target_os, self.target_arch
        )

    @property
    def output_dir(self) -> Path:
        return self.output_root / self.dir_name


@dataclass(frozen=True)
class BuildOutcome:
    """Result of one build. failed_directory is what the caller should remove on failure."""

    succeeded: bool
    failed_directory: Path | None = None
    failure: FailureKind | None = None

    @classmethod
    def ok(cls) -> BuildOutcome:
        return cls(succeeded=True)

    @classmethod
    def failed(cls, failure: FailureKind, failed_directory: Path | None) -> BuildOutcome:
        return cls(succeeded=False, failed_directory=failed_directory, failure=failure)


def run_one(
    request: BuildRequest,
    compile_fn: CompileFn | None = None,
    archive_fn: ArchiveFn | None = None,
) -> BuildOutcome:
    """Build request's target into output_root/<dir name>. Never raises for I/O or compiler errors."""
    compile_fn = compile_fn or run_go_build
    archive_fn = archive_fn or zip_directory
    output_dir = request.output_dir
    print(f"🔨 Output: {output_dir}")

    root_existed = request.output_root.exists()
    try:
        output_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        print(f"❌ Cannot create {output_dir}: {e}", file=sys.stderr)
        # Only clean up a root this call created; an existing root may hold earlier outputs.
        cleanup = None if root_existed else request.output_root
        return BuildOutcome.failed(FailureKind.DIRECTORY, cleanup)

    exe_path = output_dir / executable_name(request.name, request.target_os)
    print(f"   executable output path is {exe_path}")
    if not compile_fn(request.source_unit, request.target_os, request.target_arch, exe_path):
        return BuildOutcome.failed(FailureKind.COMPILE, output_dir)
    print(f"✅ Built {request.target_os}/{request.target_arch}: {exe_path}")

    if request.archive_after_build:
        zip_path = archive_path_for(output_dir)
        try:
            count = archive_fn(output_dir, zip_path)
        except (OSError, zipfile.BadZipFile) as e:
            print(f"❌ Cannot create archive {zip_path}: {e}", file=sys.stderr)
            try:
                zip_path.unlink(missing_ok=True)
            except OSError as unlink_err:
                log.warning("Could not remove partial archive %s: %s", zip_path, unlink_err)
            return BuildOutcome.failed(FailureKind.ARCHIVE, output_dir)
        log.debug("Archived %d file(s) from %s", count, output_dir)
        print(f"📦 Archived {output_dir} -> {zip_path}")

    return BuildOutcome.ok()
