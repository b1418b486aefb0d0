"""Per-target Go builds: naming, compiler invocation, zip archives, multi-target driver."""

from .archive import archive_path_for, zip_directory
from .compiler import build_command, run_go_build, target_env
from .driver import run_all
from .naming import NameFormat, executable_name, resolve_dir_name
from .orchestrator import BuildOutcome, BuildRequest, FailureKind, run_one

__all__ = [
    "BuildOutcome",
    "BuildRequest",
    "FailureKind",
    "NameFormat",
    "archive_path_for",
    "build_command",
    "executable_name",
    "resolve_dir_name",
    "run_all",
    "run_go_build",
    "run_one",
    "target_env",
    "zip_directory",
]
