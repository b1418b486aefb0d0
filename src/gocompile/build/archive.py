"""Zip an output directory into <dir>.zip."""

from __future__ import annotations

import zipfile
from pathlib import Path

ARCHIVE_SUFFIX = ".zip"


def archive_path_for(output_dir: Path) -> Path:
    """build/app_linux_amd64 -> build/app_linux_amd64.zip"""
    return output_dir.with_name(output_dir.name + ARCHIVE_SUFFIX)


def zip_directory(src_dir: Path, dest: Path) -> int:
    """Write every regular file under src_dir into dest, paths relative to src_dir.

    Directory entries are not stored. Returns the number of files written.
    Raises OSError / zipfile.BadZipFile on failure.
    """
    count = 0
    with zipfile.ZipFile(dest, "w", zipfile.ZIP_DEFLATED) as zf:
        for f in sorted(src_dir.rglob("*")):
            if not f.is_file():
                continue
            zf.write(f, f.relative_to(src_dir).as_posix())
            count += 1
    return count
