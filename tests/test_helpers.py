"""Tests for gocompile.helpers."""

from pathlib import Path
from unittest.mock import patch

import pytest

from gocompile.helpers import delete_dir, format_aligned, program_name


class TestFormatAligned:
    def test_pads_first_column(self) -> None:
        assert format_aligned([("all", "everything"), ("windows", "64-bit")]) == [
            "all     everything",
            "windows 64-bit",
        ]

    def test_empty(self) -> None:
        assert format_aligned([]) == []


class TestProgramName:
    def test_is_cwd_base_name(self, tmp_path: Path) -> None:
        assert program_name(tmp_path / "myapp") == "myapp"

    def test_filesystem_root_raises(self) -> None:
        with pytest.raises(ValueError, match="Cannot derive a program name"):
            program_name(Path("/"))

    def test_deleted_cwd_raises(self) -> None:
        with patch("gocompile.helpers.Path.cwd", side_effect=FileNotFoundError(2, "No such file")):
            with pytest.raises(ValueError, match="no longer exists"):
                program_name()


class TestDeleteDir:
    def test_removes_tree(self, tmp_path: Path, capsys) -> None:
        d = tmp_path / "build" / "app_linux_amd64"
        d.mkdir(parents=True)
        (d / "app").write_text("x")
        assert delete_dir(d) is True
        assert not d.exists()
        assert "Directory deleted" in capsys.readouterr().out

    def test_none_and_missing_are_noops(self, tmp_path: Path) -> None:
        assert delete_dir(None) is False
        assert delete_dir(tmp_path / "missing") is False

    def test_errors_are_reported_not_raised(self, tmp_path: Path, capsys) -> None:
        d = tmp_path / "locked"
        d.mkdir()
        with patch("gocompile.helpers.shutil.rmtree", side_effect=PermissionError("denied")):
            assert delete_dir(d) is False
        assert "Could not delete" in capsys.readouterr().err
