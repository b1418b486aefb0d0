"""Pytest fixtures for gocompile tests."""

from pathlib import Path

import pytest


class FakeCompiler:
    """Stands in for `go build`: records calls, writes a dummy executable, fails on request."""

    def __init__(self, fail_on: set[tuple[str, str]] | None = None) -> None:
        self.fail_on = fail_on or set()
        self.calls: list[tuple[Path, str, str, Path]] = []

    def __call__(self, source: Path, goos: str, goarch: str, output_path: Path) -> bool:
        self.calls.append((source, goos, goarch, output_path))
        if (goos, goarch) in self.fail_on:
            return False
        output_path.write_bytes(b"\x7fELF fake " + f"{goos}/{goarch}".encode())
        return True

    @property
    def targets(self) -> list[tuple[str, str]]:
        return [(goos, goarch) for _, goos, goarch, _ in self.calls]


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary Go project named `app` with main.go; cwd is set to it."""
    root = tmp_path / "app"
    root.mkdir()
    (root / "main.go").write_text('package main\n\nfunc main() { println("hi") }\n')
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def make_compiler() -> type[FakeCompiler]:
    """FakeCompiler class, for tests that need fail_on."""
    return FakeCompiler
