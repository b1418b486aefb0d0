"""Target triples, quickstart presets, and host GOOS/GOARCH detection."""

from __future__ import annotations

import platform
from dataclasses import dataclass


@dataclass(frozen=True)
class TargetTriple:
    """A (GOOS, GOARCH) pair. Not validated; `go build` rejects unsupported pairs."""

    os: str
    arch: str

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


ALL_PRESET = "all"

PRESETS: dict[str, TargetTriple] = {
    "windows": TargetTriple("windows", "amd64"),
    "win32": TargetTriple("windows", "386"),
    "macos": TargetTriple("darwin", "arm64"),
    "linux": TargetTriple("linux", "arm64"),
}

# Order matters: `all` builds these strictly in sequence.
ALL_TARGETS: tuple[TargetTriple, ...] = (
    PRESETS["windows"],
    PRESETS["win32"],
    PRESETS["macos"],
    PRESETS["linux"],
)

PRESET_DESCRIPTIONS: list[tuple[str, str]] = [
    (ALL_PRESET, "Build compiles for windows, win32, macos and linux"),
    ("windows", ".EXE for Windows 64-bit"),
    ("win32", ".EXE for Windows 32-bit x86"),
    ("macos", "Executable file for ARM64 Darwin"),
    ("linux", "Executable file for ARM64 Linux"),
]

KNOWN_GOOS = (
    "aix",
    "android",
    "darwin",
    "dragonfly",
    "freebsd",
    "hurd",
    "illumos",
    "ios",
    "js",
    "linux",
    "nacl",
    "netbsd",
    "openbsd",
    "plan9",
    "solaris",
    "windows",
    "zos",
)

KNOWN_GOARCH = (
    "386",
    "amd64",
    "amd64p32",
    "arm",
    "arm64",
    "arm64be",
    "armbe",
    "loong64",
    "mips",
    "mips64",
    "mips64le",
    "mips64p32",
    "mips64p32le",
    "mipsle",
    "ppc",
    "ppc64",
    "ppc64le",
    "riscv",
    "riscv64",
    "s390",
    "s390x",
    "sparc",
    "sparc64",
    "wasm",
)

_MACHINE_TO_GOARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def detect_host_goos() -> str:
    """GOOS of the running interpreter (linux, darwin, windows, freebsd, ...)."""
    return platform.system().lower() or "linux"


def detect_host_goarch() -> str:
    """GOARCH of the running interpreter; unknown machines map to their lowercased name."""
    machine = platform.machine().lower()
    return _MACHINE_TO_GOARCH.get(machine, machine or "amd64")


def host_triple() -> TargetTriple:
    return TargetTriple(detect_host_goos(), detect_host_goarch())
