"""Output directory and executable naming for a target."""

from __future__ import annotations

from enum import Enum

FRIENDLY_OS = {
    "windows": "win",
    "darwin": "mac",
}


class NameFormat(Enum):
    """Directory name format selected at the `0/1/2` prompt."""

    DEFAULT = "0"  # {name}_{version}_{goos}_{goarch}
    OS_ONLY = "1"  # {goos}
    FRIENDLY_OS = "2"  # win / mac / {goos}

    @classmethod
    def parse(cls, answer: str | None) -> NameFormat:
        """Map a prompt answer to a format. Only 1 and 2 are special; anything else is DEFAULT."""
        value = (answer or "").strip()
        for fmt in cls:
            if fmt.value == value:
                return fmt
        return cls.DEFAULT


def resolve_dir_name(
    name_format: NameFormat,
    program_name: str,
    version: str,
    goos: str,
    goarch: str,
) -> str:
    """Directory name for one target.

    OS_ONLY and FRIENDLY_OS ignore goarch, so several architectures of one OS
    share a directory.
    """
    if name_format is NameFormat.OS_ONLY:
        return goos
    if name_format is NameFormat.FRIENDLY_OS:
        return FRIENDLY_OS.get(goos, goos)
    if not version:
        return f"{program_name}_{goos}_{goarch}"
    return f"{program_name}_{version}_{goos}_{goarch}"


def executable_name(program_name: str, goos: str) -> str:
    """program_name, with .exe for windows targets."""
    return f"{program_name}.exe" if goos == "windows" else program_name
