"""Interactive prompts: quickstart preset menu, raw GOOS/GOARCH, naming, output, zip.

Every function takes an `ask(prompt) -> str` callable so answers can be
scripted in tests.
"""

from __future__ import annotations

from collections.abc import Callable

from gocompile.build.naming import NameFormat
from gocompile.helpers import print_aligned
from gocompile.targets import (
    ALL_PRESET,
    ALL_TARGETS,
    KNOWN_GOARCH,
    KNOWN_GOOS,
    PRESET_DESCRIPTIONS,
    PRESETS,
    TargetTriple,
)

Ask = Callable[[str], str]

NAME_FORMAT_PROMPT = (
    "choose directory name format\n"
    "0(default) = {name}_{version}_{goos}_{goarch}\n"
    "1 = {goos}\n"
    "2 = (windows=win, darwin=mac, others=goos)\n\n"
)


def read_answer(prompt: str) -> str:
    """input() that treats EOF as a blank answer and keeps only the first word."""
    try:
        answer = input(prompt)
    except EOFError:
        print()
        return ""
    parts = answer.split()
    return parts[0] if parts else ""


def _listing(values: tuple[str, ...]) -> str:
    return "\n".join(f"\t{v}" for v in values)


def ask_raw_target(ask: Ask, host: TargetTriple) -> TargetTriple:
    """Free-form GOOS then GOARCH; blank keeps the host value. Not validated."""
    print()
    print(_listing(KNOWN_GOOS))
    goos = ask(f"\nGOOS: ({host.os}) ") or host.os
    print()
    print(_listing(KNOWN_GOARCH))
    goarch = ask(f"\nGOARCH: ({host.arch}) ") or host.arch
    return TargetTriple(goos, goarch)


def ask_quickstart(ask: Ask, host: TargetTriple) -> list[TargetTriple]:
    """Preset menu. Returns all four preset targets for `all`, else one target."""
    print("[gocompile:QUICKSTART] Choose the OS among these OS presets for quick start")
    print_aligned(PRESET_DESCRIPTIONS)
    print()
    answer = ask("OS: (press enter to skip QUICKSTART) ")
    if answer == ALL_PRESET:
        return list(ALL_TARGETS)
    if answer in PRESETS:
        return [PRESETS[answer]]
    if answer == "":
        return [ask_raw_target(ask, host)]
    print(f"Unknown preset {answer!r}; building for host {host}")
    return [host]


def ask_name_format(ask: Ask, default: str = "0") -> tuple[NameFormat, bool]:
    """Returns (format, answered_blank). A blank answer takes the default."""
    answer = ask(NAME_FORMAT_PROMPT + f"(optional, default {default}): ")
    if not answer:
        return NameFormat.parse(default), True
    return NameFormat.parse(answer), False


def ask_version(ask: Ask, default: str = "") -> str:
    suffix = f"({default}) " if default else ""
    return ask(f"version (optional): {suffix}") or default


def ask_build_dir(ask: Ask, default: str = "build") -> str:
    return ask(f"build directory name: ({default}) ") or default


def ask_zip(ask: Ask, default: bool = False) -> bool:
    shown = "y" if default else "n"
    answer = (ask(f"zip after build? (y/n): ({shown}) ") or shown).lower()
    return answer in ("y", "yes")
