"""`gocompile` entry point: gather settings (args, config, prompts) and build every target."""

from __future__ import annotations

import argparse
import functools
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from gocompile.build.compiler import run_go_build
from gocompile.build.driver import run_all
from gocompile.build.naming import NameFormat
from gocompile.build.orchestrator import BuildRequest, FailureKind
from gocompile.cli import prompts
from gocompile.config import ConfigError, find_config, load_config
from gocompile.helpers import program_name
from gocompile.targets import TargetTriple, host_triple

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130

EXIT_CODES: dict[FailureKind, int] = {
    FailureKind.DIRECTORY: 3,
    FailureKind.COMPILE: 4,
    FailureKind.ARCHIVE: 5,
}

USAGE = (
    "Usage: gocompile <.go file|package dir> [goos] [goos-override] [goarch-override]\n"
    "       gocompile <.go file> for QUICKSTART"
)


@dataclass
class Settings:
    """Everything gathered before building."""

    source: Path
    triples: list[TargetTriple]
    name_format: NameFormat
    version: str
    build_dir: Path
    zip: bool
    go: str
    build_flags: list[str]


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gocompile",
        description="Cross-compile a Go program into per-target build directories",
    )
    ap.add_argument("source", nargs="?", help=".go file or package directory to build")
    ap.add_argument("goos", nargs="?", help="target GOOS (omit for the QUICKSTART menu)")
    ap.add_argument("goos_override", nargs="?", help="GOOS override (takes precedence)")
    ap.add_argument("goarch_override", nargs="?", help="GOARCH override")
    ap.add_argument("--config", type=Path, default=None, help="YAML defaults (default: ./gocompile.yaml)")
    ap.add_argument("--build-dir", default=None, help="Output root (skips the prompt)")
    ap.add_argument(
        "--name-format",
        choices=[f.value for f in NameFormat],
        default=None,
        help="Directory name format 0/1/2 (skips the prompt)",
    )
    ap.add_argument("--app-version", default=None, help="Version used by name format 0")
    ap.add_argument("--zip", action="store_true", default=None, help="Zip each output directory")
    ap.add_argument("-y", "--yes", action="store_true", help="Accept defaults; no prompts")
    ap.add_argument("--go", default=None, help="Go compiler binary (default: go)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def gather_settings(
    args: argparse.Namespace,
    config: dict,
    ask: prompts.Ask,
    host: TargetTriple | None = None,
) -> Settings:
    """Resolve targets and naming from positionals, options, config defaults and prompts."""
    host = host or host_triple()

    if args.goos:
        triples = [TargetTriple(args.goos, host.arch)]
    elif args.yes:
        triples = [host]
    else:
        triples = prompts.ask_quickstart(ask, host)

    if args.goos_override or args.goarch_override:
        single = triples[0]
        triples = [
            TargetTriple(args.goos_override or single.os, args.goarch_override or single.arch)
        ]

    format_blank = False
    if args.name_format is not None:
        name_format = NameFormat.parse(args.name_format)
    elif args.yes:
        name_format = NameFormat.parse(config["name_format"])
    else:
        name_format, format_blank = prompts.ask_name_format(ask, config["name_format"])

    version = args.app_version if args.app_version is not None else config["version"]
    if format_blank and name_format is NameFormat.DEFAULT and args.app_version is None:
        version = prompts.ask_version(ask, version)

    if args.build_dir is not None:
        build_dir = args.build_dir
    elif args.yes:
        build_dir = config["build_dir"]
    else:
        build_dir = prompts.ask_build_dir(ask, config["build_dir"])

    if args.zip is not None:
        do_zip = args.zip
    elif args.yes:
        do_zip = config["zip"]
    else:
        do_zip = prompts.ask_zip(ask, config["zip"])

    return Settings(
        source=Path(args.source),
        triples=triples,
        name_format=name_format,
        version=version,
        build_dir=Path(build_dir),
        zip=do_zip,
        go=args.go or config["go"],
        build_flags=list(config["build_flags"]),
    )


def run_gocompile_argv(argv: list[str] | None = None, ask: prompts.Ask | None = None) -> int:
    """Parse argv, gather settings, build. Returns the process exit status."""
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.source:
        print(USAGE)
        return EXIT_OK

    try:
        name = program_name()
        config = load_config(args.config or find_config(Path.cwd()))
    except (ConfigError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_CONFIG

    try:
        settings = gather_settings(args, config, ask or prompts.read_answer)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_INTERRUPTED

    first = settings.triples[0]
    template = BuildRequest(
        source_unit=settings.source,
        output_root=settings.build_dir,
        target_os=first.os,
        target_arch=first.arch,
        name_format=settings.name_format,
        version=settings.version,
        archive_after_build=settings.zip,
        program_name=name,
    )
    compile_fn = functools.partial(run_go_build, go=settings.go, build_flags=settings.build_flags)
    log.debug("Targets: %s", ", ".join(str(t) for t in settings.triples))

    try:
        outcome = run_all(template, settings.triples, compile_fn=compile_fn)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_INTERRUPTED

    if outcome.succeeded:
        return EXIT_OK
    return EXIT_CODES.get(outcome.failure, 1)


def main() -> None:
    """Main CLI entry point."""
    sys.exit(run_gocompile_argv())


if __name__ == "__main__":
    main()
