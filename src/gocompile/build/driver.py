"""Build a sequence of targets, stopping and cleaning up on the first failure.

Earlier successful outputs are kept when a later target fails. GOOS/GOARCH
reach the compiler as an explicit env mapping, so os.environ is the same
before and after every run.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import replace

from gocompile.build.orchestrator import (
    ArchiveFn,
    BuildOutcome,
    BuildRequest,
    CompileFn,
    run_one,
)
from gocompile.helpers import delete_dir
from gocompile.targets import TargetTriple

log = logging.getLogger(__name__)


def run_all(
    template: BuildRequest,
    triples: Iterable[TargetTriple],
    compile_fn: CompileFn | None = None,
    archive_fn: ArchiveFn | None = None,
) -> BuildOutcome:
    """Build template for each triple in order. Returns the first failing outcome, else success."""
    seen: dict[str, TargetTriple] = {}
    built = 0
    for triple in triples:
        request = replace(template, target_os=triple.os, target_arch=triple.arch)
        dir_name = request.dir_name
        earlier = seen.get(dir_name)
        if earlier is not None:
            log.warning(
                "%s and %s share output directory %r; files are overwritten",
                earlier,
                triple,
                dir_name,
            )
        seen[dir_name] = triple

        outcome = run_one(request, compile_fn=compile_fn, archive_fn=archive_fn)
        if not outcome.succeeded:
            print(f"❌ Build failed for {triple}; stopping", file=sys.stderr)
            if earlier is not None and outcome.failed_directory == request.output_dir:
                # Holds outputs of an earlier successful target.
                print(f"   Keeping {request.output_dir}: shared with {earlier}", file=sys.stderr)
            else:
                delete_dir(outcome.failed_directory)
            return outcome
        built += 1

    print(f"🎉 gocompile: successfully built {built} target(s)!")
    return BuildOutcome.ok()
