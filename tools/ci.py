#!/usr/bin/env python3
# Copyright 2026 schemashape Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the schemashape checks locally: format, lint, types, tests, and package build.

Pass step names (e.g. ``tests lint``) to run a subset.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=schemashape", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main(argv: list[str]) -> int:
    """Run the selected steps (all by default) and print a summary."""
    unknown = [name for name in argv if name not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}"))
        return 2

    selected = argv or list(STEPS)
    results = [_run_step(name, STEPS[name]) for name in selected]

    _banner("Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title)}\n{sep}")


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    _banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
