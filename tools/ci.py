#!/usr/bin/env python3
# Copyright 2026 jsonskel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run CI checks locally: format, lint, type check, tests, smoke test, and build.

Pass step keys (e.g. ``lint tests``) to run a subset; with no arguments every
step runs.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

SAMPLE_CATALOG = "docs/examples/catalog.yaml"

STEPS: list[tuple[str, str, list[str]]] = [
    ("format", "Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("lint", "Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("types", "Type check", ["uv", "run", "ty", "check", "src/"]),
    ("tests", "Tests", ["uv", "run", "pytest", "--cov=jsonskel", "--cov-report=term-missing"]),
    ("smoke", "CLI smoke test", ["uv", "run", "jsonskel", "generate", SAMPLE_CATALOG, "User"]),
    ("build", "Build", ["uv", "build"]),
]


def main(argv: list[str]) -> int:
    """Run the selected CI steps and report results."""
    known = {key for key, _, _ in STEPS}
    unknown = [arg for arg in argv if arg not in known]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(sorted(known))}"))
        return 2

    selected = [step for step in STEPS if not argv or step[0] in argv]
    results: list[tuple[str, bool, float]] = []
    for _, title, cmd in selected:
        _banner(title)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((title, proc.returncode == 0, time.monotonic() - start))

    _banner("  Summary")
    for title, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {title} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
