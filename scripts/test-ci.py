#!/usr/bin/env python
"""
Local CI check for BinTreeLib
=============================

Runs the same gates CI runs, in the same order, and stops at the first
critical failure.

Usage:
    python scripts/test-ci.py          # import, fast tests, flake8
    python scripts/test-ci.py --slow   # also run the slow-marked suite
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def run_step(args, description):
    """Run one gate. Returns True if it exited cleanly."""
    print(f"\n[Check] {description}")
    print(f"  $ {' '.join(args)}")

    result = subprocess.run(args, cwd=PROJECT_ROOT, capture_output=True, text=True)
    if result.returncode == 0:
        print("  PASSED")
        return True

    print("  FAILED")
    output = (result.stdout + result.stderr).strip()
    if output:
        print("  " + output[-1500:].replace("\n", "\n  "))
    return False


def main():
    parser = argparse.ArgumentParser(description="Local CI check for BinTreeLib")
    parser.add_argument("--slow", action="store_true", help="Also run slow tests")
    args = parser.parse_args()

    steps = [
        ([sys.executable, "-c", "import bintreelib; print(bintreelib.__version__)"],
         "Package imports"),
        ([sys.executable, "run_tests.py"],
         "Fast test suite"),
    ]

    try:
        import flake8  # noqa: F401
        steps.append((
            [sys.executable, "-m", "flake8", "bintreelib", "tests",
             "--count", "--select=E9,F63,F7,F82", "--show-source"],
            "Syntax errors and undefined names",
        ))
    except ImportError:
        print("\n[Skipped] flake8 not installed (pip install -e .[dev])")

    if args.slow:
        steps.append(([sys.executable, "-m", "pytest", "-m", "slow", "-q"],
                      "Slow test suite"))

    print("=" * 60)
    print("BINTREELIB LOCAL CI")
    print("=" * 60)

    for cmd, description in steps:
        if not run_step(cmd, description):
            print("\n" + "=" * 60)
            print(f"FAILURE: {description}")
            print("=" * 60)
            return 1

    print("\n" + "=" * 60)
    print("SUCCESS: all checks passed")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
