#!/usr/bin/env python
"""
Test runner script for etl-dialects.

Usage:
    python run_tests.py                    # Run all tests
    python run_tests.py --coverage         # Run with coverage report
    python run_tests.py --all-checks       # Run all quality checks
    python run_tests.py --help             # Show all options
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
PACKAGE = "etl_dialects"


def _ensure_venv_python():
    """Re-run the script under `.venv` python so pytest inherits the project virtualenv."""
    if os.name == "nt":
        candidate = ROOT_DIR / ".venv" / "Scripts" / "python.exe"
    else:
        candidate = ROOT_DIR / ".venv" / "bin" / "python"

    if candidate.exists():
        candidate = candidate.resolve()
        current = Path(sys.executable).resolve()
        if current != candidate:
            print(f"Re-launching tests under virtual environment: {candidate}")
            os.execv(str(candidate), [str(candidate)] + sys.argv)


def run_command(cmd: list, description: str) -> bool:
    """Run a command and return True if successful."""
    print(f"\n{'='*80}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*80}\n")

    result = subprocess.run(cmd, cwd=ROOT_DIR)
    success = result.returncode == 0

    if success:
        print(f"\n{description} - PASSED")
    else:
        print(f"\n{description} - FAILED")

    return success


def main():
    _ensure_venv_python()
    parser = argparse.ArgumentParser(
        description="Run etl-dialects tests and quality checks"
    )
    parser.add_argument(
        "--coverage", action="store_true", help="Run tests with coverage report"
    )
    parser.add_argument("--mypy", action="store_true", help="Run mypy type checking")
    parser.add_argument(
        "--black-check", action="store_true", help="Check code formatting with black"
    )
    parser.add_argument(
        "--all-checks",
        action="store_true",
        help="Run all quality checks (tests, mypy, black)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args()

    results = []

    pytest_cmd = [sys.executable, "-m", "pytest"]
    if args.verbose:
        pytest_cmd.append("-vv")
    if args.coverage or args.all_checks:
        pytest_cmd.extend([f"--cov={PACKAGE}", "--cov-report=term-missing"])
    results.append(run_command(pytest_cmd, "Unit Tests"))

    if args.mypy or args.all_checks:
        results.append(run_command(["mypy", PACKAGE], "Type Checking (mypy)"))

    if args.black_check or args.all_checks:
        black_cmd = ["black", "--check", "--line-length=120", PACKAGE, "tests"]
        results.append(run_command(black_cmd, "Code Formatting (black)"))

    print(f"\n{'='*80}")
    print("TEST SUMMARY")
    print(f"{'='*80}")
    print(f"\nPassed: {sum(results)}/{len(results)}")

    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
