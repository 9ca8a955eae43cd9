#!/usr/bin/env python3
"""
Run the QTc calculator test suites.

    python run_tests.py --medical          formula accuracy and clinical thresholds
    python run_tests.py --unit --coverage  validator, models, CLI, with coverage
    python run_tests.py --quick            everything except slow/performance
"""
import sys
import subprocess
import argparse

SUITES = ("unit", "medical", "integration", "performance")

def pytest_command(args):
    cmd = [sys.executable, "-m", "pytest", "tests/"]
    if args.verbose:
        cmd.append("-v")

    if args.quick:
        cmd.extend(["-m", "not slow and not performance"])
    else:
        selected = [suite for suite in SUITES if getattr(args, suite)]
        if selected:
            cmd.extend(["-m", " or ".join(selected)])

    if args.coverage or args.html:
        cmd.extend(["--cov=qtc_calculator", "--cov-report=term-missing"])
        if args.html:
            cmd.append("--cov-report=html")
    return cmd

def main():
    parser = argparse.ArgumentParser(description="Run QTc calculator tests")
    parser.add_argument("--quick", action="store_true", help="Skip slow and performance tests")
    for suite in SUITES:
        parser.add_argument(f"--{suite}", action="store_true", help=f"Run tests marked '{suite}'")
    parser.add_argument("--coverage", action="store_true", help="Report coverage of qtc_calculator")
    parser.add_argument("--html", action="store_true", help="Also write an HTML coverage report to htmlcov/")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    args = parser.parse_args()

    cmd = pytest_command(args)
    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode

if __name__ == "__main__":
    sys.exit(main())
