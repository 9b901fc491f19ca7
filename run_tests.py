#!/usr/bin/env python
"""
Run the Urlbox client test suite, unit tests only unless asked otherwise.
"""
import argparse
import subprocess
import sys


def main():
    parser = argparse.ArgumentParser(description="Run tests for the Urlbox client.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--integration', action='store_true', help='Run tests against the live API')
    group.add_argument('--all', action='store_true', help='Run all tests')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    args = parser.parse_args()

    pytest_cmd = [sys.executable, "-m", "pytest"]
    if args.verbose:
        pytest_cmd.append("-v")
    if args.integration:
        pytest_cmd.extend(["-m", "integration"])
    elif not args.all:
        pytest_cmd.extend(["-m", "unit"])

    return subprocess.run(pytest_cmd).returncode


if __name__ == "__main__":
    sys.exit(main())
