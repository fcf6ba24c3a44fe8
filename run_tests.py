#!/usr/bin/env python3
"""
Run the ecg_stream test suite, optionally with coverage.
"""
import sys
import subprocess
import argparse

def build_pytest_command(args):
    cmd = [sys.executable, "-m", "pytest", "-m", "unit"]
    if args.verbose:
        cmd.append("-v")
    if args.coverage or args.html:
        cmd.extend(["--cov=ecg_stream", "--cov-report=term-missing"])
    if args.html:
        cmd.append("--cov-report=html")
    cmd.append("tests/")
    return cmd

def main():
    parser = argparse.ArgumentParser(description="Run ECG stream tests")
    parser.add_argument("--coverage", action="store_true", help="Report line coverage for ecg_stream")
    parser.add_argument("--html", action="store_true", help="Also write an HTML coverage report to htmlcov/")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    cmd = build_pytest_command(parser.parse_args())
    print(f"Command: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode

if __name__ == "__main__":
    sys.exit(main())
