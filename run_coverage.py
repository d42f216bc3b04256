#!/usr/bin/env python3
"""
Coverage test runner for minesweeper project
Runs the test suite with coverage of the game, scores and ui packages
"""

import argparse
import subprocess
import sys
import webbrowser
from pathlib import Path

PACKAGES = ["game", "scores", "ui"]


def run_coverage(open_report: bool = False) -> bool:
    """Run tests with coverage and generate HTML report"""
    print("🧪 Running tests with coverage...")
    print("=" * 50)

    cmd = [sys.executable, "-m", "pytest", "tests/", "-v",
           "--cov-report=term-missing", "--cov-report=html:htmlcov"]
    cmd += [f"--cov={package}" for package in PACKAGES]

    try:
        result = subprocess.run(cmd, check=False)
    except FileNotFoundError:
        print("❌ Error: Python or pytest not found")
        return False

    if result.returncode == 0:
        print("\n✅ All tests passed!")
    else:
        print(f"\n❌ Some tests failed (exit code: {result.returncode})")

    html_report = Path("htmlcov/index.html")
    if html_report.exists():
        print(f"\n📊 Coverage report generated: {html_report.absolute()}")
        if open_report:
            webbrowser.open(f"file://{html_report.absolute()}")
            print("🌐 Coverage report opened in browser")

    return result.returncode == 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the test suite with coverage")
    parser.add_argument("--open", action="store_true", help="Open the HTML report when done")
    args = parser.parse_args()
    sys.exit(0 if run_coverage(args.open) else 1)
