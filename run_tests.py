#!/usr/bin/env python3
"""
Quick Test Runner for vvcorpus
Runs the test suite with coverage
"""

import subprocess
import sys
from pathlib import Path

def run_tests():
    """Run tests with sensible defaults"""

    print("🧪 vvcorpus Test Runner")
    print("=" * 50)

    # Check if we're in the right directory
    if not Path("src").exists():
        print("❌ Not in project root directory")
        return False

    print("📋 Running Tests...")
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "-v",
        "--tb=short",
        "--cov=src/vvcorpus",
        "--cov-report=term-missing",
        "--cov-fail-under=80"
    ]

    try:
        result = subprocess.run(cmd, cwd=".", capture_output=False)
        return result.returncode == 0
    except KeyboardInterrupt:
        print("\n⚠️ Tests interrupted")
        return False

if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
