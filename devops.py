"""Development tasks for sandboxfs.

Usage: uv run devops.py <task>
Tasks: fmt, lint, test, clean
"""

import subprocess
import sys
from collections.abc import Callable


def _run(commands: list[list[str]]) -> None:
    """Execute commands in order, exiting on the first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format app/ and tests/ with Ruff and apply safe lint fixes."""
    _run(
        [
            ["ruff", "format", "app", "tests"],
            ["ruff", "check", "--fix", "app", "tests"],
        ]
    )


def lint() -> None:
    """Check formatting and lint rules without modifying files."""
    _run(
        [
            ["ruff", "format", "--check", "app", "tests"],
            ["ruff", "check", "app", "tests"],
        ]
    )


def test() -> None:
    """Run the unit tests."""
    _run([["uv", "run", "pytest", "-q", "tests"]])


def clean() -> None:
    """Remove caches and build artifacts."""
    _run(
        [
            ["find", ".", "-type", "d", "-name", "__pycache__", "-exec", "rm", "-rf", "{}", "+"],
            ["find", ".", "-type", "f", "-name", "*.pyc", "-delete"],
            ["rm", "-rf", ".pytest_cache", ".ruff_cache", "dist", "build"],
        ]
    )


TASKS: dict[str, Callable[[], None]] = {
    "fmt": format_code,
    "lint": lint,
    "test": test,
    "clean": clean,
}


def main(argv: list[str]) -> int:
    if len(argv) != 1 or argv[0] not in TASKS:
        print(__doc__.strip(), file=sys.stderr)
        return 2
    TASKS[argv[0]]()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
