"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

BANNER = "LeetCode Project"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the project banner and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="leetkit", description="Algorithm and data-structure toolkit."
    )
    parser.parse_args(argv)
    print(BANNER)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())