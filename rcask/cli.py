"""Command that demonstrates writing, compacting and reading a store."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rcask.store import RCask


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rcask", description="Write a few keys to a log-structured store."
    )
    parser.add_argument(
        "--directory", default=".", help="directory holding the log files"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    args = _parse_args(argv)
    with RCask(args.directory, "log", 3) as store, RCask(args.directory, "default_log"):
        for number in range(1, 4):
            store.set(f"key{number}", f"value{number}")
        for number in range(1, 4):
            key = f"key{number}"
            print(f"Value for {key}: {store.get(key)!r}")
        store.set("key1", "response: { values: ['A', 'B', 'C'] } ")
        print(f"Updated value for key1: {store.get('key1')!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())