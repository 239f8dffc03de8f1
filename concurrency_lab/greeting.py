"""Concurrent greetings: one thread per name, joined before exit."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Iterable, Sequence, TextIO

DEFAULT_NAMES = ("Alice", "Peter", "James", "Jordan", "Rob")


def _emit(out: TextIO, text: str) -> None:
    out.write(text + "\n")


def greet(name: str, delay: float = 0.1, out: TextIO | None = None) -> None:
    """Print a greeting for ``name`` and then simulate some work."""
    _emit(out or sys.stdout, f"Hello, my name is {name}!")
    time.sleep(delay)


def greet_all(
    names: Iterable[str], delay: float = 0.1, out: TextIO | None = None
) -> None:
    """Greet every name on its own thread and wait for all of them."""
    out = out or sys.stdout
    threads = [
        threading.Thread(target=greet, args=(name, delay, out)) for name in names
    ]
    for thread in threads:
        thread.start()

    _emit(out, "Main thread continues...")

    for thread in threads:
        thread.join()

    _emit(out, "All greetings finished. Main thread exiting.")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Greet several names concurrently.")
    parser.add_argument("names", nargs="*", default=list(DEFAULT_NAMES))
    parser.add_argument("--delay", type=float, default=0.1)
    args = parser.parse_args(argv)
    greet_all(args.names, args.delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())