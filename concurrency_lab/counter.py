"""A shared counter incremented by many threads under a lock."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Sequence


class SafeCounter:
    """An integer counter whose increments are serialised by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


def increment_counter(counter: SafeCounter, times: int = 1000) -> None:
    """Increment ``counter`` ``times`` times."""
    for _ in range(times):
        counter.increment()


def run(num_workers: int = 100, increments: int = 1000) -> int:
    """Let ``num_workers`` threads increment one counter; return its final value."""
    counter = SafeCounter()
    threads = [
        threading.Thread(target=increment_counter, args=(counter, increments))
        for _ in range(num_workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter.value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Increment a shared counter from many threads.")
    parser.add_argument("--workers", type=int, default=100)
    parser.add_argument("--increments", type=int, default=1000)
    args = parser.parse_args(argv)
    final = run(args.workers, args.increments)
    print(
        f"Final Counter Value (expected {args.workers * args.increments}) "
        f"received: {final}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())