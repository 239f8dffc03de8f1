"""A three-stage pipeline: generate, double, add five."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Sequence, TextIO


def _emit(out: TextIO, text: str) -> None:
    out.write(text + "\n")


def generate_numbers(limit: int = 10, out: TextIO | None = None) -> Iterator[int]:
    """Yield the numbers 1..limit."""
    out = out or sys.stdout
    for number in range(1, limit + 1):
        _emit(out, f"Generator sent: {number}")
        yield number


def duplicate_numbers(
    numbers: Iterable[int], out: TextIO | None = None
) -> Iterator[int]:
    """Yield each incoming number doubled."""
    out = out or sys.stdout
    for number in numbers:
        doubled = number * 2
        _emit(out, f"Duplicator received: {number}, sending: {doubled}")
        yield doubled


def add_five(numbers: Iterable[int], out: TextIO | None = None) -> Iterator[int]:
    """Yield each incoming number plus five."""
    out = out or sys.stdout
    for number in numbers:
        final = number + 5
        _emit(out, f"Adder received: {number}, sending: {final}")
        yield final


def run_pipeline(limit: int = 10, out: TextIO | None = None) -> list[int]:
    """Run all stages and return the final results in order."""
    out = out or sys.stdout
    stages = add_five(duplicate_numbers(generate_numbers(limit, out), out), out)
    results = []
    for result in stages:
        _emit(out, f"Final Result: {result}")
        results.append(result)
    _emit(out, "All pipeline stages are completed")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run a generate/double/add-five pipeline.")
    parser.add_argument("--limit", type=int, default=10)
    args = parser.parse_args(argv)
    run_pipeline(args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())