"""A fixed pool of worker threads squaring numbers from a task queue."""

from __future__ import annotations

import argparse
import math
import queue
import random
import sys
import threading
import time
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO


def _emit(out: TextIO, text: str) -> None:
    out.write(text + "\n")


@dataclass(frozen=True)
class Task:
    """A number to square, tagged with an identifier."""

    task_id: int
    number: int


def worker(
    worker_id: int,
    tasks: "queue.Queue[Task | None]",
    results: "queue.Queue[int | None]",
    delay: float = 0.1,
    out: TextIO | None = None,
) -> None:
    """Square each task's number until ``None`` arrives on ``tasks``."""
    out = out or sys.stdout
    while (task := tasks.get()) is not None:
        _emit(
            out,
            f"Worker {worker_id} processing Task ID {task.task_id} "
            f"(Number: {task.number})",
        )
        result = task.number * task.number
        time.sleep(delay)
        results.put(result)


def run_pool(
    numbers: Iterable[int],
    num_workers: int = 5,
    delay: float = 0.1,
    out: TextIO | None = None,
) -> list[int]:
    """Square every number using a pool of workers; return results as they arrive."""
    if num_workers < 1:
        raise ValueError("at least one worker is required")
    out = out or sys.stdout
    tasks: "queue.Queue[Task | None]" = queue.Queue(maxsize=1)
    results: "queue.Queue[int | None]" = queue.Queue(maxsize=1)

    workers = [
        threading.Thread(target=worker, args=(i, tasks, results, delay, out))
        for i in range(1, num_workers + 1)
    ]
    for thread in workers:
        thread.start()

    def feed() -> None:
        for task_id, number in enumerate(numbers, start=1):
            tasks.put(Task(task_id, number))
        for _ in workers:
            tasks.put(None)

    def close_results() -> None:
        for thread in workers:
            thread.join()
        results.put(None)
        _emit(out, "Results channel closed.")

    threading.Thread(target=feed, daemon=True).start()
    closer = threading.Thread(target=close_results)
    closer.start()

    _emit(out, "Collecting results...")
    collected = []
    while (result := results.get()) is not None:
        _emit(out, f"Result: {result} after processing the Number: {math.isqrt(result)}")
        collected.append(result)
    closer.join()

    _emit(out, "All tasks are done.")
    return collected


def random_numbers(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers between 1 and 100 inclusive."""
    rng = rng or random.Random()
    return [rng.randint(1, 100) for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Square random numbers with a worker pool.")
    parser.add_argument("--tasks", type=int, default=20)
    parser.add_argument("--workers", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    run_pool(random_numbers(args.tasks, random.Random(args.seed)), args.workers)
    return 0


if __name__ == "__main__":
    sys.exit(main())