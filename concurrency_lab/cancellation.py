"""Workers that poll a task queue and stop when a cancellation event is set."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence, TextIO


def _emit(out: TextIO, text: str) -> None:
    out.write(text + "\n")


def cancellable_worker(
    worker_id: int,
    tasks: "queue.Queue[int]",
    cancelled: threading.Event,
    work_delay: float = 0.3,
    poll_delay: float = 0.05,
    out: TextIO | None = None,
) -> list[int]:
    """Process tasks until ``cancelled`` is set; return the tasks processed."""
    out = out or sys.stdout
    processed: list[int] = []
    while True:
        if cancelled.is_set():
            _emit(out, f"Worker {worker_id}: Cancelled. Shutting down.")
            return processed
        try:
            task = tasks.get_nowait()
        except queue.Empty:
            cancelled.wait(poll_delay)
            continue
        _emit(out, f"Worker {worker_id}: Processing task {task}")
        processed.append(task)
        time.sleep(work_delay)


def run(
    num_workers: int = 3,
    num_tasks: int = 11,
    send_delay: float = 0.15,
    cancel_after: float = 1.1,
    work_delay: float = 0.3,
    poll_delay: float = 0.05,
    out: TextIO | None = None,
) -> dict[int, list[int]]:
    """Send tasks to workers and cancel them after ``cancel_after`` seconds.

    Returns the tasks each worker processed before stopping.
    """
    out = out or sys.stdout
    tasks: "queue.Queue[int]" = queue.Queue()
    cancelled = threading.Event()

    def send() -> None:
        for task in range(num_tasks):
            if cancelled.is_set():
                return
            tasks.put(task)
            if cancelled.wait(send_delay):
                return

    def cancel() -> None:
        cancelled.set()
        _emit(out, "Main: Cancellation requested. Signaling workers to stop.")

    timer = threading.Timer(cancel_after, cancel)
    timer.daemon = True

    with ThreadPoolExecutor(max_workers=num_workers + 1) as pool:
        futures = {
            i: pool.submit(
                cancellable_worker, i, tasks, cancelled, work_delay, poll_delay, out
            )
            for i in range(1, num_workers + 1)
        }
        sender = pool.submit(send)
        timer.start()
        try:
            processed = {i: future.result() for i, future in futures.items()}
            sender.result()
        finally:
            cancelled.set()
            timer.cancel()

    _emit(out, "All workers stopped after cancellation.")
    return processed


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cancel running workers after a delay.")
    parser.add_argument("--workers", type=int, default=3)
    parser.add_argument("--tasks", type=int, default=11)
    parser.add_argument("--cancel-after", type=float, default=1.1)
    args = parser.parse_args(argv)
    run(args.workers, args.tasks, cancel_after=args.cancel_after)
    return 0


if __name__ == "__main__":
    sys.exit(main())