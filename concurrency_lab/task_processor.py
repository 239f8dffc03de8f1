"""A prioritised task processor: worker threads drain a shared priority queue.

Lower priority numbers are served first; ties go to the lower task id.
"""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
import threading
import time
from dataclasses import dataclass
from typing import Sequence, TextIO


def _emit(out: TextIO, text: str) -> None:
    out.write(text + "\n")


@dataclass(frozen=True)
class Task:
    """A unit of work. Priority 1 is the most important."""

    task_id: int
    priority: int
    payload: str

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.priority, self.task_id)


class TaskProcessor:
    """Coordinates worker threads that take tasks from a shared priority queue."""

    def __init__(self, work_delay: float = 0.5, out: TextIO | None = None) -> None:
        self._work_delay = work_delay
        self._out = out or sys.stdout
        self._heap: list[tuple[int, int, int, Task]] = []
        self._sequence = itertools.count()
        self._cond = threading.Condition()
        self._threads: list[threading.Thread] = []
        self._closed = False
        self._in_flight = 0
        self._processed: list[tuple[int, Task]] = []

    def add_task(self, task: Task) -> None:
        """Queue ``task`` and wake the workers."""
        with self._cond:
            heapq.heappush(
                self._heap, (task.priority, task.task_id, next(self._sequence), task)
            )
            self._in_flight += 1
            self._cond.notify_all()

    def run_workers(self, num_workers: int) -> None:
        """Start ``num_workers`` worker threads, numbered from 1."""
        for worker_id in range(1, num_workers + 1):
            thread = threading.Thread(target=self._worker, args=(worker_id,))
            self._threads.append(thread)
            thread.start()

    def _worker(self, worker_id: int) -> None:
        while True:
            with self._cond:
                while not self._heap:
                    if self._closed:
                        _emit(
                            self._out,
                            f"Worker {worker_id}: Shutdown signal received. Exiting.",
                        )
                        return
                    self._cond.wait()
                if self._closed:
                    _emit(
                        self._out,
                        f"Worker {worker_id}: Shutdown signal received after "
                        "finding tasks. Exiting.",
                    )
                    return
                task = heapq.heappop(self._heap)[-1]
                self._processed.append((worker_id, task))

            _emit(
                self._out,
                f"Worker {worker_id} processing Task ID {task.task_id} "
                f"(Priority: {task.priority}, Payload: {task.payload})",
            )
            time.sleep(self._work_delay)

            with self._cond:
                self._in_flight -= 1
                if self._in_flight == 0:
                    self._cond.notify_all()

    def wait_until_idle(self) -> None:
        """Block until every submitted task has been processed."""
        with self._cond:
            while self._in_flight > 0:
                _emit(self._out, "Main: Waiting for tasks to complete...")
                self._cond.wait()

    def shutdown(self) -> None:
        """Signal the workers to stop and wait for all of them to exit."""
        with self._cond:
            if self._closed:
                raise RuntimeError("task processor is already shut down")
            self._closed = True
            self._cond.notify_all()
        for thread in self._threads:
            thread.join()
        _emit(self._out, "Task processor shutdown completed")

    def pending(self) -> int:
        """Number of tasks queued or being processed."""
        with self._cond:
            return self._in_flight

    @property
    def processed(self) -> list[tuple[int, Task]]:
        """The (worker id, task) pairs in the order tasks were taken."""
        with self._cond:
            return list(self._processed)


def default_tasks() -> list[Task]:
    """The sample workload with mixed priorities."""
    return [
        Task(1, 5, "Process order 100"),
        Task(2, 1, "Generate critical report"),
        Task(3, 10, "Routine backup"),
        Task(4, 2, "Update dashboard"),
        Task(5, 1, "Resolve incident"),
        Task(6, 3, "Send email notification"),
        Task(7, 5, "Update user profile"),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Process prioritised tasks with workers.")
    parser.add_argument("--workers", type=int, default=3)
    parser.add_argument("--work-delay", type=float, default=0.5)
    parser.add_argument("--arrival-delay", type=float, default=0.2)
    args = parser.parse_args(argv)

    out = sys.stdout
    processor = TaskProcessor(work_delay=args.work_delay, out=out)
    processor.run_workers(args.workers)

    def produce() -> None:
        for step, task in enumerate(default_tasks(), start=1):
            time.sleep(args.arrival_delay * step)
            processor.add_task(task)
            _emit(out, f"Added Task ID {task.task_id} (Priority: {task.priority})")
        _emit(out, "All tasks have been submitted to the processor.")

    producer = threading.Thread(target=produce)
    producer.start()
    producer.join()

    processor.wait_until_idle()
    _emit(out, "All submitted tasks have been processed by workers.")
    processor.shutdown()
    _emit(out, "Program execution completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())