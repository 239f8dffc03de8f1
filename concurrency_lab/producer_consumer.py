"""Several producers feeding several consumers through one shared queue.

The queue is closed by putting one ``None`` per consumer on it; a consumer
stops when it receives ``None``.
"""

from __future__ import annotations

import argparse
import queue
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence, TextIO


def _emit(out: TextIO, text: str) -> None:
    out.write(text + "\n")


def producer(
    producer_id: int,
    channel: "queue.Queue[int | None]",
    count: int = 5,
    delay: float = 0.05,
    out: TextIO | None = None,
) -> None:
    """Send the numbers 1..count to ``channel``."""
    out = out or sys.stdout
    for number in range(1, count + 1):
        _emit(out, f"Producer {producer_id} sending: {number}")
        time.sleep(delay)
        channel.put(number)


def consumer(
    consumer_id: int,
    channel: "queue.Queue[int | None]",
    delay: float = 0.15,
    out: TextIO | None = None,
) -> list[int]:
    """Read numbers until the channel is closed; return what was received."""
    out = out or sys.stdout
    received: list[int] = []
    while (number := channel.get()) is not None:
        _emit(out, f"Consumer {consumer_id} received: {number}")
        received.append(number)
        time.sleep(delay)
    _emit(out, f"Consumer {consumer_id} finished.")
    return received


def run(
    num_producers: int = 2,
    num_consumers: int = 2,
    count: int = 5,
    produce_delay: float = 0.05,
    consume_delay: float = 0.15,
    out: TextIO | None = None,
) -> dict[int, list[int]]:
    """Run producers and consumers; return what each consumer received."""
    if num_consumers < 1:
        raise ValueError("at least one consumer is required")
    if num_producers < 0:
        raise ValueError("the number of producers cannot be negative")
    out = out or sys.stdout
    channel: "queue.Queue[int | None]" = queue.Queue(maxsize=1)

    with ThreadPoolExecutor(max_workers=num_producers + num_consumers) as pool:
        producers = [
            pool.submit(producer, i, channel, count, produce_delay, out)
            for i in range(1, num_producers + 1)
        ]
        consumers = {
            i: pool.submit(consumer, i, channel, consume_delay, out)
            for i in range(1, num_consumers + 1)
        }
        try:
            for future in producers:
                future.result()
        finally:
            for _ in consumers:
                channel.put(None)
            _emit(out, "Channel closed by main orchestrator")
        received = {i: future.result() for i, future in consumers.items()}

    _emit(out, "All jobs are done!")
    return received


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Producers and consumers sharing a queue.")
    parser.add_argument("--producers", type=int, default=2)
    parser.add_argument("--consumers", type=int, default=2)
    parser.add_argument("--count", type=int, default=5)
    args = parser.parse_args(argv)
    run(args.producers, args.consumers, args.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())