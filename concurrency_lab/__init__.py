"""Runnable exercises in thread-based concurrency: greetings, producers and
consumers, pipelines, a locked counter, a worker pool, cancellation and a
prioritised task processor."""

__version__ = "0.1.0"