# concurrency_lab

A set of small, self-contained programs. Each one shows a single
concurrency pattern built from Python threads and queues. You can run
every exercise from the command line. You can also import it and drive
it with your own parameters and output stream. The package needs only
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The exercises

| Command | Module | Pattern |
| --- | --- | --- |
| `concurrency-lab-greeting` | `concurrency_lab.greeting` | One thread per name, all joined before exit |
| `concurrency-lab-producer-consumer` | `concurrency_lab.producer_consumer` | Producers and consumers share one queue. The queue is closed with one `None` per consumer after every producer finishes |
| `concurrency-lab-pipeline` | `concurrency_lab.pipeline` | Three chained generator stages: numbers 1..limit, doubled, plus five |
| `concurrency-lab-counter` | `concurrency_lab.counter` | Many threads increment one lock-protected `SafeCounter` |
| `concurrency-lab-worker-pool` | `concurrency_lab.worker_pool` | A fixed pool of workers squares random numbers taken from a task queue |
| `concurrency-lab-cancellation` | `concurrency_lab.cancellation` | Polling workers that stop once a cancellation event has been set |
| `concurrency-lab-task-processor` | `concurrency_lab.task_processor` | Workers drain a priority heap. The lowest priority number goes first and ties go to the lowest task id |

### Command options

- `concurrency-lab-greeting [NAME ...] [--delay SECONDS]`. The default
  names are Alice, Peter, James, Jordan and Rob.
- `concurrency-lab-producer-consumer [--producers N] [--consumers N] [--count N]`.
  The defaults are 2, 2 and 5. Each producer sends the numbers 1..count.
- `concurrency-lab-pipeline [--limit N]`. The default is 10.
- `concurrency-lab-counter [--workers N] [--increments N]`. The defaults
  are 100 and 1000. The command prints the expected and actual final
  values.
- `concurrency-lab-worker-pool [--tasks N] [--workers N] [--seed N]`.
  The defaults are 20 tasks and 5 workers. Numbers are drawn from 1 to 100.
- `concurrency-lab-cancellation [--workers N] [--tasks N] [--cancel-after SECONDS]`.
  The defaults are 3 workers, 11 tasks and 1.1 seconds.
- `concurrency-lab-task-processor [--workers N] [--work-delay SECONDS] [--arrival-delay SECONDS]`.
  The defaults are 3 workers, 0.5 seconds and 0.2 seconds. The command
  submits the tasks from `default_tasks()`, and each task arrives later
  than the one before it.

Each command prints a trace of what its threads do. Because threads
interleave, lines from different workers can appear in a different order
from one run to the next.

## Using the modules from code

Every exercise takes an `out` text stream. This lets you capture the
trace. The default stream is standard output.

```python
import io

from concurrency_lab.pipeline import run_pipeline
from concurrency_lab.counter import run

buf = io.StringIO()
results = run_pipeline(10, buf)      # [7, 9, 11, ..., 25]
print(run(100, 1000))                # 100000
```

Other entry points and what they return:

- `greeting.greet_all(names, delay, out)` greets every name on its own
  thread and returns once all the threads have finished.
- `producer_consumer.run(...)` returns a dict that maps each consumer id
  to the numbers it received. It raises `ValueError` when there are no
  consumers or when the number of producers is negative.
- `worker_pool.run_pool(numbers, num_workers, delay, out)` returns the
  squares in the order they arrived. It raises `ValueError` when there
  are no workers. `worker_pool.random_numbers(count, rng)` draws the
  inputs.
- `cancellation.run(...)` returns a dict that maps each worker id to the
  tasks it processed before the cancellation.

The prioritised task processor can be driven directly:

```python
from concurrency_lab.task_processor import TaskProcessor, default_tasks

processor = TaskProcessor(work_delay=0.1)
processor.run_workers(3)
for task in default_tasks():
    processor.add_task(task)
processor.wait_until_idle()
processor.shutdown()
print(processor.processed)           # [(worker_id, Task), ...] in the order taken
```

- `TaskProcessor.pending()` reports how many submitted tasks are still
  queued or in progress.
- `TaskProcessor.wait_until_idle()` blocks until that number drops to zero.
- `TaskProcessor.shutdown()` stops the workers and joins them. Calling it
  a second time raises `RuntimeError`.

## Limits

These are teaching exercises, not a task-queue library. Nothing is
persisted. Work cannot be distributed beyond the threads of one process.
Tasks do no real work: processing is simulated with a sleep.