import io

import pytest

from concurrency_lab.task_processor import Task, TaskProcessor, default_tasks, main


def _processor():
    out = io.StringIO()
    return TaskProcessor(work_delay=0.0, out=out), out


def test_single_worker_takes_tasks_in_priority_order():
    processor, _ = _processor()
    tasks = default_tasks()
    for task in tasks:
        processor.add_task(task)
    processor.run_workers(1)
    processor.wait_until_idle()
    processor.shutdown()
    taken = [task for _, task in processor.processed]
    assert taken == sorted(tasks, key=lambda t: t.sort_key)


def test_equal_priority_is_first_in_first_out():
    processor, _ = _processor()
    processor.add_task(Task(9, 1, "later"))
    processor.add_task(Task(3, 1, "earlier"))
    processor.run_workers(1)
    processor.wait_until_idle()
    processor.shutdown()
    assert [task.payload for _, task in processor.processed] == ["earlier", "later"]


def test_pending_counts_queued_tasks_before_workers_start():
    processor, _ = _processor()
    for task in default_tasks()[:3]:
        processor.add_task(task)
    assert processor.pending() == 3
    processor.run_workers(2)
    processor.wait_until_idle()
    assert processor.pending() == 0
    processor.shutdown()


def test_many_workers_process_every_task_once():
    processor, _ = _processor()
    processor.run_workers(3)
    tasks = default_tasks()
    for task in tasks:
        processor.add_task(task)
    processor.wait_until_idle()
    processor.shutdown()
    taken = [task for _, task in processor.processed]
    assert sorted(taken, key=lambda t: t.task_id) == tasks
    assert {worker for worker, _ in processor.processed} <= {1, 2, 3}


def test_processing_lines_written():
    processor, out = _processor()
    processor.add_task(Task(2, 1, "Generate critical report"))
    processor.run_workers(1)
    processor.wait_until_idle()
    processor.shutdown()
    text = out.getvalue()
    assert (
        "Worker 1 processing Task ID 2 (Priority: 1, Payload: Generate critical report)"
        in text
    )
    assert text.rstrip().endswith("Task processor shutdown completed")


def test_idle_workers_exit_on_shutdown():
    processor, out = _processor()
    processor.run_workers(3)
    processor.shutdown()
    exits = [
        line for line in out.getvalue().splitlines()
        if "Shutdown signal received. Exiting." in line
    ]
    assert len(exits) == 3


def test_second_shutdown_raises():
    processor, _ = _processor()
    processor.run_workers(1)
    processor.shutdown()
    with pytest.raises(RuntimeError):
        processor.shutdown()


def test_wait_until_idle_returns_immediately_without_tasks():
    processor, out = _processor()
    processor.wait_until_idle()
    assert out.getvalue() == ""
    assert processor.pending() == 0


def test_default_tasks_sample():
    tasks = default_tasks()
    assert [task.task_id for task in tasks] == [1, 2, 3, 4, 5, 6, 7]
    assert tasks[1] == Task(2, 1, "Generate critical report")


def test_main_runs_whole_program(capsys):
    assert main(["--workers", "2", "--work-delay", "0", "--arrival-delay", "0"]) == 0
    text = capsys.readouterr().out
    assert "All tasks have been submitted to the processor." in text
    assert "All submitted tasks have been processed by workers." in text
    assert text.rstrip().endswith("Program execution completed.")
    assert text.count(" processing Task ID ") == len(default_tasks())