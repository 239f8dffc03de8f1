import threading

from concurrency_lab.counter import SafeCounter, increment_counter, main, run


def test_new_counter_starts_at_zero():
    assert SafeCounter().value == 0


def test_increment_counter_adds_times():
    counter = SafeCounter()
    increment_counter(counter, 37)
    increment_counter(counter, 5)
    assert counter.value == 37 + 5


def test_concurrent_increments_are_not_lost():
    counter = SafeCounter()
    threads = [
        threading.Thread(target=increment_counter, args=(counter, 500))
        for _ in range(20)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter.value == 20 * 500


def test_run_matches_workers_times_increments():
    workers, increments = 100, 1000
    assert run(workers, increments) == workers * increments


def test_run_with_no_workers():
    assert run(0, 1000) == 0


def test_main_reports_expected_and_received(capsys):
    assert main(["--workers", "4", "--increments", "25"]) == 0
    assert capsys.readouterr().out.strip() == (
        "Final Counter Value (expected 100) received: 100"
    )