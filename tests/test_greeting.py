import io

from concurrency_lab.greeting import greet, greet_all, main


def test_greet_writes_greeting():
    out = io.StringIO()
    greet("Alice", delay=0, out=out)
    assert out.getvalue() == "Hello, my name is Alice!\n"


def test_greet_all_greets_each_name_once():
    out = io.StringIO()
    names = ["Alice", "Peter", "James", "Jordan", "Rob"]
    greet_all(names, delay=0, out=out)
    lines = out.getvalue().splitlines()
    for name in names:
        assert lines.count(f"Hello, my name is {name}!") == 1
    assert len(lines) == len(names) + 2


def test_greet_all_finishes_last():
    out = io.StringIO()
    greet_all(["Alice", "Rob"], delay=0.01, out=out)
    lines = out.getvalue().splitlines()
    assert lines[-1] == "All greetings finished. Main thread exiting."
    assert "Main thread continues..." in lines[:-1]


def test_greet_all_with_no_names():
    out = io.StringIO()
    greet_all([], delay=0, out=out)
    assert out.getvalue().splitlines() == [
        "Main thread continues...",
        "All greetings finished. Main thread exiting.",
    ]


def test_main_uses_given_names(capsys):
    assert main(["Zoe", "--delay", "0"]) == 0
    captured = capsys.readouterr().out
    assert "Hello, my name is Zoe!" in captured
    assert "Hello, my name is Alice!" not in captured