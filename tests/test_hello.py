from asdlab.hello import greeting, main, say_hello


def test_greeting():
    assert greeting("mondo") == "Hello, mondo!"


def test_say_hello_prints(capsys):
    say_hello("Ada")
    assert capsys.readouterr().out == "Hello, Ada!\n"


def test_main_greets(capsys):
    assert main(["Bob"]) == 0
    assert capsys.readouterr().out == "Hello, Bob!\n"


def test_main_without_name(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage" in captured.err


def test_main_too_many_names(capsys):
    assert main(["a", "b"]) == 1
    assert "Usage" in capsys.readouterr().err