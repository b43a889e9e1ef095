import io

import pytest

from sigtalk.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("x", buf)
    put_char("y", buf)
    assert buf.getvalue() == "xy"


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    assert buf.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert not buf.getvalue()


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("hi", buf)
    assert buf.getvalue() == "hi" + "\n"


def test_put_endl_none_writes_no_newline():
    buf = io.StringIO()
    put_endl(None, buf)
    assert not buf.getvalue()


@pytest.mark.parametrize("n", [0, 7, -7, 42, 1000000, 2147483647, -2147483647])
def test_put_nbr_writes_decimal(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == str(n)


def test_put_nbr_minimum_int():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("server PID --------> ")
    put_nbr(1234)
    put_char("\n")
    assert capsys.readouterr().out == "server PID --------> 1234\n"