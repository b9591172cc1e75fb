import io

import pytest

from pipex.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_character():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


def test_put_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("command not found: ls", buf)
    assert buf.getvalue() == "command not found: ls\n"


def test_put_endl_none_writes_newline_only():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("number", [0, 7, -7, 123456, 2147483647, -2147483648])
def test_put_number_round_trip(number):
    buf = io.StringIO()
    put_number(number, buf)
    assert int(buf.getvalue()) == number


def test_put_number_int_min_text():
    buf = io.StringIO()
    put_number(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_number_out_of_range():
    with pytest.raises(OverflowError):
        put_number(2**31, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_char("d")
    assert capsys.readouterr().out == "abcd"