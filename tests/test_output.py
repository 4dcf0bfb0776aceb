import io

import pytest

from ftping.libft.output import put_char, put_endl, put_nbr, put_str


@pytest.fixture
def buf():
    return io.StringIO()


def test_put_char_string(buf):
    put_char("a", buf)
    assert buf.getvalue() == "a"


def test_put_char_code(buf):
    put_char(ord("z"), buf)
    assert buf.getvalue() == "z"


def test_put_char_rejects_long_string(buf):
    with pytest.raises(ValueError):
        put_char("ab", buf)


def test_put_str_writes_text(buf):
    put_str("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing(buf):
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline(buf):
    put_endl("abc", buf)
    assert buf.getvalue() == "abc" + "\n"


def test_put_endl_none_writes_nothing(buf):
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 10, -1, 123456, -98765, 2147483647])
def test_put_nbr_round_trip(buf, n):
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min(buf):
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_int(buf):
    with pytest.raises(TypeError):
        put_nbr("12", buf)


def test_default_stream_is_stdout(capsys):
    put_str("to stdout")
    assert capsys.readouterr().out == "to stdout"