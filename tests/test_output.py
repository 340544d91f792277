import io

import pytest

from minilib.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_char():
    stream = io.StringIO()
    putchar_fd("k", stream)
    assert stream.getvalue() == "k"


def test_putchar_accepts_int():
    stream = io.StringIO()
    putchar_fd(ord("8"), stream)
    assert stream.getvalue() == "8"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr_writes_string():
    stream = io.StringIO()
    putstr_fd("merhaba", stream)
    assert stream.getvalue() == "merhaba"


def test_putstr_none_writes_nothing():
    stream = io.StringIO()
    putstr_fd(None, stream)
    assert stream.getvalue() == ""


def test_putendl_appends_newline():
    stream = io.StringIO()
    putendl_fd("selam", stream)
    assert stream.getvalue() == "selam\n"


def test_putendl_none_writes_nothing():
    stream = io.StringIO()
    putendl_fd(None, stream)
    assert stream.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -68768, 2147483647, -2147483648])
def test_putnbr_round_trips(n):
    stream = io.StringIO()
    putnbr_fd(n, stream)
    assert int(stream.getvalue()) == n


def test_putnbr_negative_has_sign():
    stream = io.StringIO()
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_putnbr_rejects_non_int():
    with pytest.raises(TypeError):
        putnbr_fd("12", io.StringIO())


def test_writes_accumulate_in_order():
    stream = io.StringIO()
    putstr_fd("a", stream)
    putnbr_fd(-5, stream)
    putendl_fd("b", stream)
    putchar_fd("c", stream)
    assert stream.getvalue() == "a-5b\nc"