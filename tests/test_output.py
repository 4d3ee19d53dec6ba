import io

import pytest

from pushswap.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def stream():
    return io.StringIO()


def test_putchar_writes_string_char(stream):
    putchar_fd("z", stream)
    assert stream.getvalue() == "z"


def test_putchar_accepts_code(stream):
    putchar_fd(ord("q"), stream)
    assert stream.getvalue() == "q"


def test_putchar_rejects_long_string(stream):
    with pytest.raises(ValueError):
        putchar_fd("ab", stream)


@pytest.mark.parametrize("text", ["", "hello", "pa\nrb"])
def test_putstr_writes_text(stream, text):
    putstr_fd(text, stream)
    assert stream.getvalue() == text


def test_putstr_rejects_none(stream):
    with pytest.raises(TypeError):
        putstr_fd(None, stream)


@pytest.mark.parametrize("text", ["", "Error", "sa"])
def test_putendl_appends_newline(stream, text):
    putendl_fd(text, stream)
    assert stream.getvalue() == text + "\n"


def test_putendl_rejects_none(stream):
    with pytest.raises(TypeError):
        putendl_fd(None, stream)


def test_putnbr_int_min(stream):
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -1000])
def test_putnbr_round_trip(stream, n):
    putnbr_fd(n, stream)
    assert int(stream.getvalue()) == n


def test_writes_accumulate(stream):
    putstr_fd("ra", stream)
    putchar_fd("\n", stream)
    putendl_fd("rb", stream)
    assert stream.getvalue().splitlines() == ["ra", "rb"]