import sys

import pytest

from netpbm.errors import MalformedNumber
from netpbm.numeric import is_decimal, parse_sample, parse_size


def test_parse_size():
    assert parse_size(b"0") == 0
    assert parse_size(b"640") == 640
    assert parse_size(b"007") == 7
    assert parse_size(str(sys.maxsize).encode()) == sys.maxsize


def test_parse_sample_bounds():
    assert parse_sample(b"65535") == 65535

    with pytest.raises(MalformedNumber):
        parse_sample(b"65536")


def test_parse_size_rejects_overflow():
    with pytest.raises(MalformedNumber):
        parse_size(str(sys.maxsize + 1).encode())


@pytest.mark.parametrize("token", [b"", b"-1", b"+1", b"12a", b" 1", b"1.5", b"#"])
def test_rejects_non_digits(token):
    with pytest.raises(MalformedNumber):
        parse_sample(token)

    with pytest.raises(MalformedNumber):
        parse_size(token)


def test_is_decimal():
    assert is_decimal(b"0123456789")
    assert not is_decimal(b"")
    assert not is_decimal(b"end")
    assert not is_decimal(b"1e3")
