import pytest

from netpbm.parser import parse
from netpbm.writer import encode_graymap


def test_ascii_layout_one_line_per_row():
    encoded = encode_graymap([0, 1, 2, 3], 2, 2, 3, binary=False)

    assert encoded == b"P2\n2 2\n3\n0 1\n2 3\n", f"Unexpected encoding: {encoded!r}"


def test_binary_single_byte_samples():
    assert encode_graymap([7, 200], 2, 1, 255) == b"P5\n2 1\n255\n\x07\xc8"


def test_binary_two_byte_samples():
    assert encode_graymap([258, 255], 2, 1, 65535) == b"P5\n2 1\n65535\n\x01\x02\x00\xff"


def test_comment_keeps_first_line_only():
    encoded = encode_graymap([5], 1, 1, 255, comment="made for tests\nsecond line")

    assert encoded == b"P5\n# made for tests\n1 1\n255\n\x05"
    assert list(parse(encoded).data) == [5]


def test_ascii_sixteen_bit_is_readable():
    samples = [0, 300, 65535, 12]

    assert list(parse(encode_graymap(samples, 2, 2, 65535, binary=False)).data) == samples


@pytest.mark.parametrize("samples, width, height, max_value", [
    ([1, 2, 3], 2, 2, 255),
    ([256], 1, 1, 255),
    ([-1], 1, 1, 255),
    ([0], 1, 1, 0),
    ([0], 1, 1, 65536),
])
def test_rejects_inconsistent_input(samples, width, height, max_value):
    with pytest.raises(ValueError):
        encode_graymap(samples, width, height, max_value)
