import pytest

from netpbm.decoders import DEFAULT_DECODERS, AsciiGraymapDecoder, BinaryGraymapDecoder
from netpbm.errors import FormatNotImplemented, UnsupportedFormat
from netpbm.formats import BITMAP, GRAYMAP, FormatTag, decoder_for, dispatch


def test_dispatch_recognizes_all_magic_numbers():
    magic_numbers = [b"P1", b"P2", b"P3", b"P4", b"P5", b"P6", b"P7"]

    tags = [dispatch(magic_number) for magic_number in magic_numbers]

    assert tags == list(FormatTag), f"Unexpected tags: {tags}"


def test_format_tag_metadata():
    assert FormatTag.PGM_BINARY.binary
    assert not FormatTag.PGM_ASCII.binary
    assert FormatTag.PGM_ASCII.family == GRAYMAP
    assert FormatTag.PBM_BINARY.family == BITMAP
    assert str(FormatTag.PAM_BINARY) == "P7"


@pytest.mark.parametrize("token", [b"P9", b"P", b"p2", b"P22", b"", b"GIF89a"])
def test_dispatch_rejects_unknown_tokens(token):
    with pytest.raises(UnsupportedFormat):
        dispatch(token)


def test_default_decoders_cover_graymaps():
    assert isinstance(decoder_for(FormatTag.PGM_ASCII, DEFAULT_DECODERS), AsciiGraymapDecoder)
    assert isinstance(decoder_for(FormatTag.PGM_BINARY, DEFAULT_DECODERS), BinaryGraymapDecoder)


@pytest.mark.parametrize("tag", [
    FormatTag.PBM_ASCII,
    FormatTag.PPM_ASCII,
    FormatTag.PBM_BINARY,
    FormatTag.PPM_BINARY,
    FormatTag.PAM_BINARY,
])
def test_recognized_formats_without_decoder(tag):
    with pytest.raises(FormatNotImplemented) as exc_info:
        decoder_for(tag, DEFAULT_DECODERS)

    assert isinstance(exc_info.value, NotImplementedError)
    assert str(tag) in str(exc_info.value)
