from enum import Enum
from typing import Mapping, TypeVar

from . import constants
from .errors import FormatNotImplemented, UnsupportedFormat

BITMAP = 'bitmap'
GRAYMAP = 'graymap'
PIXMAP = 'pixmap'
ARBITRARY = 'arbitrary'

_Decoder = TypeVar('_Decoder')


class FormatTag(Enum):
    PBM_ASCII = (constants.PBM_ASCII, BITMAP, False)
    PGM_ASCII = (constants.PGM_ASCII, GRAYMAP, False)
    PPM_ASCII = (constants.PPM_ASCII, PIXMAP, False)
    PBM_BINARY = (constants.PBM_BINARY, BITMAP, True)
    PGM_BINARY = (constants.PGM_BINARY, GRAYMAP, True)
    PPM_BINARY = (constants.PPM_BINARY, PIXMAP, True)
    PAM_BINARY = (constants.PAM_BINARY, ARBITRARY, True)

    def __init__(self, magic_number: bytes, family: str, binary: bool):
        self.magic_number = magic_number
        self.family = family
        self.binary = binary

    def __str__(self) -> str:
        return self.magic_number.decode('ascii')


_BY_MAGIC_NUMBER = {tag.magic_number: tag for tag in FormatTag}


def dispatch(token: bytes) -> FormatTag:
    try:
        return _BY_MAGIC_NUMBER[bytes(token)]
    except KeyError:
        raise UnsupportedFormat(f"Unsupported netpbm format: {bytes(token)!r}") from None


def decoder_for(tag: FormatTag, decoders: Mapping[FormatTag, _Decoder]) -> _Decoder:
    try:
        return decoders[tag]
    except KeyError:
        raise FormatNotImplemented(f"Decoding {tag} ({tag.family}) images is not implemented") from None
