__version__ = '1.0.0'

from netpbm.errors import (
    FormatNotImplemented,
    IncompleteHeader,
    InvalidInput,
    MalformedNumber,
    NetpbmError,
    TruncatedData,
    UnsupportedFormat,
)
from netpbm.formats import FormatTag
from netpbm.image import NetpbmImage
from netpbm.parser import ParseState, parse

__all__ = [
    'FormatNotImplemented',
    'FormatTag',
    'IncompleteHeader',
    'InvalidInput',
    'MalformedNumber',
    'NetpbmError',
    'NetpbmImage',
    'ParseState',
    'TruncatedData',
    'UnsupportedFormat',
    'parse'
]
