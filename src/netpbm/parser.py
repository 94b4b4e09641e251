from enum import Enum, auto
from typing import Mapping

from .constants import COMMENT_MARKER
from .cursor import BufferCursor
from .decoders import DEFAULT_DECODERS, BinaryDecoder, PixelDecoder, TextDecoder
from .errors import IncompleteHeader, MalformedNumber
from .formats import FormatTag, decoder_for, dispatch
from .image import Header, NetpbmImage
from .numeric import parse_sample, parse_size
from .observer import Observer, silent


class ParseState(Enum):
    TYPE = auto()
    WIDTH = auto()
    HEIGHT = auto()
    MAX_VALUE = auto()
    DATA = auto()


_FIELD_NAMES = {
    ParseState.TYPE: "magic number",
    ParseState.WIDTH: "width",
    ParseState.HEIGHT: "height",
    ParseState.MAX_VALUE: "max value",
}


def parse(
        buffer,
        *,
        observer: Observer | None = None,
        decoders: Mapping[FormatTag, PixelDecoder] | None = None
    ) -> NetpbmImage:
    if observer is None:
        observer = silent

    if decoders is None:
        decoders = DEFAULT_DECODERS

    cursor = BufferCursor(buffer)
    observer(f"start parsing buffer of {len(cursor)} bytes")

    state = ParseState.TYPE
    format_tag = None
    decoder = None
    width = height = None
    max_value = 1

    while state is not ParseState.DATA:
        if cursor.exhausted:
            raise IncompleteHeader(cursor.format_error_message(f"unexpected end of buffer while reading {_FIELD_NAMES[state]}"))

        token = cursor.next_token()

        # Consecutive whitespace yields empty tokens
        if not token:
            continue

        # Comments run to the end of the line, not just to the end of the token
        if token.startswith(COMMENT_MARKER):
            cursor.skip_line()
            continue

        if state is ParseState.TYPE:
            format_tag = dispatch(token)
            decoder = decoder_for(format_tag, decoders)

            if not isinstance(decoder, (BinaryDecoder, TextDecoder)):
                raise TypeError(f"decoder registered for {format_tag} must be a BinaryDecoder or TextDecoder, got {decoder!r}")

            observer(f"detected {format_tag} ({format_tag.family}, {'binary' if format_tag.binary else 'ASCII'})")
            state = ParseState.WIDTH

        elif state is ParseState.WIDTH:
            width = parse_size(token)
            state = ParseState.HEIGHT

        elif state is ParseState.HEIGHT:
            height = parse_size(token)
            state = ParseState.MAX_VALUE if decoder.reads_max_value else ParseState.DATA

        elif state is ParseState.MAX_VALUE:
            max_value = parse_sample(token)

            if max_value < 1:
                raise MalformedNumber(cursor.format_error_message("max value must be at least 1"))

            state = ParseState.DATA

    header = Header(format=format_tag, width=width, height=height, max_value=max_value)
    observer(f"header: {header.width}x{header.height}, max value {header.max_value}")

    if isinstance(decoder, BinaryDecoder):
        # The single whitespace byte after the last header field has already been consumed
        data = decoder.decode(cursor.take_remainder(), header, observer)
    else:
        data = decoder.decode(cursor, header, observer)

    observer(f"decoded {len(data)} samples")

    return NetpbmImage.from_header(header, data)
