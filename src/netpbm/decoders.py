"""Per-format pixel body decoders.

A decoder turns the bytes that follow the header into a row-major
`array('H')` of samples. Binary decoders receive the untouched remainder of
the buffer; text decoders keep pulling tokens from the header's cursor.

Registering another `PixelDecoder` under a `FormatTag` (see
`DEFAULT_DECODERS`) is how further netpbm variants are added.
"""
import sys
from array import array
from enum import Enum

from .constants import MAX_SINGLE_BYTE_SAMPLE
from .cursor import BufferCursor
from .errors import MalformedNumber, TruncatedData
from .formats import FormatTag
from .image import Header
from .numeric import is_decimal, parse_sample
from .observer import Observer, silent


class AsciiTermination(Enum):
    """What a text decoder does with a token that does not parse as a sample."""

    # The token marks the end of the pixel data; trailing text is tolerated
    STOP_ON_FIRST_UNPARSEABLE = 'stop'
    # The token is reported as a MalformedNumber
    STRICT = 'strict'


class PixelDecoder:
    # Bitmap style formats have no max value field in their header
    reads_max_value = True


class BinaryDecoder(PixelDecoder):
    def decode(self, remainder: memoryview, header: Header, observer: Observer = silent) -> array:
        """Decode the raw bytes after the header; override in subclasses."""
        raise NotImplementedError


class TextDecoder(PixelDecoder):
    def decode(self, cursor: BufferCursor, header: Header, observer: Observer = silent) -> array:
        """Decode samples by pulling tokens from the header's cursor; override in subclasses."""
        raise NotImplementedError


class BinaryGraymapDecoder(BinaryDecoder):
    def decode(self, remainder: memoryview, header: Header, observer: Observer = silent) -> array:
        bytes_per_sample = 2 if header.max_value > MAX_SINGLE_BYTE_SAMPLE else 1
        expected_byte_count = header.sample_count * bytes_per_sample

        if len(remainder) < expected_byte_count:
            raise TruncatedData(
                f"{header.format} image data is incomplete: expected {expected_byte_count} bytes, got {len(remainder)} bytes"
            )

        if len(remainder) > expected_byte_count:
            observer(f"ignoring {len(remainder) - expected_byte_count} trailing bytes after the image data")

        body = remainder[:expected_byte_count]
        samples = array('H')

        if bytes_per_sample == 1:
            samples.extend(body)
            return samples

        # Two byte samples are stored most significant byte first
        samples.frombytes(body)

        if sys.byteorder == 'little':
            samples.byteswap()

        return samples


class AsciiGraymapDecoder(TextDecoder):
    def __init__(self, termination: AsciiTermination = AsciiTermination.STOP_ON_FIRST_UNPARSEABLE):
        self._termination = termination

    @property
    def termination(self) -> AsciiTermination:
        return self._termination

    def decode(self, cursor: BufferCursor, header: Header, observer: Observer = silent) -> array:
        samples = array('H')

        while not cursor.exhausted:
            token = cursor.next_token()

            # Consecutive whitespace yields empty tokens
            if not token:
                continue

            try:
                if not is_decimal(token):
                    raise MalformedNumber(cursor.format_error_message(f"expected a decimal sample, got {token!r}"))

                sample = parse_sample(token)
            except MalformedNumber:
                if self._termination is AsciiTermination.STRICT:
                    raise

                # Non-digit and out of range tokens both end the pixel data
                observer(f"pixel data ended at unparseable token {token[:16]!r} after {len(samples)} samples")
                break

            samples.append(sample)

        if len(samples) < header.sample_count:
            raise TruncatedData(
                f"{header.format} image data is incomplete: expected {header.sample_count} samples, got {len(samples)}"
            )

        if len(samples) > header.sample_count:
            observer(f"ignoring {len(samples) - header.sample_count} samples after the image data")
            del samples[header.sample_count:]

        return samples


DEFAULT_DECODERS = {
    FormatTag.PGM_ASCII: AsciiGraymapDecoder(),
    FormatTag.PGM_BINARY: BinaryGraymapDecoder(),
}
