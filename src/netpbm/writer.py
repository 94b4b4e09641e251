import sys
from array import array
from typing import Sequence

from .constants import MAX_SAMPLE, MAX_SINGLE_BYTE_SAMPLE, PGM_ASCII, PGM_BINARY


def encode_graymap(
        samples: Sequence[int],
        width: int,
        height: int,
        max_value: int,
        *,
        binary: bool = True,
        comment: str | None = None
    ) -> bytes:
    if not 1 <= max_value <= MAX_SAMPLE:
        raise ValueError(f"max value must be between 1 and {MAX_SAMPLE}, got {max_value}")

    if len(samples) != width * height:
        raise ValueError(f"expected {width * height} samples for a {width}x{height} image, got {len(samples)}")

    if any(not 0 <= sample <= max_value for sample in samples):
        raise ValueError(f"every sample must be between 0 and {max_value}")

    magic_number = PGM_BINARY if binary else PGM_ASCII

    header = magic_number + b'\n'

    if comment:
        # Only the first line survives, a newline would end the comment early
        header += b'# ' + comment.splitlines()[0].encode('ascii', errors='replace') + b'\n'

    header += f"{width} {height}\n{max_value}\n".encode('ascii')

    if not binary:
        rows = (
            ' '.join(str(sample) for sample in samples[row * width:(row + 1) * width])
            for row in range(height)
        )
        return header + ''.join(f"{row}\n" for row in rows).encode('ascii')

    if max_value <= MAX_SINGLE_BYTE_SAMPLE:
        return header + bytes(sample for sample in samples)

    body = array('H', samples)

    if sys.byteorder == 'little':
        body.byteswap()

    return header + body.tobytes()
