from .constants import DIGITS, MAX_SAMPLE, MAX_SIZE
from .errors import MalformedNumber


def is_decimal(token: bytes) -> bool:
    return len(token) > 0 and all(byte in DIGITS for byte in token)


def parse_size(token: bytes) -> int:
    return _parse_decimal(token, MAX_SIZE, "size")


def parse_sample(token: bytes) -> int:
    return _parse_decimal(token, MAX_SAMPLE, "sample")


def _parse_decimal(token: bytes, limit: int, domain: str) -> int:
    if not token:
        raise MalformedNumber(f"expected digits while parsing {domain}, got an empty token")

    number = 0

    for byte in token:
        if not byte in DIGITS:
            raise MalformedNumber(f"expected digit while parsing {domain}, got {token!r}")

        number = (number * 10) + (byte - ord('0'))

        if number > limit:
            raise MalformedNumber(f"{domain} {token!r} exceeds the maximum of {limit}")

    return number
