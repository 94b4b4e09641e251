import sys

# Type             Magic number (ASCII / binary)  Samples
# Portable BitMap  P1 / P4                        0-1 (white & black)
# Portable GrayMap P2 / P5                        0-255 or 0-65535, black-to-white
# Portable PixMap  P3 / P6                        RGB triples, 0-255 or 0-65535 per channel
# Portable AnyMap  P7                             arbitrary tuples (PAM)

PBM_ASCII = b'P1'
PGM_ASCII = b'P2'
PPM_ASCII = b'P3'
PBM_BINARY = b'P4'
PGM_BINARY = b'P5'
PPM_BINARY = b'P6'
PAM_BINARY = b'P7'

WHITESPACES = b' \t\r\n'
NEWLINES = b'\r\n'
COMMENT_MARKER = b'#'

DIGITS = {ord('0') + digit for digit in range(10)}

MAX_SIZE = sys.maxsize
MAX_SAMPLE = 0xFFFF

# Samples above this value take two bytes (most significant first) in binary bodies
MAX_SINGLE_BYTE_SAMPLE = 0xFF
