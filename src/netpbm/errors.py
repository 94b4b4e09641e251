class NetpbmError(ValueError):
    """Base class for every failure reported while reading a netpbm image."""


class InvalidInput(NetpbmError):
    """A required argument is missing at the process boundary."""


class MalformedNumber(NetpbmError):
    """A numeric token is empty, holds a non-digit byte or overflows its domain."""


class IncompleteHeader(NetpbmError):
    """The buffer ended before every header field was read."""


class UnsupportedFormat(NetpbmError):
    """The magic number is not one of P1 to P7."""


class FormatNotImplemented(NetpbmError, NotImplementedError):
    """The magic number is recognized but no decoder is registered for it."""


class TruncatedData(NetpbmError):
    """The body holds fewer samples than width * height."""
