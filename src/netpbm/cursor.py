import re

from .constants import NEWLINES, WHITESPACES

_DELIMITER = re.compile(b'[' + re.escape(WHITESPACES) + b']')
_NEWLINE = re.compile(b'[' + re.escape(NEWLINES) + b']')


class BufferCursor:
    """Forward-only tokenizer over an in-memory byte buffer.

    Tokens are the bytes between the previous cursor position and the next
    whitespace byte. Adjacent delimiters yield empty tokens, callers decide
    whether to skip them. `take_remainder` hands out everything that is left
    without looking at it, which is how raw pixel data is reached without a
    binary byte ever being mistaken for a delimiter.
    """

    def __init__(self, buffer):
        self._buffer = memoryview(buffer).cast('B')
        self._position = 0
        self._previous_position = 0
        self._delimiter = None

    def next_token(self) -> bytes:
        self._previous_position = self._position

        match = _DELIMITER.search(self._buffer, self._position)

        if match is None:
            end = len(self._buffer)
            self._position = end
            self._delimiter = None
        else:
            end = match.start()
            self._position = end + 1
            self._delimiter = self._buffer[end]

        return bytes(self._buffer[self._previous_position:end])

    def take_remainder(self) -> memoryview:
        self._previous_position = self._position
        self._position = len(self._buffer)
        self._delimiter = None

        return self._buffer[self._previous_position:]

    def skip_line(self) -> None:
        # The token was already terminated by a newline, so the line is over
        if self._delimiter is not None and self._delimiter in NEWLINES:
            return

        self._previous_position = self._position

        match = _NEWLINE.search(self._buffer, self._position)

        if match is None:
            self._position = len(self._buffer)
            self._delimiter = None
        else:
            self._position = match.end()
            self._delimiter = self._buffer[match.start()]

    def format_error_message(self, description: str) -> str:
        return f"Error while parsing: {description}, Position: {self._previous_position}"

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._buffer)

    @property
    def position(self) -> int:
        return self._position

    @property
    def previous_position(self) -> int:
        return self._previous_position

    @property
    def delimiter(self) -> int | None:
        return self._delimiter

    def __len__(self) -> int:
        return len(self._buffer)
