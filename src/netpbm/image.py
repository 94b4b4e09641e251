from array import array
from dataclasses import dataclass
from typing import Iterator

from .formats import FormatTag


@dataclass(frozen=True)
class Header:
    format: FormatTag
    width: int
    height: int
    max_value: int

    @property
    def sample_count(self) -> int:
        return self.width * self.height


class NetpbmImage:
    def __init__(self, *, format: FormatTag, width: int, height: int, max_value: int, data: array):
        self._format = format
        self._width = width
        self._height = height
        self._max_value = max_value
        self._data = data

    @classmethod
    def from_header(cls, header: Header, data: array) -> 'NetpbmImage':
        return cls(
            format=header.format,
            width=header.width,
            height=header.height,
            max_value=header.max_value,
            data=data
        )

    @property
    def format(self) -> FormatTag:
        return self._format

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def data(self) -> array:
        return self._data

    def rows(self) -> Iterator[array]:
        for row in range(self._height):
            yield self._data[row * self._width:(row + 1) * self._width]

    def __eq__(self, other):
        if not isinstance(other, NetpbmImage):
            return NotImplemented

        return (
            self._format == other._format
            and self._width == other._width
            and self._height == other._height
            and self._max_value == other._max_value
            and self._data == other._data
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"NetpbmImage(format={self._format}, width={self._width}, "
            f"height={self._height}, max_value={self._max_value}, samples={len(self._data)})"
        )
