"""Decoding of BEJ-encoded data into JSON text."""

from __future__ import annotations

import enum
import io
import logging
from dataclasses import dataclass
from typing import Iterator, TextIO

from .dictionary import Dictionary, StrPath, read_binary

__all__ = [
    "BejReader",
    "DataType",
    "Element",
    "JsonWriter",
    "bej_parse",
    "decode",
]

log = logging.getLogger(__name__)

_INTEGER_WIDTHS = frozenset({1, 2, 4, 8})
_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


class DataType(enum.IntEnum):
    """Type of a BEJ element, taken from the low four bits of its tag."""

    INTEGER = 0
    SET = 1
    STRING = 2
    UNKNOWN = 255


@dataclass(frozen=True)
class Element:
    """One decoded element: its tag, type, declared length and raw value."""

    tag: int
    type: DataType
    length: int
    value: bytes = b""


_END = Element(tag=0, type=DataType.INTEGER, length=0)


class BejReader:
    """Sequential reader over a buffer of BEJ-encoded elements."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.pos = 0

    @property
    def size(self) -> int:
        return len(self.data)

    def _next_byte(self) -> int | None:
        if self.pos >= self.size:
            return None
        byte = self.data[self.pos]
        self.pos += 1
        return byte

    def read_tag(self) -> int:
        """Read a one- or two-byte raw tag; 0 when the data runs out."""
        first = self._next_byte()
        if first is None:
            return 0
        if not first & 0x80:
            return first
        second = self._next_byte()
        if second is None:
            return 0
        return (first & 0x7F) | (second << 7)

    def read_length(self) -> int:
        """Read a short or long-form length; 0 when the data runs out."""
        first = self._next_byte()
        if first is None:
            return 0
        if not first & 0x80:
            return first
        count = first & 0x7F
        if self.pos + count > self.size:
            return 0
        length = int.from_bytes(self.data[self.pos:self.pos + count], "big")
        self.pos += count
        return length

    def read_element(self) -> Element:
        """Read the next element.

        Returns an element with tag 0 and length 0 at the end of the data.
        An element whose length runs past the buffer comes back as
        ``UNKNOWN`` with no value, and its payload is not consumed.
        """
        raw_tag = self.read_tag()
        if raw_tag == 0 or self.pos >= self.size:
            return _END

        tag = raw_tag >> 4
        type_bits = raw_tag & 0x0F
        length = self.read_length()
        log.debug("tag=%d type=0x%X length=%d pos=%d", tag, type_bits, length, self.pos)

        if self.pos + length > self.size:
            log.warning(
                "element length exceeds buffer size: tag=%d type=0x%X length=%d pos=%d",
                tag, type_bits, length, self.pos,
            )
            return Element(tag=tag, type=DataType.UNKNOWN, length=0)

        value = self.data[self.pos:self.pos + length]
        self.pos += length

        try:
            data_type = DataType(type_bits)
        except ValueError:
            data_type = DataType.UNKNOWN
        if data_type is DataType.UNKNOWN:
            log.warning("unknown data type 0x%X encountered: tag=%d", type_bits, tag)

        return Element(tag=tag, type=data_type, length=length, value=value)

    def elements(self) -> Iterator[Element]:
        """Yield elements until the data ends or an end marker is read."""
        while self.pos < self.size:
            element = self.read_element()
            if element.tag == 0 and element.length == 0:
                return
            yield element


class JsonWriter:
    """Writes decoded elements as JSON object members to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._first = True

    def begin_object(self) -> None:
        self.stream.write("{")
        self._first = True

    def end_object(self) -> None:
        self.stream.write("}")
        self._first = False

    def write_element(self, key_name: str, element: Element, dictionary: Dictionary) -> None:
        """Write ``"key_name":value`` for one element, with a leading comma if needed."""
        if not self._first:
            self.stream.write(",")
        self._first = False
        self.stream.write(f'"{key_name}":')

        if element.type is DataType.SET:
            self.begin_object()
            self.write_elements(element.value, dictionary)
            self.end_object()
        elif element.type is DataType.INTEGER:
            if element.length in _INTEGER_WIDTHS:
                number = int.from_bytes(element.value, "little")
            else:
                number = 0
            self.stream.write(str(number))
        elif element.type is DataType.STRING:
            raw = element.value.split(b"\0", 1)[0]
            text = raw.decode(_TEXT_ENCODING, errors=_TEXT_ERRORS)
            self.stream.write(f'"{text}"')
        else:
            self.stream.write('"<unknown>"')

    def write_elements(self, data: bytes, dictionary: Dictionary) -> None:
        """Decode every element in ``data`` and write it as an object member."""
        for element in BejReader(data).elements():
            key_name = dictionary.key(element.tag)
            if key_name is None:
                key_name = "unknown_tag"
            self.write_element(key_name, element, dictionary)


def decode(data: bytes, dictionary: Dictionary) -> str:
    """Decode BEJ ``data`` into a JSON object and return its text."""
    buffer = io.StringIO()
    writer = JsonWriter(buffer)
    writer.begin_object()
    writer.write_elements(data, dictionary)
    writer.end_object()
    return buffer.getvalue()


def bej_parse(bej_path: StrPath, dictionary_path: StrPath, json_path: StrPath) -> str:
    """Decode the BEJ file with the given dictionary and write JSON to ``json_path``.

    Returns the JSON text written. Raises ``OSError`` if a file cannot be
    read or written.
    """
    data = read_binary(bej_path)
    dictionary = Dictionary.load(dictionary_path)
    with open(json_path, "w", encoding=_TEXT_ENCODING, errors=_TEXT_ERRORS, newline="") as out:
        writer = JsonWriter(out)
        writer.begin_object()
        writer.write_elements(data, dictionary)
        writer.end_object()
    with open(json_path, encoding=_TEXT_ENCODING, errors=_TEXT_ERRORS, newline="") as written:
        return written.read()