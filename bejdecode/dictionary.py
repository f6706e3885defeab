"""Tag-to-name dictionaries used to label decoded BEJ elements."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

__all__ = ["Dictionary", "read_binary"]

log = logging.getLogger(__name__)

StrPath = Union[str, "PathLike[str]"]


def read_binary(path: StrPath) -> bytes:
    """Return the whole contents of the file at ``path``.

    Raises ``OSError`` when the file cannot be opened or read.
    """
    return Path(path).read_bytes()


@dataclass(frozen=True)
class Dictionary:
    """An ordered list of ``(tag, key)`` entries.

    On disk each entry is one tag byte, one length byte and then that
    many bytes of key name. A trailing entry that is cut short is ignored.
    """

    entries: tuple[tuple[int, str], ...] = ()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Dictionary":
        """Parse a dictionary from its binary form."""
        entries: list[tuple[int, str]] = []
        pos = 0
        size = len(data)
        while pos + 2 <= size:
            tag = data[pos]
            key_len = data[pos + 1]
            pos += 2
            if pos + key_len > size:
                break
            key = data[pos:pos + key_len].decode("utf-8", errors="surrogateescape")
            pos += key_len
            entries.append((tag, key))
        return cls(tuple(entries))

    @classmethod
    def load(cls, path: StrPath) -> "Dictionary":
        """Read and parse the dictionary file at ``path``."""
        return cls.from_bytes(read_binary(path))

    def key(self, tag: int) -> str | None:
        """Return the name of the first entry with ``tag``, or ``None``."""
        for entry_tag, name in self.entries:
            if entry_tag == tag:
                return name
        log.debug("tag %d not found among %d entries", tag, len(self.entries))
        return None

    def __len__(self) -> int:
        return len(self.entries)