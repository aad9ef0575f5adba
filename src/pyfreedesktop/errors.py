# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:20:13
# @Author : Kariko Lin

"""Exceptions raised by the desktop entry core and its helpers.

Nothing here is ever logged or swallowed by the core,
callers decide what a missing key or a broken file means to them.
"""

from datetime import datetime


class DesktopEntryError(Exception):
    """Base of every error raised by `pyfreedesktop`."""
    pass


class InvalidDesktopEntry(DesktopEntryError, ValueError):
    """To record grammar violations when parsing desktop entry files.

    `position` is the byte offset where the grammar broke,
    and `remainder` is everything not consumed from there on.
    `data` is the whole input, only sliced when `remainder` is asked for.
    """
    def __init__(self, position: int, data: bytes, expected: str) -> None:
        super().__init__(position, expected)
        self.position = position
        self.data = data
        self.expected = expected

    @property
    def remainder(self) -> bytes:
        return self.data[self.position:]

    def __str__(self) -> str:
        # long files would flood the terminal, just show the line head.
        head = self.data[self.position:self.position + 40].split(b'\n', 1)[0]
        return (f'expected {self.expected} at byte {self.position}, '
                f'got {head!r}')


class InvalidDesktopDump(DesktopEntryError, ValueError):
    """A JSON or YAML tree dump does not follow the dump schema."""
    pass


class EntryNotFound(DesktopEntryError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f'"{self.key}" not found'


class NotAsciiError(DesktopEntryError, ValueError):
    def __init__(self, char: str) -> None:
        super().__init__(char)
        self.char = char

    def __str__(self) -> str:
        return f'{self.char!r} is not a printable ASCII character'


class DateParseError(DesktopEntryError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(raw)
        self.raw = raw


class DateFormatError(DesktopEntryError, ValueError):
    def __init__(self, date: datetime) -> None:
        super().__init__(date)
        self.date = date
