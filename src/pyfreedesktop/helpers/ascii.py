# -*- encoding: utf-8 -*-
# @File   : ascii.py
# @Time   : 2024/10/15 21:30:26
# @Author : Kariko Lin

from ..errors import NotAsciiError


class AsciiString(str):
    """A `str` guaranteed to hold printable ASCII only.

    The core never checks what goes into entries,
    wrap input with this first if you need that guarantee.
    """

    def __new__(cls, value: str = '') -> 'AsciiString':
        for char in value:
            if not char.isascii() or ord(char) < 0x20 or char == '\x7f':
                raise NotAsciiError(char)
        return super().__new__(cls, value)
