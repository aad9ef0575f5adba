# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:31:02
# @Author : Kariko Lin

DEFAULT_ENCODING = 'utf-8'
# below this `chardet` guess is considered noise.
CHARDET_CONFIDENCE = 0.8

# `\x` -> decoded bytes, keyed by the byte after the backslash.
VALUE_ESCAPES: dict[int, bytes] = {
    ord('n'): b'\n',
    ord('r'): b'\r',
    ord('s'): b' ',
    ord('t'): b'\t',
    ord('\\'): b'\\',
    ord(';'): b';',
}

INLINE_SPACES = b' \t'
BLANK_CHARS = b' \t\r\n'
KEY_EXTRA_CHARS = b'-'

COMMENT_MARK = '#'
VALUE_SEPARATOR = ';'

# layout version of the JSON / YAML tree dumps.
DUMP_PROTOCOL = 1

TRASH_GROUP = 'Trash Info'
TRASH_DATE_FORMAT = '%Y-%m-%dT%H:%M:%S'
# strptime alone also takes unpadded fields like `2025-8-1T1:2:3`.
TRASH_DATE_PATTERN = r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}'
