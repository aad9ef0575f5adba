# -*- encoding: utf-8 -*-
# @File   : grammar.py
# @Time   : 2024/10/13 16:02:38
# @Author : Kariko Lin

"""Desktop entry grammar, working on raw bytes.

    ```
    document       := (group | comment)*
    group          := '[' header ']' '\\n'? (comment | content)*
    comment        := blank | '#' [ \\t]* text ('\\n' | EOF)
    content        := key locale? [ \\t]* '=' [ \\t]* values
    locale         := '[' not('[', ']')* ']'
    values         := (value ';'?)* ('\\n' | '\\r\\n' | EOF)
    ```

Every rule takes an immutable `Cursor` and either returns
a `ParseResult(value, cursor)` or raises `InvalidDesktopEntry`.
Since cursors never move in place, backtracking is just
"keep using the old cursor" (see `attempt()`).

Only decoding of finished tokens cares about the text encoding,
the structure itself is plain ASCII.
"""

from collections.abc import Callable
from typing import Generic, NamedTuple, TypeAlias, TypeVar

from .consts import (
    BLANK_CHARS,
    DEFAULT_ENCODING,
    INLINE_SPACES,
    KEY_EXTRA_CHARS,
    VALUE_ESCAPES
)
from .locales import Locale
from .model import (
    BlankComment,
    CommentEntry,
    ContentEntry,
    DesktopDocument,
    Entry,
    Group,
    TextComment,
    TopLevelEntry
)
from ..errors import InvalidDesktopEntry

_NEWLINE = ord('\n')
_BACKSLASH = ord('\\')
_SEMICOLON = ord(';')
_LBRACKET = ord('[')


class Cursor(NamedTuple):
    data: bytes
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.data)

    @property
    def current(self) -> int | None:
        return None if self.is_eof else self.data[self.pos]

    def peek(self, offset: int = 1) -> int | None:
        i = self.pos + offset
        return self.data[i] if i < len(self.data) else None

    @property
    def remainder(self) -> bytes:
        return self.data[self.pos:]

    def startswith(self, prefix: bytes) -> bool:
        return self.data.startswith(prefix, self.pos)

    def advance(self, count: int = 1) -> 'Cursor':
        return Cursor(self.data, self.pos + count)

    def take_while(
        self, predicate: Callable[[int], bool]
    ) -> tuple[bytes, 'Cursor']:
        end = self.pos
        while end < len(self.data) and predicate(self.data[end]):
            end += 1
        return self.data[self.pos:end], Cursor(self.data, end)

    def fail(self, expected: str) -> InvalidDesktopEntry:
        return InvalidDesktopEntry(self.pos, self.data, expected)


T = TypeVar('T')


class ParseResult(NamedTuple, Generic[T]):
    value: T
    cursor: Cursor


Rule: TypeAlias = Callable[[Cursor], ParseResult[T]]


def expect(cursor: Cursor, token: bytes) -> Cursor:
    if not cursor.startswith(token):
        raise cursor.fail(repr(token.decode('ascii')))
    return cursor.advance(len(token))


def attempt(rule: Rule[T], cursor: Cursor) -> ParseResult[T] | None:
    """Try `rule`, rolling back to `cursor` (by returning None) on failure."""
    try:
        return rule(cursor)
    except InvalidDesktopEntry:
        return None


def alt(cursor: Cursor, *rules: Rule[T]) -> ParseResult[T]:
    """First rule that matches wins.

    When all of them fail, report the one that went the farthest,
    which is nearly always the branch the author meant.
    """
    errors: list[InvalidDesktopEntry] = []
    for rule in rules:
        try:
            return rule(cursor)
        except InvalidDesktopEntry as e:
            errors.append(e)
    farthest = max(e.position for e in errors)
    candidates = [e for e in errors if e.position == farthest]
    if len(candidates) == 1:
        raise candidates[0]
    raise InvalidDesktopEntry(
        farthest, candidates[0].data,
        ' or '.join(e.expected for e in candidates))


def _is_key_byte(c: int) -> bool:
    return (0x30 <= c <= 0x39 or 0x41 <= c <= 0x5a or 0x61 <= c <= 0x7a
            or c in KEY_EXTRA_CHARS)


def _is_inline_space(c: int) -> bool:
    return c in INLINE_SPACES


def _is_blank(c: int) -> bool:
    return c in BLANK_CHARS


def _is_bracket_body(c: int) -> bool:
    return c not in b'[]'


def _is_line_body(c: int) -> bool:
    return c != _NEWLINE


def _is_plain_value(c: int) -> bool:
    return c not in b'\\;\n'


class DesktopGrammar:
    """Rules of the grammar, bound to the text encoding of one document."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self._codec = encoding

    def _decode(self, raw: bytes, at: Cursor) -> str:
        try:
            return raw.decode(self._codec)
        except UnicodeDecodeError as e:
            raise at.fail(f'{self._codec} text') from e

    def parse(self, data: bytes | str) -> DesktopDocument:
        """解析整个文档。任何语法错误都会让整个解析失败，不做部分恢复。"""
        if isinstance(data, str):
            data = data.encode(self._codec)
        cursor = Cursor(data)
        content: list[TopLevelEntry] = []
        while not cursor.is_eof:
            item, cursor = alt(cursor, self.group, self.comment)
            content.append(item)
        return DesktopDocument(content=content)

    def bracketed(self, cursor: Cursor) -> ParseResult[str]:
        start = cursor
        cursor = expect(cursor, b'[')
        raw, cursor = cursor.take_while(_is_bracket_body)
        cursor = expect(cursor, b']')
        return ParseResult(self._decode(raw, start), cursor)

    def group(self, cursor: Cursor) -> ParseResult[Group]:
        header, cursor = self.bracketed(cursor)
        if cursor.current == _NEWLINE:
            cursor = cursor.advance()
        content: list[Entry] = []
        while not cursor.is_eof:
            if cursor.current == _LBRACKET:
                # `[de]=...` is an entry with an empty key,
                # anything else starting with '[' belongs to the next group.
                if (trial := attempt(self.content, cursor)) is None:
                    break
                entry, cursor = trial
            else:
                entry, cursor = self.entry(cursor)
            content.append(entry)
        return ParseResult(Group(header=header, content=content), cursor)

    def entry(self, cursor: Cursor) -> ParseResult[Entry]:
        return alt(cursor, self.comment, self.content)

    def comment(self, cursor: Cursor) -> ParseResult[CommentEntry]:
        return alt(cursor, self.blank, self.text_comment)

    def blank(self, cursor: Cursor) -> ParseResult[BlankComment]:
        raw, after = cursor.take_while(_is_blank)
        if not raw:
            raise cursor.fail('whitespace')
        return ParseResult(BlankComment(raw.decode('ascii')), after)

    def text_comment(self, cursor: Cursor) -> ParseResult[TextComment]:
        cursor = expect(cursor, b'#')
        _, cursor = cursor.take_while(_is_inline_space)
        start = cursor
        raw, cursor = cursor.take_while(_is_line_body)
        if cursor.current == _NEWLINE:
            cursor = cursor.advance()
        return ParseResult(TextComment(self._decode(raw, start)), cursor)

    def content(self, cursor: Cursor) -> ParseResult[ContentEntry]:
        raw_key, cursor = cursor.take_while(_is_key_byte)
        locale = None
        if (trial := attempt(self.bracketed, cursor)) is not None:
            locale = Locale.parse(trial.value)
            cursor = trial.cursor
        _, cursor = cursor.take_while(_is_inline_space)
        cursor = expect(cursor, b'=')
        _, cursor = cursor.take_while(_is_inline_space)
        values, cursor = self.values(cursor)
        entry = ContentEntry(
            key=raw_key.decode('ascii'), values=values, locale=locale)
        return ParseResult(entry, cursor)

    def values(self, cursor: Cursor) -> ParseResult[list[str]]:
        ret: list[str] = []
        while not cursor.is_eof:
            if cursor.startswith(b'\r\n'):
                return ParseResult(ret, cursor.advance(2))
            if cursor.current == _NEWLINE:
                return ParseResult(ret, cursor.advance())
            value, cursor = self.value(cursor)
            ret.append(value)
        return ParseResult(ret, cursor)

    def value(self, cursor: Cursor) -> ParseResult[str]:
        """One `;` separated value, escapes decoded and whitespace trimmed."""
        start, buf = cursor, bytearray()
        while not cursor.is_eof and cursor.current not in b';\n':
            if cursor.current == _BACKSLASH:
                if (decoded := VALUE_ESCAPES.get(cursor.peek())) is None:
                    raise cursor.fail('one of \\n \\r \\s \\t \\\\ \\;')
                buf += decoded
                cursor = cursor.advance(2)
            else:
                raw, cursor = cursor.take_while(_is_plain_value)
                buf += raw
        if cursor.current == _SEMICOLON:
            cursor = cursor.advance()
        return ParseResult(self._decode(bytes(buf), start).strip(), cursor)


def parse(
    data: bytes | str, encoding: str = DEFAULT_ENCODING
) -> DesktopDocument:
    return DesktopGrammar(encoding).parse(data)
