# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/13 01:26:55
# @Author : Kariko Lin

"""Desktop entry document tree.

Unlike `configparser`, comments and blank runs are first-class nodes here,
so that an untouched document gets written back byte by byte.

    ```ini
    # top level comment      -> TextComment
    [Desktop Entry]          -> Group
    Name=Files               -> ContentEntry
    Name[de]=Dateien         -> ContentEntry (with Locale)
                             -> BlankComment ('\\n')
    Keywords=folder;manager; -> ContentEntry (two values)
    ```

Serialization is simply `str()` on any node.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .consts import COMMENT_MARK, VALUE_SEPARATOR
from .locales import LocaleMatcher, Locale
from .lookup import EntryList
from ..errors import EntryNotFound


@dataclass
class TextComment:
    """`# text` line, stored without the mark and the spaces after it."""
    text: str

    @property
    def is_blank(self) -> bool:
        return False

    @property
    def is_comment(self) -> bool:
        return True

    def __str__(self) -> str:
        return f'{COMMENT_MARK} {self.text}'


@dataclass
class BlankComment:
    """Verbatim whitespace run. Never empty, never contains `#`."""
    text: str

    @property
    def is_blank(self) -> bool:
        return True

    @property
    def is_comment(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.text


@dataclass(kw_only=True)
class ContentEntry:
    key: str
    values: list[str] = field(default_factory=list)
    locale: Locale | None = None

    @property
    def is_blank(self) -> bool:
        return False

    @property
    def is_comment(self) -> bool:
        return False

    def __str__(self) -> str:
        # values are stored decoded, nothing gets escaped again.
        key = self.key if self.locale is None else f'{self.key}[{self.locale}]'
        return f'{key}={VALUE_SEPARATOR.join(self.values)}'


CommentEntry = TextComment | BlankComment
Entry = ContentEntry | CommentEntry


def _closes_line(item: object) -> bool:
    match item:
        case BlankComment():
            return True
        case Group(content=[]):
            # header line already written with its '\n'.
            return True
        case Group(content=[*_, last]):
            return last.is_blank
        case _:
            return False


def _join(items: Sequence[object]) -> str:
    buf: list[str] = []
    for i, item in enumerate(items):
        if i > 0 and not _closes_line(items[i - 1]):
            buf.append('\n')
        buf.append(str(item))
    return ''.join(buf)


@dataclass(kw_only=True)
class Group(EntryList[Entry]):
    """`[header]` section. Duplicated keys are kept in their original order."""
    header: str
    content: list[Entry] = field(default_factory=list)

    @property
    def is_blank(self) -> bool:
        return False

    @property
    def is_comment(self) -> bool:
        return False

    @staticmethod
    def _key_of(item: Entry) -> str | None:
        match item:
            case ContentEntry(key=key):
                return key
            case _:
                return None

    def find_localized(
        self, key: str, matcher: LocaleMatcher
    ) -> ContentEntry | None:
        """按键和 locale 查找第一个匹配的词条。

        不带 locale 的词条同样视为匹配（即作为回退值）；
        带 locale 的词条则按`matcher`指定的字段逐一比较。
        """
        for i in self.content:
            if (isinstance(i, ContentEntry) and i.key == key
                    and matcher.matches(i.locale)):
                return i
        return None

    def require_localized(
        self, key: str, matcher: LocaleMatcher
    ) -> ContentEntry:
        if (ret := self.find_localized(key, matcher)) is None:
            raise EntryNotFound(key)
        return ret

    find_localized_mut = find_localized
    require_localized_mut = require_localized

    def setdefault(
        self, key: str, values: Iterable[str] = (),
        locale: Locale | None = None
    ) -> ContentEntry:
        """Return the first `key[locale]` entry, appending a new one if absent.

        `locale=None` only picks unlocalized entries.
        """
        for i in self.content:
            if (isinstance(i, ContentEntry) and i.key == key
                    and i.locale == locale):
                return i
        ret = ContentEntry(key=key, values=list(values), locale=locale)
        self.content.append(ret)
        return ret

    def __str__(self) -> str:
        return f'[{self.header}]\n' + _join(self.content)


TopLevelEntry = Group | CommentEntry


@dataclass(kw_only=True)
class DesktopDocument(EntryList[TopLevelEntry]):
    """A whole desktop entry file. Top level holds groups and comments only."""
    content: list[TopLevelEntry] = field(default_factory=list)

    @staticmethod
    def _key_of(item: TopLevelEntry) -> str | None:
        match item:
            case Group(header=header):
                return header
            case _:
                return None

    def groups(self) -> list[Group]:
        return [i for i in self.content if isinstance(i, Group)]

    def setdefault(self, header: str) -> Group:
        """Return the first `[header]` group, appending a new one if absent."""
        if (ret := self.find_one(header)) is None:
            ret = Group(header=header)
            self.content.append(ret)
        return ret  # type: ignore[return-value]

    def __str__(self) -> str:
        return _join(self.content)


def render(document: DesktopDocument) -> str:
    return str(document)
