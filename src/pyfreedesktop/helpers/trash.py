# -*- encoding: utf-8 -*-
# @File   : trash.py
# @Time   : 2024/10/15 20:48:03
# @Author : Kariko Lin

"""`.trashinfo` files of the freedesktop.org trash standard.

    ```ini
    [Trash Info]
    Path=/home/user/Downloads/file
    DeletionDate=2024-10-15T20:48:03
    ```

The whole document is kept, so converting back only touches
the first `Path` and `DeletionDate`, nothing else.
"""

import warnings
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime
from re import ASCII
from re import compile as regex

from ..desktop.consts import (
    TRASH_DATE_FORMAT,
    TRASH_DATE_PATTERN,
    TRASH_GROUP
)
from ..desktop.model import ContentEntry, DesktopDocument, Group
from ..errors import DateFormatError, DateParseError

PATH_KEY = 'Path'
DATE_KEY = 'DeletionDate'
_DATE_SHAPE = regex(TRASH_DATE_PATTERN, ASCII)


def _first_value(entry: ContentEntry) -> str:
    return entry.values[0] if entry.values else ''


def _parse_date(raw: str) -> datetime:
    if _DATE_SHAPE.fullmatch(raw) is None:
        raise DateParseError(raw)
    try:
        return datetime.strptime(raw, TRASH_DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(raw) from e


def _format_date(date: datetime) -> str:
    """`YYYY-MM-DDThh:mm:ss` in local time, years zero-padded.

    There is no room for an UTC offset, so aware datetimes are refused.
    """
    if not isinstance(date, datetime) or date.tzinfo is not None:
        raise DateFormatError(date)
    return (f'{date.year:04d}-{date.month:02d}-{date.day:02d}'
            f'T{date.hour:02d}:{date.minute:02d}:{date.second:02d}')


def _warn_duplicates(group: Group, *keys: str) -> None:
    for key in keys:
        found = [i for i in group.without_comments() if i.key == key]
        if len(found) > 1:
            warnings.warn(
                f'[{group.header}] 中有 {len(found)} 个 "{key}" 词条，'
                '仅第一个生效。')


@dataclass(kw_only=True)
class TrashFile:
    desktop_file: DesktopDocument = field(default_factory=DesktopDocument)
    # path of the trashed file.
    path: str
    deletion_date: datetime

    @classmethod
    def from_document(cls, desktop: DesktopDocument) -> 'TrashFile':
        """从文档中读取`[Trash Info]`小节。

        缺少小节或词条时抛出`EntryNotFound`；日期格式不对则抛出`DateParseError`。
        """
        group = desktop.require(TRASH_GROUP)
        raw_date = _first_value(group.require(DATE_KEY))
        raw_path = _first_value(group.require(PATH_KEY))
        _warn_duplicates(group, PATH_KEY, DATE_KEY)

        return cls(desktop_file=desktop, path=raw_path,
                   deletion_date=_parse_date(raw_date))

    def to_document(self) -> DesktopDocument:
        """Write `path` and `deletion_date` back into a copy of the document.

        An existing `[Trash Info]` group is edited in place (other entries
        and comments untouched), otherwise one is appended at the end.
        """
        raw_date = _format_date(self.deletion_date)
        desktop = deepcopy(self.desktop_file)
        group = desktop.setdefault(TRASH_GROUP)
        group.setdefault(PATH_KEY).values = [self.path]
        group.setdefault(DATE_KEY).values = [raw_date]
        return desktop
