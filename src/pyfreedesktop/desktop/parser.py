# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/14 22:37:10
# @Author : Kariko Lin

"""File IO for desktop entry documents.

- `DesktopFileParser` reads/writes the real `.desktop` (or `.trashinfo`) text.
- `DesktopJsonParser` and `DesktopYamlParser` dump the *tree* instead,
  comments and blank runs included, which is handy for diffing
  and for feeding other tools.
"""

import json
import logging
from abc import abstractmethod
from io import TextIOWrapper
from typing import TypedDict

import chardet
import yaml

from .consts import CHARDET_CONFIDENCE, DEFAULT_ENCODING, DUMP_PROTOCOL
from .grammar import parse
from .locales import Locale
from .model import (
    BlankComment,
    ContentEntry,
    DesktopDocument,
    Entry,
    Group,
    TextComment,
    TopLevelEntry
)
from ..abstract import FileHandler
from ..errors import InvalidDesktopDump


# should keep this base class for better type hinting.
class DesktopParser(FileHandler[DesktopDocument]):
    ...


class DesktopFileParser(DesktopParser):
    @staticmethod
    def _guess_codec(raw: bytes) -> str:
        codec = chardet.detect(raw)
        if (codec['encoding'] is None
                or codec['confidence'] < CHARDET_CONFIDENCE):
            return DEFAULT_ENCODING
        return codec['encoding']

    def read(self) -> DesktopDocument:
        """读取`DesktopFileParser`实例指定的文件。

        未指定编码时按 utf-8 读取；解码失败则交给`chardet`猜测，
        并记住猜到的编码，以便`write()`原样写回。
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = self._codec or DEFAULT_ENCODING
        try:
            raw.decode(codec)
        except UnicodeDecodeError as e:
            guessed = self._guess_codec(raw)
            logging.warning(
                f'"{self._fn}" is not {codec} ({e.reason}), '
                f'retrying with {guessed}.')
            codec = guessed
        self._codec = codec
        return parse(raw, codec)

    def write(self, instance: DesktopDocument) -> None:
        # newline='' or '\r\n' runs would get mangled on Windows.
        with open(self._fn, 'w', encoding=self._codec or DEFAULT_ENCODING,
                  newline='') as fp:
            fp.write(str(instance))


class _EntryPack(TypedDict, total=False):
    key: str
    locale: str | None
    values: list[str]
    comment: str
    blank: str


class _TopLevelPack(_EntryPack, total=False):
    group: str
    entries: list[_EntryPack]


class _DesktopDump(TypedDict):
    protocol: int
    content: list[_TopLevelPack]


class _StructuredParser(DesktopParser):
    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    @staticmethod
    def __pack_entry(item: Entry | TopLevelEntry) -> _TopLevelPack:
        match item:
            case TextComment(text=text):
                return {'comment': text}
            case BlankComment(text=text):
                return {'blank': text}
            case ContentEntry():
                return {
                    'key': item.key,
                    'locale': None if item.locale is None else str(item.locale),
                    'values': list(item.values)
                }
            case Group():
                return {
                    'group': item.header,
                    'entries': [_StructuredParser.__pack_entry(i)
                                for i in item]
                }
        raise TypeError(f'not a desktop entry node: {item!r}')

    @staticmethod
    def __unpack_nodes(packs: object, top_level: bool) -> list:
        if not isinstance(packs, list):
            raise InvalidDesktopDump(f'node list expected, got {packs!r}')
        return [_StructuredParser.__unpack_entry(i, top_level) for i in packs]

    @staticmethod
    def __text(pack: dict, name: str) -> str:
        value = pack[name]
        if not isinstance(value, str):
            raise InvalidDesktopDump(f'"{name}" must be a string: {pack!r}')
        return value

    @staticmethod
    def __unpack_entry(pack: _TopLevelPack, top_level: bool):
        if not isinstance(pack, dict):
            raise InvalidDesktopDump(f'unknown node: {pack!r}')
        text = _StructuredParser.__text
        if 'comment' in pack:
            return TextComment(text(pack, 'comment'))
        if 'blank' in pack:
            return BlankComment(text(pack, 'blank'))
        if top_level and 'group' in pack:
            return Group(
                header=text(pack, 'group'),
                content=_StructuredParser.__unpack_nodes(
                    pack.get('entries', []), False))
        if not top_level and 'key' in pack:
            values = pack.get('values', [])
            if not isinstance(values, list):
                raise InvalidDesktopDump(f'"values" must be a list: {pack!r}')
            locale = None if pack.get('locale') is None else text(pack, 'locale')
            return ContentEntry(
                key=text(pack, 'key'),
                values=[str(i) for i in values],
                locale=None if locale is None else Locale.parse(locale))
        raise InvalidDesktopDump(f'unknown node: {pack!r}')

    @classmethod
    def to_dump(cls, doc: DesktopDocument) -> _DesktopDump:
        return {
            'protocol': DUMP_PROTOCOL,
            'content': [cls.__pack_entry(i) for i in doc]
        }

    @classmethod
    def from_dump(cls, dump: _DesktopDump) -> DesktopDocument:
        if not isinstance(dump, dict) or dump.get('protocol') != DUMP_PROTOCOL:
            raise InvalidDesktopDump(
                f'dump protocol must be {DUMP_PROTOCOL}.')
        return DesktopDocument(
            content=cls.__unpack_nodes(dump.get('content', []), True))

    @abstractmethod
    def _load(self, fp: TextIOWrapper) -> _DesktopDump:
        raise NotImplementedError

    @abstractmethod
    def _dump(self, dump: _DesktopDump, fp: TextIOWrapper) -> None:
        raise NotImplementedError

    def read(self) -> DesktopDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self.from_dump(self._load(fp))

    def write(self, instance: DesktopDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            self._dump(self.to_dump(instance), fp)


class DesktopJsonParser(_StructuredParser):
    def __init__(
        self, filename: str, encoding: str = 'utf-8', indent: int = 2
    ) -> None:
        super().__init__(filename, encoding)
        self._indent = indent

    def _load(self, fp: TextIOWrapper) -> _DesktopDump:
        return json.load(fp)

    def _dump(self, dump: _DesktopDump, fp: TextIOWrapper) -> None:
        json.dump(dump, fp, ensure_ascii=False, indent=self._indent)


class DesktopYamlParser(_StructuredParser):
    """Same tree as `DesktopJsonParser`, but YAML (block style, ordered keys)."""

    def _load(self, fp: TextIOWrapper) -> _DesktopDump:
        return yaml.safe_load(fp)

    def _dump(self, dump: _DesktopDump, fp: TextIOWrapper) -> None:
        yaml.safe_dump(dump, fp, allow_unicode=True, sort_keys=False)
