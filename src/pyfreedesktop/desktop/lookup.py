# -*- encoding: utf-8 -*-
# @File   : lookup.py
# @Time   : 2024/10/13 00:48:29
# @Author : Kariko Lin

"""Ordered, duplicate-friendly collections of desktop entry nodes.

Both the document (groups and comments) and a group (entries and comments)
are plain lists underneath. Keys may repeat, and every lookup here returns
the *first* one, just like what desktop environments actually read.
"""

from abc import abstractmethod
from collections.abc import Iterable, Iterator, MutableSequence
from typing import Protocol, SupportsIndex, TypeVar, overload

from ..errors import EntryNotFound


class Classified(Protocol):
    @property
    def is_blank(self) -> bool: ...

    @property
    def is_comment(self) -> bool: ...


T = TypeVar('T', bound=Classified)


class EntryList(MutableSequence[T]):
    # filled by subclasses (dataclass field).
    content: list[T]

    @staticmethod
    @abstractmethod
    def _key_of(item: T) -> str | None:
        """Lookup key of `item`, or None for things never looked up."""
        raise NotImplementedError

    @overload
    def __getitem__(self, index: SupportsIndex) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: SupportsIndex | slice) -> T | list[T]:
        return self.content[index]

    @overload
    def __setitem__(self, index: SupportsIndex, value: T) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, index, value) -> None:
        self.content[index] = value

    def __delitem__(self, index: SupportsIndex | slice) -> None:
        del self.content[index]

    def __len__(self) -> int:
        return len(self.content)

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def insert(self, index: int, value: T) -> None:
        self.content.insert(index, value)

    def find_one(self, key: str) -> T | None:
        """按键查找，返回*第一个*匹配项；找不到则返回`None`。"""
        for i in self.content:
            if self._key_of(i) == key:
                return i
        return None

    def require(self, key: str) -> T:
        """Same as `find_one()`, but a miss raises `EntryNotFound`."""
        if (ret := self.find_one(key)) is None:
            raise EntryNotFound(key)
        return ret

    # nodes are references already, edits on the result land in the tree.
    find_one_mut = find_one
    require_mut = require

    def without_comments(self) -> list[T]:
        return [i for i in self.content if not i.is_comment]

    def only_comments(self) -> list[T]:
        return [i for i in self.content if i.is_comment]
