# -*- encoding: utf-8 -*-
# @File   : locales.py
# @Time   : 2024/10/13 00:12:47
# @Author : Kariko Lin

"""Locale tags attached to keys, like `Name[sr_RS@latin]`.

The syntax is `lang_COUNTRY.ENCODING@MODIFIER`, where only `lang` is required.
"""

from dataclasses import dataclass


def _upper(tag: str | None) -> str | None:
    return None if tag is None else tag.upper()


# no structural `eq` here: comparing locales always goes through a mask,
# and `==` is just the mask with every field significant.
@dataclass(frozen=True, eq=False)
class Locale:
    lang: str
    country: str | None = None
    encoding: str | None = None
    modifier: str | None = None

    @classmethod
    def parse(cls, text: str) -> 'Locale':
        """解析方括号内的 locale 文本（不含方括号）。

        不认识的写法也不会报错，整段都会落到`lang`里。
        """
        rest, _, modifier = text.partition('@')
        rest, _, encoding = rest.partition('.')
        lang, _, country = rest.partition('_')
        return cls(lang, country or None, encoding or None, modifier or None)

    def agrees(
        self, other: 'Locale', *,
        country: bool = True,
        encoding: bool = True,
        modifier: bool = True
    ) -> bool:
        """Compare with `other` on language plus the fields flagged True."""
        if self.lang != other.lang:
            return False
        if country and _upper(self.country) != _upper(other.country):
            return False
        if encoding and self.encoding != other.encoding:
            return False
        return not modifier or self.modifier == other.modifier

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return self is other or self.agrees(other)

    def __hash__(self) -> int:
        return hash((self.lang, _upper(self.country),
                     self.encoding, self.modifier))

    def __str__(self) -> str:
        ret = self.lang
        if self.country is not None:
            ret += f'_{self.country.upper()}'
        if self.encoding is not None:
            ret += f'.{self.encoding}'
        if self.modifier is not None:
            ret += f'@{self.modifier}'
        return ret


@dataclass(frozen=True)
class LocaleMatcher:
    """Significance mask for locale-aware lookups.

    Language is always significant. An entry without any locale matches too,
    so the plain `Name=` acts as the fallback of `Name[de]=`.
    """
    locale: Locale
    country: bool = True
    encoding: bool = True
    modifier: bool = True

    def matches(self, other: Locale | None) -> bool:
        if other is None:
            return True
        return self.locale.agrees(
            other,
            country=self.country,
            encoding=self.encoding,
            modifier=self.modifier)
