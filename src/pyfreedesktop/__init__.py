# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 20:58:16
# @Author : Kariko Lin

import logging

from .desktop import (
    BlankComment,
    ContentEntry,
    DesktopDocument,
    DesktopFileParser,
    DesktopJsonParser,
    DesktopYamlParser,
    Group,
    Locale,
    LocaleMatcher,
    TextComment,
    parse,
    render
)
from .errors import (
    DateFormatError,
    DateParseError,
    DesktopEntryError,
    EntryNotFound,
    InvalidDesktopDump,
    InvalidDesktopEntry,
    NotAsciiError
)
from .helpers import AsciiString, TrashFile

__all__ = [
    'DesktopDocument', 'Group', 'ContentEntry',
    'TextComment', 'BlankComment', 'Locale', 'LocaleMatcher',
    'parse', 'render',
    'DesktopFileParser', 'DesktopJsonParser', 'DesktopYamlParser',
    'TrashFile', 'AsciiString',
    'DesktopEntryError', 'InvalidDesktopEntry', 'InvalidDesktopDump',
    'EntryNotFound', 'NotAsciiError', 'DateParseError', 'DateFormatError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
