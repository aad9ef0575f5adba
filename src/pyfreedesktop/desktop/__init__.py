# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 01:20:31
# @Author : Kariko Lin

from .grammar import DesktopGrammar, parse
from .locales import Locale, LocaleMatcher
from .model import (
    BlankComment,
    ContentEntry,
    DesktopDocument,
    Group,
    TextComment,
    render
)
from .parser import DesktopFileParser, DesktopJsonParser, DesktopYamlParser
