# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/15 20:46:19
# @Author : Kariko Lin

from .ascii import AsciiString
from .trash import TrashFile
