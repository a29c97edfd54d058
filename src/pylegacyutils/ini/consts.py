# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/13 19:12:40
# @Author : Contributors

from enum import Enum

DEFAULT_COMMENT_CHARS = ';#'
# section declaration could never be empty, thus impossible to clash.
DEFAULT_NULL_SECTION = '_'
DEFAULT_COMMENT_KEY_PREFIX = 'Comment'


# same numbers as Win32 system error codes.
class IniStatus(int, Enum):
    OK = 0
    FILE_NOT_FOUND = 2
    UNREADABLE = 5
