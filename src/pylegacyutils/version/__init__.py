# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:40:19
# @Author : Contributors

from .consts import INT32_MAX, UNSET, VersionStatus
from .model import FlexibleVersion, Version
from .parser import parse_flexible_version
