# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 21:16:53
# @Author : Contributors

from .consts import IniStatus
from .model import IniDocument, IniSection
from .parser import IniParser, convert_ini_to_dict, parse_ini_text
from .yaml_handler import IniYamlHandler, InvalidIniYaml
