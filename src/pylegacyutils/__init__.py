# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:01:52
# @Author : Contributors

import logging

from .ini import (
    IniDocument, IniParser, IniSection, IniStatus, IniYamlHandler,
    convert_ini_to_dict, parse_ini_text
)
from .version import (
    FlexibleVersion, Version, VersionStatus, parse_flexible_version
)

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'IniStatus', 'IniYamlHandler',
    'convert_ini_to_dict', 'parse_ini_text',
    'Version', 'FlexibleVersion', 'VersionStatus', 'parse_flexible_version'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
