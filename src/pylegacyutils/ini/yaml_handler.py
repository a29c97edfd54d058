# -*- encoding: utf-8 -*-
# @File   : yaml_handler.py
# @Time   : 2026/10/14 22:48:31
# @Author : Contributors

"""YAML rendition of `IniDocument`, section mapping of key mappings:

    ```yaml
    Section:
      key233: val666
      bare_key: null
    ```
"""

import yaml

from ..abstract import FileHandler
from .consts import DEFAULT_NULL_SECTION
from .model import IniDocument


class InvalidIniYaml(Exception):
    """The YAML is not a mapping of mappings."""
    pass


class IniYamlHandler(FileHandler[IniDocument]):
    def __init__(
        self, filename: str, encoding: str = 'utf-8', *,
        null_section: str = DEFAULT_NULL_SECTION
    ) -> None:
        super().__init__(filename, encoding)
        self._null_section = null_section

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            src = yaml.safe_load(fp)
        ret = IniDocument(self._null_section)
        if src is None:  # empty file
            return ret
        if not isinstance(src, dict):
            raise InvalidIniYaml(f'{self._fn}: top level is not a mapping.')
        for sect, pairs in src.items():
            this_sect = ret.setdefault(str(sect))
            if pairs is None:  # `Section:` with nothing below
                continue
            if not isinstance(pairs, dict):
                raise InvalidIniYaml(
                    f'{self._fn}: [{sect}] is not a mapping.')
            for k, v in pairs.items():
                # hand-written yaml may have ints or bools here.
                this_sect[str(k)] = None if v is None else str(v)
        return ret

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                instance.to_dict(), fp,
                allow_unicode=True,
                sort_keys=False,
                default_flow_style=False,
                indent=indent)
