# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/13 19:20:05
# @Author : Contributors

"""
Case-insensitive INI structure.

Both section and key lookups ignore case, just like Windows does
in `GetPrivateProfileString`. The case first written is kept for iteration.
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Iterator

from .consts import DEFAULT_NULL_SECTION


class IniSection(MutableMapping[str, str | None]):
    """INI 小节字典。

    Values are `str`, or `None` for a bare key without `=`.
    Overwriting an existing key is allowed, but gets logged with both values.
    """

    def __init__(
        self, name: str, /,
        pairs: Mapping[str, str | None] | None = None
    ) -> None:
        self.name = name
        self.__data: dict[str, str | None] = {}
        # to maintain original keys for iterating and saving.
        self.__keyproxy: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    def __getitem__(self, key: str) -> str | None:
        return self.__data[key.upper()]

    def __setitem__(self, key: str, value: str | None) -> None:
        if (idx := key.upper()) in self.__keyproxy:
            logging.warning(
                f'[{self.name}] already has "{self.__keyproxy[idx]}", '
                f'overwriting "{self.__data[idx]}" with "{value}".')
        else:
            self.__keyproxy[idx] = key
        self.__data[idx] = value

    def __delitem__(self, key: str) -> None:
        del self.__data[key.upper()]
        del self.__keyproxy[key.upper()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self.__data

    def __iter__(self) -> Iterator[str]:
        return iter(self.__keyproxy.values())

    def __len__(self) -> int:
        return len(self.__data)

    def __str__(self) -> str:
        return f'[{self.name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self))

    def to_dict(self) -> dict[str, str | None]:
        return dict(self.items())


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。

        ```ini
        key = val  ; before any section, goes to `self.null_section`.

        [Section]
        key233 = val666
        [SECTION]   ; the same one as above.
        KEY233 = val114514  ; overwrites `key233`, with a warning logged.
        ```
    """

    def __init__(self, null_section: str = DEFAULT_NULL_SECTION) -> None:
        self.null_section = null_section
        self.__raw: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key.upper()]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str | None]
    ) -> None:
        if key.upper() in self.__raw:
            logging.warning(f'Section [{key}] got replaced as a whole.')
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key.upper()] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key.upper()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter([i.name for i in self.__raw.values()])

    def __len__(self) -> int:
        return len(self.__raw)

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, str | None] | None = None
    ) -> IniSection:
        """Get section `key`, and add it first if missing."""
        if key.upper() not in self.__raw:
            self.__raw[key.upper()] = IniSection(key, default)
        return self.__raw[key.upper()]

    @property
    def header(self) -> IniSection | None:
        """Pairs not belonging to any section, if there were any."""
        return self.__raw.get(self.null_section.upper())

    def to_dict(self) -> dict[str, dict[str, str | None]]:
        return {k: v.to_dict() for k, v in self.items()}
