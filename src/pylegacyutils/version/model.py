# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 21:10:47
# @Author : Contributors

from re import compile as regex
from typing import NamedTuple

from .consts import COMPONENTS, INT32_MAX, UNSET, VersionStatus

_STRICT_COMPONENT = regex(r'[0-9]+')


class Version(NamedTuple):
    """A dotted version of up to 4 components.

    Unset components are `-1` and only ever trail the set ones,
    so `Version(1, 2)` reads as `1.2` and sorts before `1.2.0`.
    """
    major: int = UNSET
    minor: int = UNSET
    build: int = UNSET
    revision: int = UNSET

    @classmethod
    def parse(cls, text: str) -> 'Version':
        """Strict conversion: 1 to 4 dot-separated ASCII digit runs,
        each no greater than `INT32_MAX`.

        Raises:
            `ValueError` if `text` does not qualify.
        """
        if not isinstance(text, str):
            raise TypeError(f'expected str, got {type(text).__name__}')
        parts = text.split('.')
        if len(parts) > COMPONENTS:
            raise ValueError(f'too many components in "{text}"')
        values = []
        for i in parts:
            if not _STRICT_COMPONENT.fullmatch(i):
                raise ValueError(f'"{i}" is not a version component')
            significant = i.lstrip('0') or '0'
            if (len(significant) > len(str(INT32_MAX))
                    or int(significant) > INT32_MAX):
                raise ValueError(f'"{i}" exceeds {INT32_MAX}')
            values.append(int(significant))
        return cls(*values)

    @property
    def depth(self) -> int:
        """How many components are set."""
        return sum(1 for i in self if i != UNSET)

    def __str__(self) -> str:
        return '.'.join(str(i) for i in self if i != UNSET)


class FlexibleVersion(NamedTuple):
    """Outcome of `parse_flexible_version()`.

    `leftover` always has 5 slots: one per component, then the dotted
    segments beyond the revision. `version` is `None` only if malformed.
    """
    version: Version | None
    leftover: tuple[str, str, str, str, str]
    status: VersionStatus

    @property
    def ok(self) -> bool:
        return self.status in (VersionStatus.OK, VersionStatus.OK_EXCESS)
