# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 21:36:02
# @Author : Contributors

"""Lenient version strings.

Vendors stamp their products with whatever they like:
`1.2.3.4-beta3`, `10.0.19045.3693.vb_release`, `2147483700`...
`parse_flexible_version()` keeps as much of such a string as
a 4-component version can hold, and hands back the rest.

e.g. `parse_flexible_version('1.2.3.4-beta3')` =>
- version `1.2.3.4`
- leftover `('', '', '', 'beta3', '')`
- status `REVISION_FAILED`
"""

import logging
from decimal import Decimal, localcontext
from re import compile as regex

from .consts import (
    COMPONENTS,
    INT32_MAX,
    LEFTOVER_SLOTS,
    SUFFIX_SEPARATORS,
    UNSET,
    VersionStatus,
)
from .model import FlexibleVersion, Version

_LEADING_DIGITS = regex(r'[0-9]+')


def _clamp(digits: str) -> tuple[int, str]:
    """Returns the usable value, and what exceeds `INT32_MAX` (if any)."""
    significant = digits.lstrip('0') or '0'
    if (len(significant) <= len(str(INT32_MAX))
            and int(significant) <= INT32_MAX):
        return int(significant), ''
    # int() refuses overlong digit strings, Decimal won't.
    with localcontext() as ctx:
        ctx.prec = len(significant) + 1
        overflow = Decimal(significant) - INT32_MAX
    return INT32_MAX, str(overflow)


def _salvage(segment: str) -> tuple[int, str]:
    """Take the leading digit run of a segment as its value.

    Returns:
        - the value, or `UNSET` if there's no leading digit at all.
        - the text which couldn't get into the value.
    """
    if (m := _LEADING_DIGITS.match(segment)) is None:
        return UNSET, segment
    value, overflow = _clamp(m.group())
    tail = segment[m.end():]
    if overflow:
        return value, overflow + tail
    if tail and tail[0] in SUFFIX_SEPARATORS:
        tail = tail[1:]
    return value, tail


def _strict_prefix(segments: list[str]) -> tuple[Version, int]:
    """Drop segments from the right until the rest converts strictly."""
    count = len(segments) - 1
    while count > 0:
        try:
            return Version.parse('.'.join(segments[:count])), count
        except ValueError:
            count -= 1
    return Version(), 0


def parse_flexible_version(text: str) -> FlexibleVersion:
    """Convert any string into a best-effort `Version`.

    Never raises on bad input. See `VersionStatus` for outcomes:
        - `OK`: up to 4 clean components.
        - `OK_EXCESS`: 4 clean components, `leftover[4]` holds the rest.
        - `*_FAILED`: that component was salvaged from its leading digits
          (or left unset), the ones after it are all unset.
          Whatever didn't fit goes into `leftover` slot by slot.
        - `MALFORMED`: not even a leading digit.
    """
    if not isinstance(text, str):
        raise TypeError(f'expected str, got {type(text).__name__}')
    text = text.strip()
    segments = text.split('.')
    head, excess = segments[:COMPONENTS], segments[COMPONENTS:]
    leftover = [''] * LEFTOVER_SLOTS
    leftover[-1] = '.'.join(excess)

    try:
        version = Version.parse('.'.join(head))
    except ValueError:
        pass
    else:
        return FlexibleVersion(
            version, tuple(leftover),
            # a lone trailing dot leaves nothing in excess.
            VersionStatus.OK_EXCESS if leftover[-1] else VersionStatus.OK)

    prefix, failed = _strict_prefix(head)
    value, leftover[failed] = _salvage(head[failed])
    if failed == 0 and value == UNSET:
        logging.debug(f'"{text}" does not look like a version at all.')
        return FlexibleVersion(
            None, (text, '', '', '', ''), VersionStatus.MALFORMED)

    components = list(prefix[:failed]) + [value]
    components.extend([UNSET] * (COMPONENTS - len(components)))
    # no salvage past the first failure, just keep what was there.
    for i in range(failed + 1, len(head)):
        leftover[i] = head[i]
    return FlexibleVersion(
        Version(*components), tuple(leftover), VersionStatus(failed + 1))
