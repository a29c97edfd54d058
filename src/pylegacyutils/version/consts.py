# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/12 21:03:11
# @Author : Contributors

from enum import Enum

INT32_MAX = 2147483647
UNSET = -1  # component not present, as [System.Version] does.

# major, minor, build, revision, plus anything beyond the revision.
LEFTOVER_SLOTS = 5
COMPONENTS = 4

# one of these is dropped between a salvaged number and its tail,
# like '4-beta3' => 4, 'beta3'.
SUFFIX_SEPARATORS = '-_+~ '


class VersionStatus(int, Enum):
    MALFORMED = -1
    OK = 0
    MAJOR_FAILED = 1
    MINOR_FAILED = 2
    BUILD_FAILED = 3
    REVISION_FAILED = 4
    OK_EXCESS = 5
