# -*- encoding: utf-8 -*-
# @File   : host.py
# @Time   : 2026/10/15 23:05:12
# @Author : Contributors

"""What the host OS tells about itself.

Each probe is a thin wrapper over one OS facility (environment,
registry, kernel32). When the host can't answer, `None` is returned
instead of raising, so callers could carry on with a default.
"""

import logging
import ntpath
import os
import platform
import struct
import sys
from ctypes import byref, c_uint, create_unicode_buffer

from .version import Version, parse_flexible_version

_64BIT_ARCHS = ('AMD64', 'ARM64', 'IA64')

# GetFirmwareType() results
_FIRMWARE_BIOS = 1
_FIRMWARE_UEFI = 2
_ERROR_INVALID_FUNCTION = 1


def _is_windows() -> bool:
    return sys.platform == 'win32'


def get_os_version() -> Version | None:
    """e.g. `10.0.19045` on Windows, `6.1.0` of `6.1.0-13-amd64` on Linux."""
    release = platform.version() if _is_windows() else platform.release()
    return parse_flexible_version(release).version


def is_64bit_process() -> bool:
    return struct.calcsize('P') == 8


def is_64bit_os() -> bool:
    if _is_windows():
        # a 32-bit process on 64-bit Windows only sees the real one in W6432.
        arch = (os.environ.get('PROCESSOR_ARCHITEW6432')
                or os.environ.get('PROCESSOR_ARCHITECTURE', ''))
        return arch.upper() in _64BIT_ARCHS
    machine = platform.machine().lower()
    return machine.endswith('64') or machine == 's390x'


def _windows_dir() -> str | None:
    return os.environ.get('SystemRoot') or os.environ.get('windir')


def get_command_prompt_path() -> str | None:
    if not _is_windows():
        return os.environ.get('SHELL')
    if (comspec := os.environ.get('ComSpec')):
        return comspec
    if (windir := _windows_dir()) is None:
        return None
    return ntpath.join(windir, 'System32', 'cmd.exe')


def get_native_system_path() -> str | None:
    """`System32` as the OS sees it, despite WOW64 redirection."""
    if not _is_windows() or (windir := _windows_dir()) is None:
        return None
    if is_64bit_os() and not is_64bit_process():
        return ntpath.join(windir, 'Sysnative')
    return ntpath.join(windir, 'System32')


def _kernel32():
    # last error is only reliable through ctypes' own copy of it.
    from ctypes import WinDLL
    return WinDLL('kernel32', use_last_error=True)


def is_uefi_boot() -> bool | None:
    if _is_windows():
        from ctypes import get_last_error
        kernel32 = _kernel32()
        try:
            firmware = c_uint(0)
            if not kernel32.GetFirmwareType(byref(firmware)):
                return None
            return firmware.value == _FIRMWARE_UEFI
        except AttributeError:
            # before Windows 8, only legacy BIOS fails this way.
            logging.debug(
                'GetFirmwareType() unavailable, probing firmware vars.')
            kernel32.GetFirmwareEnvironmentVariableW(
                '', '{00000000-0000-0000-0000-000000000000}', None, 0)
            return get_last_error() != _ERROR_INVALID_FUNCTION
    if sys.platform.startswith('linux'):
        return os.path.isdir('/sys/firmware/efi')
    return None


def get_short_path(path: str) -> str | None:
    """DOS 8.3 form of an existing path, like `C:\\PROGRA~1`.

    Hosts without 8.3 names just get the absolute path back.
    """
    if not os.path.exists(path):
        return None
    path = os.path.abspath(path)
    if not _is_windows():
        return path

    from ctypes import get_last_error
    kernel32 = _kernel32()
    size = kernel32.GetShortPathNameW(path, None, 0)
    if size == 0:
        logging.warning(
            f'No short path for "{path}", error {get_last_error()}.')
        return None
    buf = create_unicode_buffer(size)
    kernel32.GetShortPathNameW(path, buf, size)
    return buf.value


def read_registry_string(key: str, value: str) -> str | None:
    """Read a `REG_SZ` (or `REG_EXPAND_SZ`) value under `HKEY_LOCAL_MACHINE`."""
    if not _is_windows():
        return None

    import winreg
    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key) as hkey:
            data, kind = winreg.QueryValueEx(hkey, value)
    except OSError as e:
        logging.debug(f'HKLM\\{key}\\{value}: {e}')
        return None
    if kind not in (winreg.REG_SZ, winreg.REG_EXPAND_SZ):
        return None
    return data
