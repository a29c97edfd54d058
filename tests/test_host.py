from __future__ import annotations

import ctypes
import sys
from pathlib import Path

import pytest

from pylegacyutils import host
from pylegacyutils.version import Version


@pytest.fixture
def windows(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setattr(host, '_is_windows', lambda: True)
    # ctypes only defines this name on Windows itself.
    monkeypatch.setattr(ctypes, 'get_last_error', lambda: 0, raising=False)
    for i in ('ComSpec', 'SystemRoot', 'windir',
              'PROCESSOR_ARCHITECTURE', 'PROCESSOR_ARCHITEW6432'):
        monkeypatch.delenv(i, raising=False)
    return monkeypatch


@pytest.fixture
def posix(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setattr(host, '_is_windows', lambda: False)
    return monkeypatch


def test_os_version_from_kernel_release(posix: pytest.MonkeyPatch) -> None:
    posix.setattr(host.platform, 'release', lambda: '6.18.44-fc-v139')
    assert host.get_os_version() == Version(6, 18, 44)


def test_os_version_on_windows(windows: pytest.MonkeyPatch) -> None:
    windows.setattr(host.platform, 'version', lambda: '10.0.19045')
    assert host.get_os_version() == Version(10, 0, 19045)


def test_os_version_unknown(posix: pytest.MonkeyPatch) -> None:
    posix.setattr(host.platform, 'release', lambda: '')
    assert host.get_os_version() is None


def test_64bit_os_on_windows_wow64(windows: pytest.MonkeyPatch) -> None:
    windows.setenv('PROCESSOR_ARCHITECTURE', 'x86')
    windows.setenv('PROCESSOR_ARCHITEW6432', 'AMD64')
    assert host.is_64bit_os()


def test_32bit_os_on_windows(windows: pytest.MonkeyPatch) -> None:
    windows.setenv('PROCESSOR_ARCHITECTURE', 'x86')
    assert not host.is_64bit_os()


@pytest.mark.parametrize('machine, expected', [
    ('x86_64', True), ('aarch64', True), ('i686', False), ('armv7l', False)])
def test_64bit_os_on_posix(
        posix: pytest.MonkeyPatch, machine: str, expected: bool) -> None:
    posix.setattr(host.platform, 'machine', lambda: machine)
    assert host.is_64bit_os() is expected


def test_64bit_process() -> None:
    assert host.is_64bit_process() is (sys.maxsize > 2 ** 32)


def test_command_prompt_from_comspec(windows: pytest.MonkeyPatch) -> None:
    windows.setenv('ComSpec', 'D:\\shell\\cmd.exe')
    assert host.get_command_prompt_path() == 'D:\\shell\\cmd.exe'


def test_command_prompt_from_system_root(windows: pytest.MonkeyPatch) -> None:
    windows.setenv('SystemRoot', 'C:\\Windows')
    assert host.get_command_prompt_path() == 'C:\\Windows\\System32\\cmd.exe'


def test_command_prompt_unknown(windows: pytest.MonkeyPatch) -> None:
    assert host.get_command_prompt_path() is None


def test_command_prompt_on_posix(posix: pytest.MonkeyPatch) -> None:
    posix.setenv('SHELL', '/bin/zsh')
    assert host.get_command_prompt_path() == '/bin/zsh'


@pytest.mark.parametrize('os64, proc64, expected', [
    (True, False, 'C:\\Windows\\Sysnative'),
    (True, True, 'C:\\Windows\\System32'),
    (False, False, 'C:\\Windows\\System32'),
])
def test_native_system_path(
        windows: pytest.MonkeyPatch,
        os64: bool, proc64: bool, expected: str) -> None:
    windows.setenv('windir', 'C:\\Windows')
    windows.setattr(host, 'is_64bit_os', lambda: os64)
    windows.setattr(host, 'is_64bit_process', lambda: proc64)
    assert host.get_native_system_path() == expected


def test_native_system_path_off_windows(posix: pytest.MonkeyPatch) -> None:
    assert host.get_native_system_path() is None


def test_short_path_off_windows(
        posix: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / 'Program Files'
    target.mkdir()
    assert host.get_short_path(str(target)) == str(target)
    assert host.get_short_path(str(tmp_path / 'missing')) is None


def test_registry_off_windows(posix: pytest.MonkeyPatch) -> None:
    assert host.read_registry_string(
        'SOFTWARE\\Microsoft\\Windows NT\\CurrentVersion',
        'ProductName') is None


@pytest.mark.skipif(not sys.platform.startswith('linux'), reason='linux only')
def test_uefi_on_linux(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(host.os.path, 'isdir', lambda p: p == '/sys/firmware/efi')
    assert host.is_uefi_boot() is True


class _LegacyKernel32:
    """kernel32 before Windows 8, without GetFirmwareType()."""
    def GetFirmwareEnvironmentVariableW(self, *args: object) -> int:
        return 0


class _Kernel32(_LegacyKernel32):
    def __init__(self, firmware: int) -> None:
        self._firmware = firmware

    def GetFirmwareType(self, ptr) -> int:  # type: ignore[no-untyped-def]
        ptr._obj.value = self._firmware
        return 1


@pytest.mark.parametrize('firmware, expected', [(2, True), (1, False)])
def test_uefi_from_firmware_type(
        windows: pytest.MonkeyPatch, firmware: int, expected: bool) -> None:
    windows.setattr(host, '_kernel32', lambda: _Kernel32(firmware))
    assert host.is_uefi_boot() is expected


@pytest.mark.parametrize('last_error, expected', [(1, False), (998, True)])
def test_uefi_from_last_error_before_windows8(
        windows: pytest.MonkeyPatch, last_error: int, expected: bool) -> None:
    windows.setattr(host, '_kernel32', lambda: _LegacyKernel32())
    windows.setattr(ctypes, 'get_last_error', lambda: last_error,
                    raising=False)
    assert host.is_uefi_boot() is expected
