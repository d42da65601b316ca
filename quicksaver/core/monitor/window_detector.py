"""
Active-window oracle: which game (if any) currently has keyboard focus.

The value reported is the title of the foreground window, which for a game is
its main window title ("Starfield"). The owning process is resolved through
psutil so that a window whose process has gone away is reported as a lookup
failure instead of a stale title.
"""

from __future__ import annotations

import ctypes
import logging
import sys
from abc import ABC, abstractmethod

import psutil

from quicksaver.shared.errors import ForegroundWindowError, UnsupportedPlatformError

log = logging.getLogger(__name__)


class ActiveWindowOracle(ABC):
    """Interface for finding out which process holds OS focus."""

    @abstractmethod
    def get_foreground_process_name(self) -> str:
        """Name to compare against the configured process_name. Raises ForegroundWindowError."""
        ...


class Win32ActiveWindowOracle(ActiveWindowOracle):
    def __init__(self) -> None:
        if sys.platform != "win32":
            raise UnsupportedPlatformError("Foreground window lookup is only implemented for Windows")
        from ctypes import wintypes

        self._user32 = ctypes.WinDLL("user32", use_last_error=True)
        self._user32.GetForegroundWindow.restype = wintypes.HWND
        self._user32.GetWindowThreadProcessId.argtypes = [wintypes.HWND, ctypes.POINTER(wintypes.DWORD)]
        self._user32.GetWindowThreadProcessId.restype = wintypes.DWORD
        self._user32.GetWindowTextLengthW.argtypes = [wintypes.HWND]
        self._user32.GetWindowTextW.argtypes = [wintypes.HWND, wintypes.LPWSTR, ctypes.c_int]
        self._pid_type = wintypes.DWORD

    def get_foreground_process_name(self) -> str:
        hwnd = self._user32.GetForegroundWindow()
        if not hwnd:
            raise ForegroundWindowError("No window currently has focus")

        pid = self._pid_type()
        self._user32.GetWindowThreadProcessId(hwnd, ctypes.byref(pid))
        try:
            exe = psutil.Process(pid.value).name()
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            raise ForegroundWindowError(f"Could not resolve process {pid.value} owning the focused window: {e}") from e

        length = self._user32.GetWindowTextLengthW(hwnd)
        buf = ctypes.create_unicode_buffer(length + 1)
        self._user32.GetWindowTextW(hwnd, buf, length + 1)
        log.debug("Foreground window '%s' (pid=%d, exe=%s)", buf.value, pid.value, exe)
        return buf.value
