from __future__ import annotations

import ctypes
import logging
import sys
import time
from typing import Protocol

from quicksaver.shared.errors import UnsupportedPlatformError

log = logging.getLogger(__name__)

KEYEVENTF_KEYUP = 0x0002
MAPVK_VK_TO_VSC = 0

_NAMED_KEYS = {
    "ENTER": 0x0D,
    "ESCAPE": 0x1B,
    "SPACE": 0x20,
    "TAB": 0x09,
}


def virtual_key_code(key: str) -> int:
    """Translate "F5", "Q", "7", "ENTER"... into a Windows virtual-key code."""
    name = key.strip().upper()
    if len(name) >= 2 and name[0] == "F" and name[1:].isdigit():
        n = int(name[1:])
        if 1 <= n <= 24:
            return 0x70 + n - 1
    if len(name) == 1 and (name.isdigit() or "A" <= name <= "Z"):
        return ord(name)
    if name in _NAMED_KEYS:
        return _NAMED_KEYS[name]
    raise ValueError(f"Unsupported key: {key!r}")


class SaveTrigger(Protocol):
    def press_and_release(self, key: str, hold_ms: int) -> None:
        ...


class Win32KeyboardTrigger:
    """Sends a key down / key up pair to whichever window has focus."""

    def __init__(self) -> None:
        if sys.platform != "win32":
            raise UnsupportedPlatformError("Keystroke injection is only implemented for Windows")
        self._user32 = ctypes.windll.user32

    def press_and_release(self, key: str, hold_ms: int) -> None:
        vk = virtual_key_code(key)
        # Games reading raw input ignore events without a hardware scan code
        scan = self._user32.MapVirtualKeyW(vk, MAPVK_VK_TO_VSC)
        self._user32.keybd_event(vk, scan, 0, 0)
        time.sleep(hold_ms / 1000.0)
        self._user32.keybd_event(vk, scan, KEYEVENTF_KEYUP, 0)
        log.debug("Sent %s (vk=0x%02X, scan=0x%02X, hold=%dms)", key, vk, scan, hold_ms)
