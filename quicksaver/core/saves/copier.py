"""
Exclusive file copy used to archive quicksaves.

The source is opened so that nobody else may hold it at the same time: if the
game is still writing the quicksave the open fails immediately instead of
reading a half-written file or blocking. The destination is created
exclusively, so an existing save is never truncated.
"""

from __future__ import annotations

import contextlib
import ctypes
import logging
import os
import shutil
import sys
from typing import BinaryIO, Iterator

from quicksaver.shared.errors import CopyError

log = logging.getLogger(__name__)

# CreateFileW constants
GENERIC_READ = 0x80000000
FILE_SHARE_NONE = 0
OPEN_EXISTING = 3
FILE_ATTRIBUTE_NORMAL = 0x80
INVALID_HANDLE_VALUE = ctypes.c_void_p(-1).value


@contextlib.contextmanager
def _open_exclusive_win32(path: str) -> Iterator[BinaryIO]:
    import msvcrt
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    kernel32.CreateFileW.restype = wintypes.HANDLE
    kernel32.CreateFileW.argtypes = [
        wintypes.LPCWSTR, wintypes.DWORD, wintypes.DWORD, wintypes.LPVOID,
        wintypes.DWORD, wintypes.DWORD, wintypes.HANDLE,
    ]
    kernel32.CloseHandle.argtypes = [wintypes.HANDLE]

    handle = kernel32.CreateFileW(
        path, GENERIC_READ, FILE_SHARE_NONE, None, OPEN_EXISTING, FILE_ATTRIBUTE_NORMAL, None
    )
    if handle is None or handle == INVALID_HANDLE_VALUE:
        raise ctypes.WinError(ctypes.get_last_error())

    try:
        fd = msvcrt.open_osfhandle(handle, os.O_RDONLY | os.O_BINARY)
    except OSError:
        kernel32.CloseHandle(handle)
        raise
    with os.fdopen(fd, "rb") as f:
        yield f


@contextlib.contextmanager
def _open_exclusive_posix(path: str) -> Iterator[BinaryIO]:
    import fcntl

    with open(path, "rb") as f:
        # Non-blocking: raises BlockingIOError if someone else holds the lock
        fcntl.flock(f.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        try:
            yield f
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def open_exclusive(path: str) -> contextlib.AbstractContextManager[BinaryIO]:
    if sys.platform == "win32":
        return _open_exclusive_win32(path)
    return _open_exclusive_posix(path)


def copy_exclusive(source: str, dest: str) -> None:
    """Copy source to a new file dest. Raises CopyError on any failure."""
    try:
        with open_exclusive(source) as src:
            dst = open(dest, "xb")
            try:
                with dst:
                    shutil.copyfileobj(src, dst)
            except OSError:
                # Covers the final flush on close too; a truncated archive must not stay behind
                with contextlib.suppress(OSError):
                    dst.close()
                with contextlib.suppress(OSError):
                    os.remove(dest)
                raise
    except OSError as e:
        raise CopyError(source, dest, f"{type(e).__name__}: {e}") from e
    log.debug("Copied %s to %s", source, dest)
