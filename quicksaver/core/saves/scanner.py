from __future__ import annotations

import logging
import os

from .types import SaveFileInfo

log = logging.getLogger(__name__)


def list_files(directory: str) -> list[SaveFileInfo]:
    """Snapshot every regular file in directory with its last-modified time."""
    files: list[SaveFileInfo] = []
    with os.scandir(directory) as it:
        for entry in it:
            try:
                if not entry.is_file():
                    continue
                mtime = entry.stat().st_mtime
            except FileNotFoundError:
                # Removed between listing and stat
                continue
            files.append(SaveFileInfo(path=entry.path, last_modified=mtime))
    log.debug("Scanned %d files in %s", len(files), directory)
    return files
