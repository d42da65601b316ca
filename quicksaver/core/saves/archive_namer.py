from __future__ import annotations

import os
import re
from typing import Iterable

from .selector import QUICKSAVE_PREFIX

# Searched rather than anchored so renamed copies like "Save12_x.sfs.bak" still reserve 12
ARCHIVE_PATTERN = re.compile(r"Save(\d+)_.*\.sfs")


def highest_save_number(filenames: Iterable[str]) -> int:
    highest = 0
    for name in filenames:
        match = ARCHIVE_PATTERN.search(os.path.basename(name))
        if match:
            highest = max(highest, int(match.group(1)))
    return highest


def next_archive_name(quicksave_name: str, filenames: Iterable[str]) -> str:
    """
    Name for the next permanent save.

    The first "Quicksave0" in the quicksave's filename becomes "Save<N+1>",
    where N is the highest number among existing Save<N>_*.sfs files (0 if none).
    """
    n = highest_save_number(filenames) + 1
    return quicksave_name.replace(QUICKSAVE_PREFIX, f"Save{n}", 1)


def next_archive_path(quicksave_path: str, filenames: Iterable[str]) -> str:
    directory, name = os.path.split(quicksave_path)
    return os.path.join(directory, next_archive_name(name, filenames))
