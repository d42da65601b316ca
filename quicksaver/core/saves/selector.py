from __future__ import annotations

import logging
import os
from typing import Iterable

from .types import QuicksaveObservation, QuicksaveSelection, SaveFileInfo

log = logging.getLogger(__name__)

QUICKSAVE_PREFIX = "Quicksave0"


def quicksave_candidates(files: Iterable[SaveFileInfo]) -> list[SaveFileInfo]:
    """Files named like a quicksave, newest first. Ties keep scan order."""
    candidates = [f for f in files if os.path.basename(f.path).startswith(QUICKSAVE_PREFIX)]
    # sorted() is stable, so equal mtimes keep the order they were encountered in
    return sorted(candidates, key=lambda f: f.last_modified, reverse=True)


def select_quicksave(files: Iterable[SaveFileInfo]) -> QuicksaveSelection:
    candidates = quicksave_candidates(files)
    if not candidates:
        return QuicksaveSelection(observation=None, candidates=[])

    newest = candidates[0]
    if len(candidates) > 1:
        names = "\n  ".join(f"'{os.path.basename(c.path)}'" for c in candidates)
        log.info(
            "Found more than one quicksave file. Selected '%s' as it was most recently modified. "
            "Candidates were:\n  %s",
            os.path.basename(newest.path), names,
        )

    return QuicksaveSelection(
        observation=QuicksaveObservation(path=newest.path, last_modified=newest.last_modified),
        candidates=candidates,
    )
