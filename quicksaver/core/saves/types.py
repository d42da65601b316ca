from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SaveFileInfo:
    """A file in the save directory as seen by one scan."""
    path: str
    last_modified: float  # epoch seconds


@dataclass(frozen=True)
class QuicksaveObservation:
    """The authoritative quicksave chosen for a tick."""
    path: str
    last_modified: float  # epoch seconds


@dataclass(frozen=True)
class QuicksaveSelection:
    observation: Optional[QuicksaveObservation]
    candidates: list[SaveFileInfo] = field(default_factory=list)  # newest first


@dataclass
class DecisionState:
    """
    Baseline for change detection, owned by DecisionEngine.

    None until the first quicksave is seen; afterwards it moves only when an
    archive copy succeeds.
    """
    last_archived_timestamp: Optional[float] = None


@dataclass(frozen=True)
class Decision:
    """What the engine did during a single tick."""
    seeded: bool = False
    archived_to: Optional[str] = None
    archive_error: Optional[str] = None
    triggered: bool = False
