from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from quicksaver.core.saves.types import Decision, QuicksaveObservation

TickStatus = Literal["UNFOCUSED", "FOCUS_UNKNOWN", "SCAN_FAILED", "NO_QUICKSAVE", "EVALUATED"]


@dataclass(frozen=True)
class TickResult:
    status: TickStatus
    observation: Optional[QuicksaveObservation] = None
    decision: Optional[Decision] = None
