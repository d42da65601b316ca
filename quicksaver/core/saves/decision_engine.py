"""
Per-tick decisions about the current quicksave.

States are implicit in DecisionState.last_archived_timestamp:
UNSEEDED (None) -> SEEDED (timestamp of the last quicksave we consider handled)

A quicksave is "changed" when its mtime differs from the seeded/archived
timestamp. The first quicksave ever seen only seeds the baseline, so saves that
existed before the watchdog started are not archived.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from quicksaver.core.input.save_trigger import SaveTrigger
from quicksaver.shared.config import AppConfig
from quicksaver.shared.errors import CopyError

from .archive_namer import next_archive_path
from .copier import copy_exclusive
from .types import Decision, DecisionState, QuicksaveObservation

log = logging.getLogger(__name__)

Copier = Callable[[str, str], None]


def _describe_age(observation: QuicksaveObservation, now: float) -> str:
    elapsed = now - observation.last_modified
    try:
        age = timedelta(seconds=round(elapsed))
        at = datetime.fromtimestamp(observation.last_modified).strftime("%Y-%m-%dT%H:%M:%S")
    except (OverflowError, OSError, ValueError):
        # mtime outside what datetime can represent; still report the raw age
        return f"modified {elapsed:.0f}s ago"
    return f"modified {age} ago (at {at})"


class DecisionEngine:
    def __init__(
        self,
        config: AppConfig,
        trigger: SaveTrigger,
        copier: Copier = copy_exclusive,
        state: Optional[DecisionState] = None,
    ) -> None:
        self._cfg = config
        self._trigger = trigger
        self._copier = copier
        self.state = state if state is not None else DecisionState()

    def evaluate(
        self,
        observation: Optional[QuicksaveObservation],
        filenames: Sequence[str],
        now: float,
    ) -> Decision:
        """
        Run the seed / archive / trigger decisions for one tick.

        filenames is the full listing of the save directory for this tick; it is
        only used to pick the next archive number. Never raises for copy or
        trigger failures.
        """
        if observation is None:
            return Decision()

        if self.state.last_archived_timestamp is None:
            self.state.last_archived_timestamp = observation.last_modified
            log.info(
                "Baseline set to '%s' (%s)",
                os.path.basename(observation.path), _describe_age(observation, now),
            )
            return Decision(seeded=True)

        archived_to: Optional[str] = None
        archive_error: Optional[str] = None
        if self._cfg.archive_copy_enabled and observation.last_modified != self.state.last_archived_timestamp:
            archived_to, archive_error = self._archive(observation, filenames, now)

        triggered = False
        if self._cfg.save_trigger_enabled and now - observation.last_modified >= self._cfg.save_trigger_interval:
            triggered = self._fire_trigger(observation, now)

        return Decision(archived_to=archived_to, archive_error=archive_error, triggered=triggered)

    def _archive(
        self, observation: QuicksaveObservation, filenames: Sequence[str], now: float
    ) -> tuple[Optional[str], Optional[str]]:
        dest = next_archive_path(observation.path, filenames)
        log.info(
            "Copying '%s' to '%s' because quicksave was %s",
            observation.path, dest, _describe_age(observation, now),
        )
        try:
            self._copier(observation.path, dest)
        except CopyError as e:
            # Baseline stays put so the same change is retried next tick
            if isinstance(e.__cause__, FileExistsError):
                log.warning(
                    "Archive target '%s' already exists and will not be overwritten; "
                    "quicksave names without a '_' suffix never advance the Save<N> number",
                    dest,
                )
            else:
                log.warning("Archive copy failed, will retry: %s", e)
            return None, str(e)

        self.state.last_archived_timestamp = observation.last_modified
        return dest, None

    def _fire_trigger(self, observation: QuicksaveObservation, now: float) -> bool:
        log.info(
            "Sending %s to %s because quicksave was %s",
            self._cfg.quicksave_key, self._cfg.process_name, _describe_age(observation, now),
        )
        try:
            self._trigger.press_and_release(self._cfg.quicksave_key, self._cfg.key_hold_ms)
        except Exception:
            log.exception("Failed to send %s", self._cfg.quicksave_key)
            return False
        return True
