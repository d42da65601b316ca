"""
Poll loop for the quicksave watchdog.

Each tick: focus gate -> scan -> select -> decide. Ticks run synchronously on
the calling thread; stop() only ends the wait between ticks.
"""

from __future__ import annotations

import logging
import os
import threading
import time
from typing import Callable, Optional

from quicksaver.core.saves.decision_engine import DecisionEngine
from quicksaver.core.saves.scanner import list_files
from quicksaver.core.saves.selector import select_quicksave
from quicksaver.core.saves.types import SaveFileInfo
from quicksaver.shared.config import AppConfig
from quicksaver.shared.errors import ForegroundWindowError, SaveDirectoryMissingError

from .types import TickResult
from .window_detector import ActiveWindowOracle

log = logging.getLogger(__name__)

Scanner = Callable[[str], list[SaveFileInfo]]


class QuicksaveMonitor:
    def __init__(
        self,
        config: AppConfig,
        oracle: ActiveWindowOracle,
        engine: DecisionEngine,
        scanner: Scanner = list_files,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cfg = config
        self._oracle = oracle
        self._engine = engine
        self._scanner = scanner
        self._clock = clock
        self._stop_evt = threading.Event()

    @property
    def engine(self) -> DecisionEngine:
        return self._engine

    def stop(self) -> None:
        self._stop_evt.set()

    def run(self) -> None:
        """Sleep, tick, repeat until stop() is called. Raises only if the save directory is missing."""
        if not os.path.isdir(self._cfg.save_directory):
            raise SaveDirectoryMissingError(self._cfg.save_directory)

        log.info(
            "Watching '%s' every %.1fs for %s (copy=%s, save every %.0fs=%s)",
            self._cfg.save_directory, self._cfg.poll_interval, self._cfg.process_name,
            self._cfg.archive_copy_enabled, self._cfg.save_trigger_interval, self._cfg.save_trigger_enabled,
        )
        while not self._stop_evt.is_set():
            if self._stop_evt.wait(self._cfg.poll_interval):
                break
            try:
                self.tick()
            except Exception:
                log.exception("Monitor tick error")
        log.info("Watchdog stopped")

    def tick(self) -> TickResult:
        try:
            focused = self._oracle.get_foreground_process_name()
        except ForegroundWindowError as e:
            log.info("Skipping this update because the focused window could not be resolved: %s", e)
            return TickResult(status="FOCUS_UNKNOWN")

        if focused != self._cfg.process_name:
            log.info("Skipping this update because %s was not in focus", self._cfg.process_name)
            return TickResult(status="UNFOCUSED")

        try:
            files = self._scanner(self._cfg.save_directory)
        except OSError as e:
            log.warning("Skipping this update because '%s' could not be scanned: %s", self._cfg.save_directory, e)
            return TickResult(status="SCAN_FAILED")

        selection = select_quicksave(files)
        if selection.observation is None:
            log.info("Skipping this update because no quicksaves were found in '%s'", self._cfg.save_directory)
            return TickResult(status="NO_QUICKSAVE")

        decision = self._engine.evaluate(
            selection.observation,
            [os.path.basename(f.path) for f in files],
            self._clock(),
        )
        return TickResult(status="EVALUATED", observation=selection.observation, decision=decision)
