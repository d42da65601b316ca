import logging
import signal
import sys

from quicksaver.shared.errors import QuicksaverError
from quicksaver.shared.store import ConfigStore
from quicksaver.core.logging_ import setup_logging
from quicksaver.core.input.save_trigger import Win32KeyboardTrigger
from quicksaver.core.monitor.save_monitor import QuicksaveMonitor
from quicksaver.core.monitor.window_detector import Win32ActiveWindowOracle
from quicksaver.core.saves.decision_engine import DecisionEngine

log = logging.getLogger(__name__)


def build_monitor(store: ConfigStore) -> QuicksaveMonitor:
    cfg = store.load()
    engine = DecisionEngine(cfg, trigger=Win32KeyboardTrigger())
    return QuicksaveMonitor(cfg, oracle=Win32ActiveWindowOracle(), engine=engine)


def main() -> None:
    setup_logging()

    try:
        monitor = build_monitor(ConfigStore())
    except QuicksaverError as e:
        log.error("%s", e)
        sys.exit(1)

    # Ctrl+C ends the current wait; a running tick always finishes first
    def signal_handler(sig, frame):
        log.info("Received interrupt signal (Ctrl+C), shutting down...")
        monitor.stop()

    signal.signal(signal.SIGINT, signal_handler)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, signal_handler)

    try:
        monitor.run()
    except QuicksaverError as e:
        log.error("%s", e)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
