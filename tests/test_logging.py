import logging
from logging.handlers import RotatingFileHandler

from quicksaver.core.logging_ import setup_logging


def test_setup_logging_adds_console_and_rotating_file(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging()

        assert root.level == logging.INFO
        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "Quicksaver" / "logs" / "quicksaver.log")
        assert len(root.handlers) == 2

        setup_logging()
        assert len(root.handlers) == 2
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
