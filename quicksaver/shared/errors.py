from __future__ import annotations


class QuicksaverError(Exception):
    """Base class for errors raised by the watchdog."""


class ConfigError(QuicksaverError):
    """The configuration file could not be read or failed validation."""


class SaveDirectoryMissingError(QuicksaverError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Save directory {path} does not exist")
        self.path = path


class UnsupportedPlatformError(QuicksaverError):
    pass


class ForegroundWindowError(QuicksaverError):
    """The focused window (or the process owning it) could not be resolved."""


class CopyError(QuicksaverError):
    def __init__(self, source: str, dest: str, reason: str) -> None:
        super().__init__(f"Failed to copy {source} to {dest}: {reason}")
        self.source = source
        self.dest = dest
        self.reason = reason
