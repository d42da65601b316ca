from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from quicksaver.shared.config import AppConfig
from quicksaver.shared.errors import ConfigError
from quicksaver.shared.paths import config_path

log = logging.getLogger(__name__)


class ConfigStore:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else config_path()

    def load(self) -> AppConfig:
        if not self._path.exists():
            cfg = AppConfig()
            log.info("No config found, writing default settings to %s", self._path)
            self.save(cfg)
            return cfg

        log.info("Loading config from %s", self._path)
        try:
            raw = self._path.read_text(encoding="utf-8")
            data: Any = json.loads(raw)
            return AppConfig.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            raise ConfigError(f"Invalid config file {self._path}: {e}") from e

    def save(self, cfg: AppConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(cfg.model_dump_json(indent=2), encoding="utf-8")

    def path(self) -> str:
        return str(self._path)
