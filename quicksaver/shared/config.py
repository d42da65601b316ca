from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from quicksaver.shared.paths import default_save_directory


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    save_directory: str = Field(default_factory=lambda: str(default_save_directory()))
    process_name: str = "Starfield"
    poll_interval: float = Field(default=10.0, gt=0)  # seconds
    save_trigger_enabled: bool = True
    save_trigger_interval: float = Field(default=120.0, ge=0)  # seconds
    archive_copy_enabled: bool = True
    quicksave_key: str = "F5"
    key_hold_ms: int = Field(default=200, ge=0)
