# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings and alert configuration."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from warmthalert.constants import DEFAULT_COOLDOWN_MS, DEFAULT_THRESHOLD, MAX_WARMTH, MIN_WARMTH
from warmthalert.logging import get_logger

logger = get_logger(__name__)


class AlertConfig(BaseModel):
    """User-settable alert configuration, read fresh on every tick."""

    threshold: int = Field(default=DEFAULT_THRESHOLD, ge=MIN_WARMTH, le=MAX_WARMTH)
    cooldown_ms: int = Field(default=DEFAULT_COOLDOWN_MS, ge=0)
    desktop_notify: bool = True
    play_sound: bool = True
    chat_echo: bool = True

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def from_yaml(cls, path: Path | str) -> AlertConfig:
        path = Path(path)
        logger.debug("loading_alert_config", path=str(path))
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(data)

    def to_yaml(self, path: Path | str) -> None:
        path = Path(path)
        logger.info("saving_alert_config", path=str(path))
        data = self.model_dump(mode="json")
        text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        path.write_text(text, encoding="utf-8")


class Settings(BaseSettings):
    log_level: str = "WARNING"
    alert: AlertConfig = Field(default_factory=AlertConfig)

    model_config = SettingsConfigDict(
        env_prefix="WARMTHALERT_",
        env_nested_delimiter="__",
        extra="ignore",
    )
