"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RankingConfig(BaseModel):
    as_of: str | None = None


class ValidationConfig(BaseModel):
    enabled: bool = True


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        ranking = self.ranking.model_dump(exclude_none=True)
        if ranking:
            settings["ranking"] = ranking
        settings["validation"] = self.validation.model_dump()
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValueError("Config must be a mapping")
    return AppConfig.model_validate(raw)
