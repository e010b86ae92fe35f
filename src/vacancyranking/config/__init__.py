"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed configuration loader."""

    EXTENSIONS = (".yaml", ".yml")

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        for extension in self.EXTENSIONS:
            path = self._base_path / f"{name}{extension}"
            if path.exists():
                return self.load_file(path)
        raise FileNotFoundError(f"No configuration named {name!r} in {self._base_path}")

    def load_app_config(self, name: str) -> AppConfig:
        return load_config(self.load(name))

    @staticmethod
    def load_file(path: str | Path) -> dict[str, Any]:
        with Path(path).open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}


__all__ = ["ConfigManager"]
