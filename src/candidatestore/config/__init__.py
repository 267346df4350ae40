"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed configuration loader rooted at a base directory."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    @classmethod
    def for_file(cls, path: str | Path) -> tuple["ConfigManager", str]:
        """Return a manager for the file's directory and the file's config name."""
        path = Path(path)
        return cls(path.parent), path.stem

    def load(self, name: str) -> Any:
        """Load a YAML configuration by name without file extension."""
        path = self._resolve(name)
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)

    def load_app_config(self, name: str) -> AppConfig:
        """Load and validate an application configuration."""
        return load_config(self.load(name))

    def _resolve(self, name: str) -> Path:
        for suffix in (".yaml", ".yml"):
            path = self._base_path / f"{name}{suffix}"
            if path.exists():
                return path
        raise FileNotFoundError(f"No configuration named {name!r} under {self._base_path}")


__all__ = ["ConfigManager"]
