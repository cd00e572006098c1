"""Configuration models for quicktodo."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from quicktodo.models import CATEGORIES, TAGS


class DisplayConfig(BaseModel):
    """Configuration for console output."""

    date_format: str = "%Y-%m-%d"
    message_delay: float = 1.0
    error_delay: float = 2.0


class TodoConfig(BaseModel):
    """Main configuration for quicktodo."""

    seed_sample_data: bool = True
    categories: list[str] = Field(default_factory=lambda: list(CATEGORIES))
    tags: list[str] = Field(default_factory=lambda: list(TAGS))
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @classmethod
    def load(cls, path: Path | None = None) -> TodoConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)


# Default config directory
QUICKTODO_DIR = Path(".quicktodo")
CONFIG_FILE = QUICKTODO_DIR / "config.json"
LOG_FILE = QUICKTODO_DIR / "quicktodo.log"
