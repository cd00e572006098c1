"""Shared fixtures for quicktodo tests."""

from __future__ import annotations

import json
import os
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console

from quicktodo.config import DisplayConfig
from quicktodo.store import TaskStore
from quicktodo.ui import ConsoleUI

FIXED_NOW = datetime(2025, 1, 10, 10, 0, 0)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_config_dir(temp_project: Path) -> Path:
    """Create a temporary .quicktodo directory."""
    config_dir = temp_project / ".quicktodo"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "seed_sample_data": False,
        "categories": ["Home", "Garden"],
        "tags": ["soon", "later"],
        "display": {"date_format": "%d/%m/%Y", "message_delay": 0, "error_delay": 0},
        "log_level": "INFO",
    }


@pytest.fixture
def sample_config_file(temp_config_dir: Path, sample_config_data: dict) -> Path:
    """Write the sample configuration to .quicktodo/config.json."""
    config_path = temp_config_dir / "config.json"
    config_path.write_text(json.dumps(sample_config_data))
    return config_path


@pytest.fixture
def fixed_now() -> datetime:
    """The time every test store reports as now."""
    return FIXED_NOW


@pytest.fixture
def store() -> TaskStore:
    """An empty store with a pinned clock."""
    return TaskStore(clock=lambda: FIXED_NOW)


@pytest.fixture
def seeded_store() -> TaskStore:
    """A store holding the three sample tasks."""
    return TaskStore(seed=True, clock=lambda: FIXED_NOW)


@pytest.fixture
def record_console() -> Console:
    """A wide, uncoloured console that records what is printed."""
    return Console(record=True, width=120, color_system=None, highlight=False)


@pytest.fixture
def ui(record_console: Console) -> ConsoleUI:
    """A ConsoleUI that never sleeps."""
    return ConsoleUI(
        console=record_console,
        display=DisplayConfig(message_delay=0, error_delay=0),
        sleep=lambda _: None,
    )
