# tests/conftest.py
import importlib
from pathlib import Path

import pytest
import yaml


DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(scope="session")
def examples() -> list[dict]:
    raw = (DATA_DIR / "examples.yaml").read_text(encoding="utf-8")
    data = yaml.safe_load(raw) or {}
    items = data.get("examples", [])
    return [item for item in items if isinstance(item, dict)]


@pytest.fixture
def main_module(monkeypatch, tmp_path: Path):
    """
    Import the CLI module with SETTINGS_PATH redirected to a temporary file
    so tests never touch the real settings.yaml.
    """
    main = importlib.import_module("main")
    monkeypatch.setattr(main, "SETTINGS_PATH", str(tmp_path / "settings.yaml"), raising=False)
    return main
