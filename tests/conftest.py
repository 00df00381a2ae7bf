"""Shared pytest fixtures for the datafilter test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from datafilter.config.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration lookup at an empty location and reset the cached instance."""

    config_path = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv("DATAFILTER_CONFIG", str(config_path))
    Config.reset()
    try:
        yield config_path
    finally:
        Config.reset()


@pytest.fixture
def write_input(tmp_path: Path):
    """Return a helper that writes an input file under ``tmp_path``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write
