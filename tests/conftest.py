"""Shared fixtures for the folder-to-text test suite."""

import io
from pathlib import Path

import pytest

from folder_to_text.config import AggregatorConfig, LOG_LEVEL_ENV
from folder_to_text.emitter import FileEmitter
from folder_to_text.exception_handler import ExceptionHandler


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    return tmp_path


@pytest.fixture
def config(tmp_path: Path) -> AggregatorConfig:
    return AggregatorConfig(output_path=tmp_path / "output.txt", base_dir=tmp_path)


@pytest.fixture
def emitter(config: AggregatorConfig) -> FileEmitter:
    return FileEmitter(io.BytesIO(), config, ExceptionHandler())
