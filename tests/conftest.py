"""
Shared test fixtures and configuration.
"""

from pathlib import Path
from typing import Callable

import pytest

from docsync.core.models.config import SyncConfig


@pytest.fixture
def config(tmp_path: Path) -> SyncConfig:
    """Default config rooted at a temp dir, with both trees present."""
    cfg = SyncConfig(root=tmp_path)
    cfg.scratch_path.mkdir(parents=True)
    cfg.target_path.mkdir(parents=True)
    return cfg


@pytest.fixture
def scratch(config: SyncConfig) -> Path:
    return config.scratch_path


@pytest.fixture
def target(config: SyncConfig) -> Path:
    return config.target_path


@pytest.fixture
def write_page() -> Callable[..., Path]:
    """Write a scraped-style page: header, route line, body."""

    def _write(path: Path, route: str, body: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"---\nopenapi: {route}\n---\n{body}", encoding="utf-8")
        return path

    return _write
