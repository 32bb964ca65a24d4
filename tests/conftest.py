"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def results_root(fixtures_root: Path) -> Path:
    """Return the directory holding analysis-result documents."""
    return fixtures_root / "results"


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a project tree with ``src/Foo.php`` and make it the working directory."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Foo.php").write_text("<?php\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path
