# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for doctrine_validation tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from doctrine_validation.models import ModelSourceUnit

FIXTURES_DIR = Path(__file__).parent / "fixtures"
ENTITIES_DIR = FIXTURES_DIR / "entities"


@pytest.fixture
def entities_dir() -> Path:
    """Directory holding the sample PHP entity files."""
    return ENTITIES_DIR


@pytest.fixture
def write_php(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing a PHP source file into a temporary directory.

    Example:
        >>> path = write_php("User.php", "<?php class User {}")
    """

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_unit() -> Callable[..., ModelSourceUnit]:
    """Factory building an in-memory source unit."""

    def _make(source: str, path: str = "<test>.php") -> ModelSourceUnit:
        return ModelSourceUnit(path=path, text=source)

    return _make
