# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

Applies the `unit` marker to every test under tests/unit/ so individual
files do not have to repeat it.

    # Run only unit tests
    pytest -m unit

NOTE: pytestmark at module level in conftest.py does NOT apply to tests in
other files, hence the collection hook.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to all tests in the unit directory."""
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in item.path.as_posix():
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
