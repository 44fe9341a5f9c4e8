# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command line interface for doctrine column name validation."""

from doctrine_validation.cli.commands import main, validate_column_names

__all__: list[str] = ["main", "validate_column_names"]
