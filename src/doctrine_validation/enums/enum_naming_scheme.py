# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Naming scheme selection for column name validation."""

from __future__ import annotations

from enum import Enum


class EnumNamingScheme(str, Enum):
    """Column naming convention enforced for a validation run.

    Values:
        SNAKE: ``underscore_case`` column names (default).
        CAMEL: ``camelCase`` column names.
    """

    SNAKE = "snake"
    """Column names must be underscore_case."""

    CAMEL = "camel"
    """Column names must be camelCase."""

    def convert(self, identifier: str) -> str:
        """Return ``identifier`` converted to this naming scheme."""
        from doctrine_validation.utils.util_identifier_case import (
            convert_identifier,
        )

        return convert_identifier(identifier, self)

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumNamingScheme"]
