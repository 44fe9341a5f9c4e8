# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SQL dialects consulted by the reserved keyword registry."""

from __future__ import annotations

from enum import Enum


class EnumSqlDialect(str, Enum):
    """Reference SQL engines whose reserved word lists are consulted."""

    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumSqlDialect"]
