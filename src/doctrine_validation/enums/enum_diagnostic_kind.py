# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Diagnostic classification for column name validation.

Each value names one recoverable violation. Violations are recorded and
scanning continues; any recorded diagnostic fails the run.
"""

from __future__ import annotations

from enum import Enum


class EnumDiagnosticKind(str, Enum):
    """Kind of a recorded column name violation.

    Values:
        NAMING_CONVENTION: Column name does not match the active naming scheme.
        RESERVED_KEYWORD: Unquoted column name is a reserved SQL keyword.
        JOIN_COLUMN_QUOTING: Join column name is quoted.
    """

    NAMING_CONVENTION = "naming_convention"
    RESERVED_KEYWORD = "reserved_keyword"
    JOIN_COLUMN_QUOTING = "join_column_quoting"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumDiagnosticKind"]
