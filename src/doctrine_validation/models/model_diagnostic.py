# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Diagnostic model for a single column name violation.

Diagnostics are immutable once created and are accumulated into a
``ModelValidationReport``. The report's verdict is derived from whether any
diagnostic was recorded.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from doctrine_validation.enums import EnumDiagnosticKind, EnumSqlDialect


class ModelDiagnostic(BaseModel):
    """One recorded violation with enough context to report and test."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: EnumDiagnosticKind = Field(..., description="Violation classification")
    class_name: str = Field(..., description="Fully qualified class name")
    property_name: str = Field(..., description="Property name without '$'")
    expected: str | None = Field(
        default=None, description="Expected column name (naming violations)"
    )
    actual: str | None = Field(default=None, description="Column name as checked")
    keyword: str | None = Field(
        default=None, description="Upper-cased reserved keyword (keyword violations)"
    )
    dialects: tuple[EnumSqlDialect, ...] = Field(
        default=(), description="Dialects reserving the keyword"
    )

    @property
    def subject(self) -> str:
        """``Class:$property`` reference used in messages."""
        return f"{self.class_name}:${self.property_name}"

    def format_message(self) -> str:
        """Render the diagnostic as a single report line."""
        if self.kind == EnumDiagnosticKind.NAMING_CONVENTION:
            return (
                f"{self.subject} column name should be {self.expected}, "
                f"but is {self.actual}!"
            )
        if self.kind == EnumDiagnosticKind.RESERVED_KEYWORD:
            dialect_list = ", ".join(dialect.value for dialect in self.dialects)
            return (
                f"{self.keyword} ({self.subject}) is a reserved keyword in "
                f"({dialect_list}) and must be quoted or renamed!"
            )
        return (
            f"{self.subject} join column name is quoted, "
            f"but join columns must not be quoted!"
        )

    def __str__(self) -> str:
        return self.format_message()


__all__ = ["ModelDiagnostic"]
