# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Column and join column mapping facts for a class property.

A property yields at most one column mapping and at most one join column
mapping. For a column mapping without an explicit name, the property name
is used and the mapping counts as quoted: implicit names are exempt from the
reserved keyword check but still subject to the naming convention check.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelColumnMapping(BaseModel):
    """Declared (or implicit) column name of a property."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    owner_class: str = Field(..., description="Fully qualified declaring class")
    property_name: str = Field(..., description="Property name without '$'")
    declared_name: str | None = Field(
        default=None, description="Column name with delimiter quotes removed"
    )
    quoted: bool = Field(
        default=False,
        description="True if the name is delimiter-quoted or was not declared",
    )

    @property
    def current_name(self) -> str:
        """Column name used for checks, falling back to the property name."""
        if self.declared_name is not None:
            return self.declared_name
        return self.property_name


class ModelJoinColumnMapping(BaseModel):
    """Declared join column name of a property."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    owner_class: str = Field(..., description="Fully qualified declaring class")
    property_name: str = Field(..., description="Property name without '$'")
    declared_name: str | None = Field(
        default=None, description="Join column name as declared, if any"
    )
    quoted: bool = Field(
        default=False, description="True if the declared name is delimiter-quoted"
    )

    @property
    def has_declared_name(self) -> bool:
        """True if a join column name was declared, even one that is only quotes."""
        return self.declared_name is not None


__all__ = ["ModelColumnMapping", "ModelJoinColumnMapping"]
