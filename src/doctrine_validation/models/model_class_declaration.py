# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model for a class declaration discovered by the class scanner."""

from __future__ import annotations

from dataclasses import dataclass

__all__: list[str] = [
    "ModelClassDeclaration",
]

NAMESPACE_SEPARATOR = "\\"


@dataclass(frozen=True)
class ModelClassDeclaration:
    """A class declared in a source file.

    Attributes:
        short_name: Class identifier as written after ``class``.
        declaring_namespace: Namespace active at the declaration, or None.
        line: 1-based line of the class name token.
    """

    short_name: str
    declaring_namespace: str | None = None
    line: int = 0

    @property
    def qualified_name(self) -> str:
        """Fully qualified class name without a leading separator."""
        if self.declaring_namespace:
            return f"{self.declaring_namespace}{NAMESPACE_SEPARATOR}{self.short_name}"
        return self.short_name
