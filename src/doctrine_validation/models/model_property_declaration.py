# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model for a property declared in a class body."""

from __future__ import annotations

from dataclasses import dataclass

__all__: list[str] = [
    "ModelPropertyDeclaration",
]


@dataclass(frozen=True)
class ModelPropertyDeclaration:
    """A class property with the metadata attached to its declaration.

    Attributes:
        name: Property name without the ``$`` sigil.
        line: 1-based line of the property variable.
        doc_comment: Doc comment preceding the declaration, if any.
        attributes: Raw ``#[...]`` attribute groups preceding the declaration.
    """

    name: str
    line: int = 0
    doc_comment: str | None = None
    attributes: tuple[str, ...] = ()
