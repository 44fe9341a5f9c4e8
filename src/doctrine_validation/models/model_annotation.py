# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model for a doc comment annotation or PHP attribute."""

from __future__ import annotations

from dataclasses import dataclass

__all__: list[str] = [
    "ModelAnnotation",
]


@dataclass(frozen=True)
class ModelAnnotation:
    """One top-level annotation with its arguments as written.

    Attributes:
        name: Annotation class name as written (``ORM\\Column``).
        arguments: ``(key, raw_value)`` pairs in source order; ``key`` is
            None for positional arguments.
    """

    name: str
    arguments: tuple[tuple[str | None, str], ...] = ()

    def get_argument(self, key: str, position: int | None = None) -> str | None:
        """Return the raw value of a named argument.

        Args:
            key: Argument name.
            position: Index among the positional arguments to fall back to.

        Returns:
            The raw argument text, or None if absent.
        """
        positional: list[str] = []
        for arg_key, value in self.arguments:
            if arg_key == key:
                return value
            if arg_key is None:
                positional.append(value)
        if position is not None and position < len(positional):
            return positional[position]
        return None
