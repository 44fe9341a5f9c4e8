# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for mapping metadata extraction.

The column name validator depends only on this capability interface; how
the facts are obtained (doc comment annotations, attributes, a live
database, a test double) is up to the implementation.

Example:
    >>> class ExtractorStatic:
    ...     def get_declared_properties(self, class_name: str) -> tuple[str, ...]:
    ...         return ("userName",)
    ...
    ...     def get_column_mapping(self, class_name, property_name):
    ...         return ModelColumnMapping(
    ...             owner_class=class_name,
    ...             property_name=property_name,
    ...             declared_name="user_name",
    ...         )
    ...
    ...     def get_join_column_mapping(self, class_name, property_name):
    ...         return None
    >>> isinstance(ExtractorStatic(), ProtocolMappingMetadata)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from doctrine_validation.models import (
        ModelColumnMapping,
        ModelJoinColumnMapping,
    )


@runtime_checkable
class ProtocolMappingMetadata(Protocol):
    """Capability interface yielding declared column facts per property.

    Methods:
        get_declared_properties: Property names of a class, in declaration order
        get_column_mapping: Column mapping of a property, if it is a column
        get_join_column_mapping: Join column mapping of a property, if any
    """

    def get_declared_properties(self, class_name: str) -> tuple[str, ...]:
        """Return the property names declared by ``class_name``.

        Raises:
            ClassResolutionError: If the class cannot be introspected.
        """
        ...

    def get_column_mapping(
        self, class_name: str, property_name: str
    ) -> ModelColumnMapping | None:
        """Return the column mapping of a property, or None if it is not a column.

        An undeclared column name yields the property name, marked quoted.
        """
        ...

    def get_join_column_mapping(
        self, class_name: str, property_name: str
    ) -> ModelJoinColumnMapping | None:
        """Return the join column mapping of a property, or None if absent."""
        ...


__all__: list[str] = ["ProtocolMappingMetadata"]
