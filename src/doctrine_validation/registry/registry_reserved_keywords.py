# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Reserved SQL keyword registry.

Static, case-insensitive lookup from a keyword to the SQL dialects that
reserve it. The data lives in ``reserved_keywords.yaml`` next to this module
and is loaded once per process; the registry exposes no mutation API.

Example:
    >>> registry = get_reserved_keyword_registry()
    >>> [dialect.value for dialect in registry.lookup("select")]
    ['postgresql', 'mysql', 'sqlite']
    >>> registry.lookup("user_name")
    ()
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Final

import yaml

from doctrine_validation.enums import EnumSqlDialect
from doctrine_validation.errors import ConfigurationError

logger = logging.getLogger(__name__)

_KEYWORD_ASSET: Final[str] = "reserved_keywords.yaml"


class RegistryReservedKeywords:
    """Immutable keyword -> dialects mapping with case-insensitive lookup."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, tuple[EnumSqlDialect, ...]]) -> None:
        self._entries: Mapping[str, tuple[EnumSqlDialect, ...]] = MappingProxyType(
            {keyword.upper(): tuple(dialects) for keyword, dialects in entries.items()}
        )

    @classmethod
    def from_yaml_text(cls, text: str) -> RegistryReservedKeywords:
        """Build a registry from the YAML keyword asset format.

        Raises:
            ConfigurationError: If the document is malformed or names an
                unknown dialect.
        """
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError("Reserved keyword asset is not valid YAML") from e

        if not isinstance(document, dict) or not isinstance(
            document.get("keywords"), dict
        ):
            raise ConfigurationError(
                "Reserved keyword asset must contain a 'keywords' mapping"
            )

        entries: dict[str, tuple[EnumSqlDialect, ...]] = {}
        for keyword, tags in document["keywords"].items():
            if not isinstance(keyword, str) or not isinstance(tags, list) or not tags:
                raise ConfigurationError(
                    "Reserved keyword entry must map a name to a dialect list",
                    keyword=keyword,
                )
            try:
                entries[keyword] = tuple(EnumSqlDialect(tag) for tag in tags)
            except ValueError as e:
                raise ConfigurationError(
                    f"Unknown dialect in reserved keyword entry: {tags!r}",
                    keyword=keyword,
                ) from e
        return cls(entries)

    def lookup(self, identifier: str) -> tuple[EnumSqlDialect, ...]:
        """Return the dialects reserving ``identifier``, or ``()`` if none."""
        return self._entries.get(identifier.upper(), ())

    def is_reserved(self, identifier: str) -> bool:
        """Return True if any dialect reserves ``identifier``."""
        return identifier.upper() in self._entries

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.is_reserved(identifier)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


@lru_cache(maxsize=1)
def get_reserved_keyword_registry() -> RegistryReservedKeywords:
    """Return the process-wide registry loaded from the packaged asset."""
    text = (
        resources.files("doctrine_validation.registry")
        .joinpath(_KEYWORD_ASSET)
        .read_text(encoding="utf-8")
    )
    registry = RegistryReservedKeywords.from_yaml_text(text)
    logger.debug("Loaded %d reserved keywords", len(registry))
    return registry


__all__: list[str] = [
    "RegistryReservedKeywords",
    "get_reserved_keyword_registry",
]
