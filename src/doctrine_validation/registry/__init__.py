# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Reserved SQL keyword registry."""

from doctrine_validation.registry.registry_reserved_keywords import (
    RegistryReservedKeywords,
    get_reserved_keyword_registry,
)

__all__: list[str] = [
    "RegistryReservedKeywords",
    "get_reserved_keyword_registry",
]
