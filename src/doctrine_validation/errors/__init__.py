# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error classes for doctrine column name validation."""

from doctrine_validation.errors.error_doctrine_validation import (
    ClassResolutionError,
    ConfigurationError,
    DoctrineValidationError,
    UnreadableSourceError,
)

__all__: list[str] = [
    "ClassResolutionError",
    "ConfigurationError",
    "DoctrineValidationError",
    "UnreadableSourceError",
]
