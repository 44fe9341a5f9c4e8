# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility functions for doctrine column name validation."""

from doctrine_validation.utils.util_identifier_case import (
    convert_identifier,
    to_camel_case,
    to_snake_case,
)

__all__: list[str] = [
    "convert_identifier",
    "to_camel_case",
    "to_snake_case",
]
