# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Column name validation of Doctrine entity classes."""

from doctrine_validation.validation.validator_column_names import (
    PROGRESS_CLASS,
    PROGRESS_FILE,
    PROGRESS_PROPERTY,
    ColumnNameValidator,
    ExtractorFactory,
    ProgressCallback,
    expand_file_patterns,
)

__all__: list[str] = [
    "ColumnNameValidator",
    "ExtractorFactory",
    "PROGRESS_CLASS",
    "PROGRESS_FILE",
    "PROGRESS_PROPERTY",
    "ProgressCallback",
    "expand_file_patterns",
]
