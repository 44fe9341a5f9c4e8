# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Doctrine entity column name validation.

Checks the column names mapped on Doctrine ORM entity properties:

- column names must follow the configured naming scheme
  (``underscore_case`` by default, ``camelCase`` on request)
- unquoted column names must not be reserved SQL keywords
  (PostgreSQL, MySQL, SQLite)
- join column names must not be quoted

Entity sources are read lexically; no PHP runtime is needed.

Example:
    >>> from doctrine_validation import ColumnNameValidator, EnumNamingScheme
    >>> report = ColumnNameValidator(EnumNamingScheme.SNAKE).validate_patterns(
    ...     ["src/Entity/*.php"]
    ... )
    >>> for diagnostic in report.diagnostics:
    ...     print(diagnostic)
"""

from doctrine_validation.enums import (
    EnumDiagnosticKind,
    EnumNamingScheme,
    EnumSqlDialect,
)
from doctrine_validation.errors import (
    ClassResolutionError,
    ConfigurationError,
    DoctrineValidationError,
    UnreadableSourceError,
)
from doctrine_validation.models import (
    ModelDiagnostic,
    ModelValidationReport,
    ModelValidatorConfig,
)
from doctrine_validation.validation import ColumnNameValidator

__version__ = "0.1.0"

__all__: list[str] = [
    "ClassResolutionError",
    "ColumnNameValidator",
    "ConfigurationError",
    "DoctrineValidationError",
    "EnumDiagnosticKind",
    "EnumNamingScheme",
    "EnumSqlDialect",
    "ModelDiagnostic",
    "ModelValidationReport",
    "ModelValidatorConfig",
    "UnreadableSourceError",
    "__version__",
]
