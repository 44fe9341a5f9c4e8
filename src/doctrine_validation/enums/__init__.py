# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for doctrine column name validation.

Exports:
    EnumDiagnosticKind: Violation classification (naming, keyword, join quoting)
    EnumNamingScheme: Active naming convention (SNAKE, CAMEL)
    EnumPhpTokenKind: PHP lexer token categories
    EnumSourceFailureKind: Reason a file or class was skipped
    EnumSqlDialect: Reference SQL dialects (POSTGRESQL, MYSQL, SQLITE)
"""

from doctrine_validation.enums.enum_diagnostic_kind import EnumDiagnosticKind
from doctrine_validation.enums.enum_naming_scheme import EnumNamingScheme
from doctrine_validation.enums.enum_php_token_kind import EnumPhpTokenKind
from doctrine_validation.enums.enum_source_failure_kind import EnumSourceFailureKind
from doctrine_validation.enums.enum_sql_dialect import EnumSqlDialect

__all__: list[str] = [
    "EnumDiagnosticKind",
    "EnumNamingScheme",
    "EnumPhpTokenKind",
    "EnumSourceFailureKind",
    "EnumSqlDialect",
]
