# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Lexical scanning of PHP entity sources."""

from doctrine_validation.scanning.php_lexer import (
    PHP_KEYWORDS,
    significant_tokens,
    tokenize_php,
)
from doctrine_validation.scanning.scanner_class_declarations import (
    ClassDeclarationScanner,
    iter_class_declarations,
    iter_class_names,
)

__all__: list[str] = [
    "ClassDeclarationScanner",
    "PHP_KEYWORDS",
    "iter_class_declarations",
    "iter_class_names",
    "significant_tokens",
    "tokenize_php",
]
