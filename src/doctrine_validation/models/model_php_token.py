# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model for a single PHP lexer token."""

from __future__ import annotations

from dataclasses import dataclass

from doctrine_validation.enums.enum_php_token_kind import EnumPhpTokenKind

__all__: list[str] = [
    "ModelPhpToken",
]


@dataclass(frozen=True)
class ModelPhpToken:
    """One lexical token of PHP source.

    Attributes:
        kind: Lexical category.
        text: Exact source text of the token.
        line: 1-based line number where the token starts.
        value: Normalized value. Lowered word for keywords, the bare name for
            variables (without ``$``), otherwise the token text.
    """

    kind: EnumPhpTokenKind
    text: str
    line: int
    value: str = ""

    def is_keyword(self, *words: str) -> bool:
        """Return True if this is a keyword token matching one of ``words``."""
        return self.kind == EnumPhpTokenKind.KEYWORD and self.value in words

    def is_symbol(self, *symbols: str) -> bool:
        """Return True if this is a symbol token matching one of ``symbols``."""
        return self.kind == EnumPhpTokenKind.SYMBOL and self.text in symbols
