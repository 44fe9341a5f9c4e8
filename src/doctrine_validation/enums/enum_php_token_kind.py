# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Token kinds produced by the PHP lexer."""

from __future__ import annotations

from enum import Enum


class EnumPhpTokenKind(str, Enum):
    """Lexical category of a PHP token.

    Only the distinctions needed for declaration discovery and mapping
    extraction are made; operators and punctuation are all ``SYMBOL``.
    """

    INLINE_HTML = "inline_html"
    OPEN_TAG = "open_tag"
    CLOSE_TAG = "close_tag"
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    DOC_COMMENT = "doc_comment"
    ATTRIBUTE = "attribute"
    KEYWORD = "keyword"
    NAME = "name"
    VARIABLE = "variable"
    NS_SEPARATOR = "ns_separator"
    STRING = "string"
    NUMBER = "number"
    SYMBOL = "symbol"

    @property
    def is_trivia(self) -> bool:
        """True for tokens that carry no syntax (whitespace and plain comments)."""
        return self in (EnumPhpTokenKind.WHITESPACE, EnumPhpTokenKind.COMMENT)


__all__: list[str] = ["EnumPhpTokenKind"]
