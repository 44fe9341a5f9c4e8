# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Lightweight PHP lexer.

Splits PHP source into a flat token stream good enough for declaration
discovery and mapping extraction. This is NOT a parser: it makes the few
distinctions those consumers rely on and nothing more.

Guarantees:
    - Text outside ``<?php``/``<?=`` ... ``?>`` is a single INLINE_HTML token.
    - Comments, doc comments, ``#[...]`` attributes and string literals
      (quoted, backtick, heredoc, nowdoc) are one token each, so
      declarations inside them are never seen as code.
    - Reserved words are KEYWORD tokens with the lowered word as ``value``,
      except directly after ``->``, ``?->``, ``::``, ``\\`` or ``function``
      where PHP treats them as plain names.
    - Malformed input never raises; unterminated constructs run to the end
      of the source.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import Final

from doctrine_validation.enums import EnumPhpTokenKind
from doctrine_validation.models import ModelPhpToken

PHP_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "__halt_compiler",
        "abstract",
        "and",
        "array",
        "as",
        "break",
        "callable",
        "case",
        "catch",
        "class",
        "clone",
        "const",
        "continue",
        "declare",
        "default",
        "die",
        "do",
        "echo",
        "else",
        "elseif",
        "empty",
        "enddeclare",
        "endfor",
        "endforeach",
        "endif",
        "endswitch",
        "endwhile",
        "eval",
        "exit",
        "extends",
        "final",
        "finally",
        "fn",
        "for",
        "foreach",
        "function",
        "global",
        "goto",
        "if",
        "implements",
        "include",
        "include_once",
        "instanceof",
        "insteadof",
        "interface",
        "isset",
        "list",
        "match",
        "namespace",
        "new",
        "or",
        "print",
        "private",
        "protected",
        "public",
        "readonly",
        "require",
        "require_once",
        "return",
        "static",
        "switch",
        "throw",
        "trait",
        "try",
        "unset",
        "use",
        "var",
        "while",
        "xor",
        "yield",
    }
)

_OPEN_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"<\?(?:php(?=\s|\Z)|=)", re.IGNORECASE
)

_IDENT: Final[str] = r"[A-Za-z_\x80-\U0010ffff][A-Za-z0-9_\x80-\U0010ffff]*"

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"""
    (?P<close_tag>\?>)
  | (?P<whitespace>\s+)
  | (?P<doc_comment>/\*\*(?=\s)[\s\S]*?(?:\*/|\Z))
  | (?P<comment>/\*[\s\S]*?(?:\*/|\Z)|(?://|\#(?!\[))(?:[^\n?]|\?(?!>))*)
  | (?P<attribute>\#\[)
  | (?P<heredoc><<<[ \t]*(?:"(?P<quoted_label>{_IDENT})"|'(?P<nowdoc_label>{_IDENT})'|(?P<label>{_IDENT}))\r?\n)
  | (?P<string>'(?:[^'\\]|\\[\s\S])*'?|"(?:[^"\\]|\\[\s\S])*"?|`(?:[^`\\]|\\[\s\S])*`?)
  | (?P<variable>\$(?P<variable_name>{_IDENT}))
  | (?P<word>{_IDENT})
  | (?P<number>0[xX][0-9a-fA-F_]+|0[bB][01_]+|\d[\d_]*(?:\.[\d_]*)?(?:[eE][+-]?\d+)?|\.\d[\d_]*(?:[eE][+-]?\d+)?)
  | (?P<ns_separator>\\)
  | (?P<symbol>\?->|->|::|=>|\.\.\.|[^\s\w])
    """,
    re.VERBOSE,
)

# Words directly after these tokens are member, method, or namespace segment
# names even when they spell a reserved word.
_NAME_CONTEXT_SYMBOLS: Final[frozenset[str]] = frozenset({"->", "?->", "::"})


def _scan_attribute_end(source: str, start: int) -> int:
    """Return the index just past the ``]`` closing the attribute at ``start``."""
    depth = 0
    pos = start
    length = len(source)
    while pos < length:
        char = source[pos]
        if char in "'\"":
            pos += 1
            while pos < length and source[pos] != char:
                pos += 2 if source[pos] == "\\" else 1
        elif char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return pos + 1
        pos += 1
    return length


def _scan_heredoc_end(source: str, body_start: int, label: str) -> int:
    """Return the index just past the closing label of a heredoc/nowdoc."""
    closing = re.compile(
        rf"^[ \t]*{re.escape(label)}(?![A-Za-z0-9_\x80-\U0010ffff])", re.MULTILINE
    )
    match = closing.search(source, body_start)
    return match.end() if match else len(source)


def tokenize_php(source: str) -> Iterator[ModelPhpToken]:
    """Lazily split PHP source into tokens.

    Args:
        source: Full PHP file contents.

    Yields:
        ModelPhpToken for every lexeme, in source order. Concatenating the
        token texts reproduces ``source`` exactly.
    """
    pos = 0
    line = 1
    length = len(source)
    in_php = False
    previous: ModelPhpToken | None = None

    while pos < length:
        if not in_php:
            match = _OPEN_TAG_PATTERN.search(source, pos)
            html_end = match.start() if match else length
            if html_end > pos:
                text = source[pos:html_end]
                yield ModelPhpToken(EnumPhpTokenKind.INLINE_HTML, text, line, text)
                line += text.count("\n")
            if match is None:
                return
            text = match.group(0)
            yield ModelPhpToken(EnumPhpTokenKind.OPEN_TAG, text, line, text)
            pos = match.end()
            in_php = True
            previous = None
            continue

        match = _TOKEN_PATTERN.match(source, pos)
        if match is None:  # pragma: no cover - the symbol branch matches any char
            text = source[pos]
            token = ModelPhpToken(EnumPhpTokenKind.SYMBOL, text, line, text)
            end = pos + 1
        else:
            group = match.lastgroup
            end = match.end()
            if match.group("heredoc") is not None:
                label = (
                    match.group("quoted_label")
                    or match.group("nowdoc_label")
                    or match.group("label")
                )
                end = _scan_heredoc_end(source, end, label)
                group = "string"
            elif match.group("attribute") is not None:
                end = _scan_attribute_end(source, pos + 1)
            token = _make_token(group, source[pos:end], line, match, previous)

        yield token
        line += token.text.count("\n")
        pos = end

        if token.kind == EnumPhpTokenKind.CLOSE_TAG:
            in_php = False
        elif not token.kind.is_trivia:
            previous = token


def _make_token(
    group: str | None,
    text: str,
    line: int,
    match: re.Match[str],
    previous: ModelPhpToken | None,
) -> ModelPhpToken:
    if group == "word":
        lowered = text.lower()
        if lowered in PHP_KEYWORDS and not _forces_name(previous):
            return ModelPhpToken(EnumPhpTokenKind.KEYWORD, text, line, lowered)
        return ModelPhpToken(EnumPhpTokenKind.NAME, text, line, text)
    if group == "variable":
        name = match.group("variable_name")
        return ModelPhpToken(EnumPhpTokenKind.VARIABLE, text, line, name)
    kind = _GROUP_KINDS.get(group or "symbol", EnumPhpTokenKind.SYMBOL)
    return ModelPhpToken(kind, text, line, text)


def _forces_name(previous: ModelPhpToken | None) -> bool:
    if previous is None:
        return False
    if previous.kind == EnumPhpTokenKind.NS_SEPARATOR:
        return True
    if previous.is_keyword("function"):
        return True
    return previous.is_symbol(*_NAME_CONTEXT_SYMBOLS)


_GROUP_KINDS: Final[dict[str, EnumPhpTokenKind]] = {
    "close_tag": EnumPhpTokenKind.CLOSE_TAG,
    "whitespace": EnumPhpTokenKind.WHITESPACE,
    "doc_comment": EnumPhpTokenKind.DOC_COMMENT,
    "comment": EnumPhpTokenKind.COMMENT,
    "attribute": EnumPhpTokenKind.ATTRIBUTE,
    "string": EnumPhpTokenKind.STRING,
    "number": EnumPhpTokenKind.NUMBER,
    "ns_separator": EnumPhpTokenKind.NS_SEPARATOR,
    "symbol": EnumPhpTokenKind.SYMBOL,
}


def significant_tokens(tokens: Iterable[ModelPhpToken]) -> Iterator[ModelPhpToken]:
    """Drop whitespace and plain comments, keeping doc comments and attributes."""
    return (token for token in tokens if not token.kind.is_trivia)


__all__: list[str] = [
    "PHP_KEYWORDS",
    "significant_tokens",
    "tokenize_php",
]
