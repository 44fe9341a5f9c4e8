# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Class declaration discovery for PHP source files.

A single lexical pass over the token stream, without building a syntax
tree. One "current namespace" slot is kept per file:

- ``namespace`` + whitespace + name: the name and the name/separator tokens
  following it become the current namespace, overwriting any earlier one.
- ``class`` + whitespace + name: emits ``namespace\\name`` (or the bare name
  when no namespace is active).

Known limitations:
    - Single active namespace per file. In a file with several namespace
      blocks, each class is qualified with the most recently seen
      namespace, whatever block it is declared in.
    - Anything matching the ``class <name>`` token pattern is emitted;
      nested, anonymous or conditional declarations get no special handling.
    - Interfaces, traits and enums are not reported.

Example:
    >>> source = "<?php namespace App\\\\Entity; class User {}"
    >>> list(iter_class_names(source))
    ['App\\\\Entity\\\\User']
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from doctrine_validation.enums import EnumPhpTokenKind
from doctrine_validation.models import ModelClassDeclaration, ModelPhpToken
from doctrine_validation.scanning.php_lexer import tokenize_php

logger = logging.getLogger(__name__)


class ClassDeclarationScanner:
    """Restartable, lazy sequence of the classes declared in a source text.

    Every call to ``iter()`` re-lexes the source, so the scanner can be
    consumed any number of times and always yields the same declarations in
    declaration order. A qualified name is yielded at most once.
    """

    def __init__(self, source: str, *, origin: str = "<string>") -> None:
        self._source = source
        self._origin = origin

    def __iter__(self) -> Iterator[ModelClassDeclaration]:
        namespace: str | None = None
        namespace_parts: list[str] | None = None
        seen: set[str] = set()

        for first, second, third in _window(tokenize_php(self._source)):
            if namespace_parts is not None:
                if third.kind in (EnumPhpTokenKind.NAME, EnumPhpTokenKind.NS_SEPARATOR):
                    namespace_parts.append(third.text)
                    continue
                namespace = "".join(namespace_parts).rstrip("\\")
                namespace_parts = None
                logger.debug("%s: namespace %s", self._origin, namespace)

            if not _is_declaration(first, second, third):
                continue

            if first.is_keyword("namespace"):
                namespace_parts = [third.text]
                continue

            declaration = ModelClassDeclaration(
                short_name=third.text,
                declaring_namespace=namespace,
                line=third.line,
            )
            if declaration.qualified_name in seen:
                continue
            seen.add(declaration.qualified_name)
            yield declaration


def _window(
    tokens: Iterator[ModelPhpToken],
) -> Iterator[tuple[ModelPhpToken, ModelPhpToken, ModelPhpToken]]:
    """Yield every run of three consecutive tokens."""
    buffered: list[ModelPhpToken] = []
    for token in tokens:
        buffered.append(token)
        if len(buffered) > 3:
            buffered.pop(0)
        if len(buffered) == 3:
            yield buffered[0], buffered[1], buffered[2]


def _is_declaration(
    first: ModelPhpToken, second: ModelPhpToken, third: ModelPhpToken
) -> bool:
    return (
        first.is_keyword("namespace", "class")
        and second.kind == EnumPhpTokenKind.WHITESPACE
        and third.kind == EnumPhpTokenKind.NAME
    )


def iter_class_declarations(
    source: str, *, origin: str = "<string>"
) -> Iterator[ModelClassDeclaration]:
    """Iterate the class declarations of a PHP source text."""
    return iter(ClassDeclarationScanner(source, origin=origin))


def iter_class_names(source: str, *, origin: str = "<string>") -> Iterator[str]:
    """Iterate the fully qualified class names declared in a PHP source text."""
    for declaration in ClassDeclarationScanner(source, origin=origin):
        yield declaration.qualified_name


__all__: list[str] = [
    "ClassDeclarationScanner",
    "iter_class_declarations",
    "iter_class_names",
]
