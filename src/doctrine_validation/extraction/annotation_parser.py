# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parsing of doc comment annotations and PHP attributes.

Only the top level is read. An annotation nested inside another annotation's
arguments (for example a ``JoinColumn`` inside ``JoinTable(joinColumns={...})``)
is part of the outer annotation's raw arguments and is not returned on its
own, matching how a property annotation reader sees it.

Doc comment syntax::

    /**
     * @ORM\\Column(type="string", name="user_name")
     */

Attribute syntax::

    #[ORM\\Id, ORM\\Column(name: 'user_name', type: 'string')]
"""

from __future__ import annotations

import re
from typing import Final

from doctrine_validation.models import ModelAnnotation

_ANNOTATION_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\\?[A-Za-z_][A-Za-z0-9_]*(?:\\[A-Za-z_][A-Za-z0-9_]*)*"
)

_NAMED_ARGUMENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*(?:=(?![=>])|:(?!:))\s*(?P<value>.*?)\s*$",
    re.DOTALL,
)

_OPENERS: Final[dict[str, str]] = {"(": ")", "[": "]", "{": "}"}


def _skip_string(text: str, pos: int, quotes: str) -> int:
    """Return the index just past the string literal starting at ``pos``.

    Handles backslash escapes and doubled delimiters.
    """
    quote = text[pos]
    pos += 1
    length = len(text)
    while pos < length:
        char = text[pos]
        if char == "\\" and quote in quotes:
            pos += 2
            continue
        if char == quote:
            if pos + 1 < length and text[pos + 1] == quote:
                pos += 2
                continue
            return pos + 1
        pos += 1
    return length


def _find_group_end(text: str, pos: int, quotes: str) -> int:
    """Return the index just past the bracket group opening at ``pos``."""
    stack: list[str] = []
    length = len(text)
    while pos < length:
        char = text[pos]
        if char in quotes:
            pos = _skip_string(text, pos, quotes)
            continue
        if char in _OPENERS:
            stack.append(_OPENERS[char])
        elif stack and char == stack[-1]:
            stack.pop()
            if not stack:
                return pos + 1
        pos += 1
    return length


def _group_inner(text: str, start: int, end: int) -> str:
    """Return the text between the bracket at ``start`` and its closer.

    An unterminated group runs to the end of ``text``.
    """
    closer = _OPENERS[text[start]]
    if end > start + 1 and text[end - 1] == closer:
        return text[start + 1 : end - 1]
    return text[start + 1 : end]


def split_top_level(text: str, separator: str = ",", quotes: str = "\"'") -> list[str]:
    """Split ``text`` on ``separator`` outside brackets and string literals.

    Empty segments (for example after a trailing comma) are dropped.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char in quotes:
            pos = _skip_string(text, pos, quotes)
            continue
        if char in _OPENERS:
            depth += 1
        elif char in ")]}":
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append(text[start:pos])
            start = pos + 1
        pos += 1
    parts.append(text[start:])
    return [part.strip() for part in parts if part.strip()]


def parse_arguments(raw: str, quotes: str = "\"'") -> tuple[tuple[str | None, str], ...]:
    """Parse an argument list (without the surrounding parentheses).

    Both ``key="value"`` (doc comment) and ``key: 'value'`` (attribute) named
    forms are recognized. Other arguments are positional.
    """
    arguments: list[tuple[str | None, str]] = []
    for part in split_top_level(raw, quotes=quotes):
        match = _NAMED_ARGUMENT_PATTERN.match(part)
        if match:
            arguments.append((match.group("key"), match.group("value")))
        else:
            arguments.append((None, part))
    return tuple(arguments)


def unquote_string(raw: str | None) -> str | None:
    """Return the contents of a string literal, or None if ``raw`` is not one."""
    if raw is None:
        return None
    value = raw.strip()
    if len(value) < 2 or value[0] not in "\"'" or value[-1] != value[0]:
        return None
    quote = value[0]
    body = value[1:-1]
    body = body.replace(quote * 2, quote).replace("\\" + quote, quote)
    return body.replace("\\\\", "\\")


def _strip_doc_comment(doc_comment: str) -> str:
    body = doc_comment.strip()
    if body.startswith("/**"):
        body = body[3:]
    if body.endswith("*/"):
        body = body[:-2]
    lines = [re.sub(r"^\s*\*?", "", line) for line in body.splitlines()]
    return "\n".join(lines)


def parse_doc_comment(doc_comment: str) -> list[ModelAnnotation]:
    """Return the top-level annotations of a doc comment, in order.

    An annotation starts with ``@`` at the beginning of the text or after
    whitespace; ``@`` inside words (``user@example.com``) is ignored.
    Doc comment strings use double quotes only.
    """
    text = _strip_doc_comment(doc_comment)
    annotations: list[ModelAnnotation] = []
    pos = 0
    length = len(text)
    while pos < length:
        at = text.find("@", pos)
        if at < 0:
            break
        if at > 0 and not text[at - 1].isspace():
            pos = at + 1
            continue
        match = _ANNOTATION_NAME_PATTERN.match(text, at + 1)
        if match is None:
            pos = at + 1
            continue
        name = match.group(0)
        pos = match.end()
        arguments: tuple[tuple[str | None, str], ...] = ()
        lookahead = pos
        while lookahead < length and text[lookahead] in " \t":
            lookahead += 1
        if lookahead < length and text[lookahead] == "(":
            end = _find_group_end(text, lookahead, quotes='"')
            arguments = parse_arguments(_group_inner(text, lookahead, end), quotes='"')
            pos = end
        annotations.append(ModelAnnotation(name=name, arguments=arguments))
    return annotations


def parse_attribute_group(attribute: str) -> list[ModelAnnotation]:
    """Return the attributes of one ``#[...]`` group, in order."""
    body = attribute.strip()
    if body.startswith("#["):
        body = body[2:]
    if body.endswith("]"):
        body = body[:-1]

    annotations: list[ModelAnnotation] = []
    for item in split_top_level(body):
        match = _ANNOTATION_NAME_PATTERN.match(item)
        if match is None:
            continue
        rest = item[match.end() :].lstrip()
        arguments: tuple[tuple[str | None, str], ...] = ()
        if rest.startswith("("):
            end = _find_group_end(rest, 0, quotes="\"'")
            arguments = parse_arguments(_group_inner(rest, 0, end))
        annotations.append(ModelAnnotation(name=match.group(0), arguments=arguments))
    return annotations


__all__: list[str] = [
    "parse_arguments",
    "parse_attribute_group",
    "parse_doc_comment",
    "split_top_level",
    "unquote_string",
]
