# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mapping metadata extraction from PHP entity source.

Implements ``ProtocolMappingMetadata`` by reading Doctrine ORM mapping
annotations straight from the source text, without loading the class:

- PHP 8 attributes (``#[ORM\\Column(name: 'user_name')]``) take precedence.
- Otherwise the doc comment before the declaration is read
  (``@ORM\\Column(name="user_name")``).

Annotation names are resolved through the file's ``use`` imports, fully
qualified names, or the declaring namespace. Only names resolving to
``Doctrine\\ORM\\Mapping\\Column`` and ``Doctrine\\ORM\\Mapping\\JoinColumn``
count as column and join column mappings.

Quoting uses backticks: a declared name starting with ````` is quoted and
the backticks are trimmed from the reported name. A column without a
declared name takes the property name and counts as quoted.

Limitations:
    - Only properties declared in the class itself are reported; inherited
      and trait properties are not resolved.
    - ``use`` imports are collected file-wide.
    - Column names given as constant expressions are treated as undeclared.

Usage:
    >>> unit = ModelSourceUnit.read("src/Entity/User.php")
    >>> extractor = SourceMappingExtractor.from_source(unit)
    >>> extractor.get_column_mapping("App\\\\Entity\\\\User", "userName")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from doctrine_validation.enums import EnumPhpTokenKind
from doctrine_validation.errors import ClassResolutionError
from doctrine_validation.extraction.annotation_parser import (
    parse_attribute_group,
    parse_doc_comment,
    split_top_level,
    unquote_string,
)
from doctrine_validation.models import (
    ModelAnnotation,
    ModelClassDeclaration,
    ModelColumnMapping,
    ModelJoinColumnMapping,
    ModelPhpToken,
    ModelPropertyDeclaration,
    ModelSourceUnit,
)
from doctrine_validation.scanning import (
    ClassDeclarationScanner,
    significant_tokens,
    tokenize_php,
)

logger = logging.getLogger(__name__)

COLUMN_ANNOTATION: Final[str] = "Doctrine\\ORM\\Mapping\\Column"
JOIN_COLUMN_ANNOTATION: Final[str] = "Doctrine\\ORM\\Mapping\\JoinColumn"

QUOTE_CHARACTER: Final[str] = "`"

PROPERTY_MODIFIERS: Final[frozenset[str]] = frozenset(
    {"public", "protected", "private", "var", "static", "readonly"}
)

_CONSTRUCTOR: Final[str] = "__construct"


@dataclass
class _ClassEntry:
    """Resolution result of one class."""

    declaration: ModelClassDeclaration
    properties: dict[str, ModelPropertyDeclaration] = field(default_factory=dict)
    error: str | None = None


@dataclass
class _MemberState:
    """Declaration state while walking a class body."""

    doc_comment: str | None = None
    attributes: list[str] = field(default_factory=list)
    has_modifier: bool = False

    def reset(self) -> None:
        self.doc_comment = None
        self.attributes = []
        self.has_modifier = False


class SourceMappingExtractor:
    """Mapping metadata for the classes declared in one source unit."""

    def __init__(self, unit: ModelSourceUnit) -> None:
        self._unit = unit
        self._tokens: list[ModelPhpToken] = list(
            significant_tokens(tokenize_php(unit.text))
        )
        self._imports = _collect_imports(self._tokens)
        self._classes: dict[str, _ClassEntry] = {}
        for declaration in ClassDeclarationScanner(unit.text, origin=unit.path):
            self._classes[declaration.qualified_name] = self._resolve(declaration)

    @classmethod
    def from_source(cls, unit: ModelSourceUnit) -> SourceMappingExtractor:
        """Build an extractor for the classes of ``unit``."""
        return cls(unit)

    @property
    def class_names(self) -> tuple[str, ...]:
        """Qualified names of the classes found in the source unit."""
        return tuple(self._classes)

    @property
    def imports(self) -> dict[str, str]:
        """Lower-cased import alias -> fully qualified name."""
        return dict(self._imports)

    def get_declared_properties(self, class_name: str) -> tuple[str, ...]:
        """Return the property names declared by ``class_name``, in order.

        Raises:
            ClassResolutionError: If the class is not declared in this source
                unit or its body cannot be located.
        """
        return tuple(self._entry(class_name).properties)

    def get_column_mapping(
        self, class_name: str, property_name: str
    ) -> ModelColumnMapping | None:
        """Return the column mapping of a property, or None if it is not a column."""
        entry = self._entry(class_name)
        annotation = self._find_annotation(entry, property_name, COLUMN_ANNOTATION)
        if annotation is None:
            return None

        name = _declared_name(annotation)
        if not name:
            return ModelColumnMapping(
                owner_class=class_name,
                property_name=property_name,
                declared_name=property_name,
                quoted=True,
            )
        # Quoting is read from the raw name; a name of bare quotes stays declared.
        quoted = name.startswith(QUOTE_CHARACTER)
        return ModelColumnMapping(
            owner_class=class_name,
            property_name=property_name,
            declared_name=name.strip(QUOTE_CHARACTER),
            quoted=quoted,
        )

    def get_join_column_mapping(
        self, class_name: str, property_name: str
    ) -> ModelJoinColumnMapping | None:
        """Return the join column mapping of a property, or None if absent."""
        entry = self._entry(class_name)
        annotation = self._find_annotation(entry, property_name, JOIN_COLUMN_ANNOTATION)
        if annotation is None:
            return None

        name = _declared_name(annotation)
        return ModelJoinColumnMapping(
            owner_class=class_name,
            property_name=property_name,
            declared_name=name.strip(QUOTE_CHARACTER) if name else None,
            quoted=bool(name) and name.startswith(QUOTE_CHARACTER),
        )

    def resolve_annotation_name(self, name: str, namespace: str | None) -> str:
        """Resolve an annotation name to a fully qualified class name."""
        if name.startswith("\\"):
            return name[1:]
        first, separator, rest = name.partition("\\")
        imported = self._imports.get(first.lower())
        if imported is not None:
            return f"{imported}{separator}{rest}"
        if namespace:
            return f"{namespace}\\{name}"
        return name

    def _entry(self, class_name: str) -> _ClassEntry:
        entry = self._classes.get(class_name)
        if entry is None:
            raise ClassResolutionError(
                f"Class {class_name} is not declared in {self._unit.path}",
                class_name=class_name,
                reason=f"not declared in {self._unit.path}",
            )
        if entry.error is not None:
            raise ClassResolutionError(
                f"Cannot resolve class {class_name}: {entry.error}",
                class_name=class_name,
                reason=entry.error,
            )
        return entry

    def _find_annotation(
        self, entry: _ClassEntry, property_name: str, target: str
    ) -> ModelAnnotation | None:
        declaration = entry.properties.get(property_name)
        if declaration is None:
            return None
        namespace = entry.declaration.declaring_namespace

        for group in declaration.attributes:
            for annotation in parse_attribute_group(group):
                if self._matches(annotation, namespace, target):
                    return annotation
        if declaration.doc_comment:
            for annotation in parse_doc_comment(declaration.doc_comment):
                if self._matches(annotation, namespace, target):
                    return annotation
        return None

    def _matches(
        self, annotation: ModelAnnotation, namespace: str | None, target: str
    ) -> bool:
        resolved = self.resolve_annotation_name(annotation.name, namespace)
        return resolved.lower() == target.lower()

    def _resolve(self, declaration: ModelClassDeclaration) -> _ClassEntry:
        entry = _ClassEntry(declaration=declaration)
        start = _find_class_token(self._tokens, declaration)
        if start is None:
            entry.error = f"declaration not found on line {declaration.line}"
            return entry

        body_start = None
        for index in range(start, len(self._tokens)):
            token = self._tokens[index]
            if token.is_symbol("{"):
                body_start = index
                break
            if token.is_symbol(";"):
                break
        if body_start is None:
            entry.error = "class body not found"
            return entry

        body_end = _find_matching_brace(self._tokens, body_start)
        if body_end is None:
            entry.error = "unbalanced braces in class body"
            return entry

        for prop in _collect_properties(self._tokens[body_start + 1 : body_end]):
            entry.properties.setdefault(prop.name, prop)
        logger.debug(
            "%s: class %s declares %d properties",
            self._unit.path,
            declaration.qualified_name,
            len(entry.properties),
        )
        return entry


def _declared_name(annotation: ModelAnnotation) -> str | None:
    raw = annotation.get_argument("name", position=0)
    name = unquote_string(raw)
    if raw is not None and name is None:
        logger.debug("Ignoring non-literal column name %s", raw)
    return name


def _find_class_token(
    tokens: list[ModelPhpToken], declaration: ModelClassDeclaration
) -> int | None:
    for index in range(1, len(tokens)):
        token = tokens[index]
        if (
            token.kind == EnumPhpTokenKind.NAME
            and token.text == declaration.short_name
            and token.line == declaration.line
            and tokens[index - 1].is_keyword("class")
        ):
            return index
    return None


def _find_matching_brace(tokens: list[ModelPhpToken], start: int) -> int | None:
    depth = 0
    for index in range(start, len(tokens)):
        token = tokens[index]
        if token.is_symbol("{"):
            depth += 1
        elif token.is_symbol("}"):
            depth -= 1
            if depth == 0:
                return index
    return None


def _collect_properties(body: list[ModelPhpToken]) -> list[ModelPropertyDeclaration]:
    """Collect the properties declared at the top level of a class body.

    A variable is a property when its declaration starts with a property
    modifier, either as a class member or as a promoted constructor
    parameter. Method bodies and other parameter lists are skipped.
    """
    properties: list[ModelPropertyDeclaration] = []
    member = _MemberState()
    depth = 0
    parens = 0
    in_function = False
    function_name: str | None = None

    for token in body:
        if token.is_symbol("{"):
            depth += 1
            continue
        if token.is_symbol("}"):
            depth -= 1
            if depth == 0:
                member.reset()
                in_function = False
                function_name = None
            continue
        if depth > 0:
            continue

        if token.is_symbol("("):
            parens += 1
            if parens == 1 and in_function:
                member.reset()
            continue
        if token.is_symbol(")"):
            parens = max(parens - 1, 0)
            continue

        promoting = in_function and parens == 1 and function_name == _CONSTRUCTOR
        if parens > 1 or (parens == 1 and not promoting):
            continue

        if token.kind == EnumPhpTokenKind.DOC_COMMENT:
            member.doc_comment = token.text
        elif token.kind == EnumPhpTokenKind.ATTRIBUTE:
            member.attributes.append(token.text)
        elif token.kind == EnumPhpTokenKind.KEYWORD and token.value in PROPERTY_MODIFIERS:
            member.has_modifier = True
        elif token.is_keyword("function"):
            in_function = True
            member.has_modifier = False
        elif token.kind == EnumPhpTokenKind.NAME and in_function and function_name is None:
            function_name = token.text.lower()
        elif token.kind == EnumPhpTokenKind.VARIABLE:
            if member.has_modifier and (promoting or not in_function):
                properties.append(
                    ModelPropertyDeclaration(
                        name=token.value,
                        line=token.line,
                        doc_comment=member.doc_comment,
                        attributes=tuple(member.attributes),
                    )
                )
                member.doc_comment = None
                member.attributes = []
        elif token.is_symbol(","):
            if promoting:
                member.reset()
        elif token.is_symbol(";"):
            member.reset()
            in_function = False
            function_name = None

    return properties


def _collect_imports(tokens: list[ModelPhpToken]) -> dict[str, str]:
    """Collect ``use`` class imports outside class bodies.

    Returns:
        Lower-cased alias -> fully qualified name (without leading ``\\``).
    """
    imports: dict[str, str] = {}
    depth = 0
    class_depths: list[int] = []
    pending_class = False
    index = 0
    previous: ModelPhpToken | None = None

    while index < len(tokens):
        token = tokens[index]
        if token.is_keyword("class", "trait", "interface", "enum") or (
            token.kind == EnumPhpTokenKind.NAME and token.value.lower() == "enum"
        ):
            pending_class = True
        elif token.is_symbol("{"):
            depth += 1
            if pending_class:
                class_depths.append(depth)
                pending_class = False
        elif token.is_symbol("}"):
            if class_depths and class_depths[-1] == depth:
                class_depths.pop()
            depth -= 1
        elif token.is_symbol(";"):
            pending_class = False
        elif (
            token.is_keyword("use")
            and not class_depths
            and (
                previous is None
                or previous.is_symbol(";", "{", "}")
                or previous.kind == EnumPhpTokenKind.OPEN_TAG
            )
        ):
            end = index + 1
            while end < len(tokens) and not tokens[end].is_symbol(";"):
                end += 1
            _parse_use_statement(tokens[index + 1 : end], imports)
            previous = tokens[end] if end < len(tokens) else token
            index = end + 1
            continue
        previous = token
        index += 1

    return imports


def _parse_use_statement(tokens: list[ModelPhpToken], imports: dict[str, str]) -> None:
    if tokens and tokens[0].is_keyword("function", "const"):
        return
    statement = "".join(
        f" {token.text} " if token.kind == EnumPhpTokenKind.KEYWORD else token.text
        for token in tokens
    )
    prefix = ""
    if "{" in statement:
        prefix, _, statement = statement.partition("{")
        statement = statement.rsplit("}", 1)[0]
        prefix = prefix.strip().strip("\\")
    for clause in split_top_level(statement):
        name, _, alias = clause.partition(" as ")
        name = name.strip().lstrip("\\")
        if prefix:
            name = f"{prefix}\\{name}"
        alias = alias.strip() or name.rsplit("\\", 1)[-1]
        if name and alias:
            imports[alias.lower()] = name


__all__: list[str] = [
    "COLUMN_ANNOTATION",
    "JOIN_COLUMN_ANNOTATION",
    "PROPERTY_MODIFIERS",
    "QUOTE_CHARACTER",
    "SourceMappingExtractor",
]
