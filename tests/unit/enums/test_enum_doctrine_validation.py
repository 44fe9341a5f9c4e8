# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for doctrine validation enums."""

from __future__ import annotations

import pytest

from doctrine_validation.enums import (
    EnumDiagnosticKind,
    EnumNamingScheme,
    EnumPhpTokenKind,
    EnumSqlDialect,
)

pytestmark = [pytest.mark.unit]


class TestStringValues:
    """Enums serialize to their values."""

    @pytest.mark.parametrize(
        ("member", "value"),
        [
            (EnumNamingScheme.SNAKE, "snake"),
            (EnumNamingScheme.CAMEL, "camel"),
            (EnumSqlDialect.POSTGRESQL, "postgresql"),
            (EnumDiagnosticKind.JOIN_COLUMN_QUOTING, "join_column_quoting"),
        ],
    )
    def test_str(self, member: object, value: str) -> None:
        assert str(member) == value

    def test_dialect_order(self) -> None:
        """Dialects are declared in reporting order."""
        assert [d.value for d in EnumSqlDialect] == ["postgresql", "mysql", "sqlite"]

    def test_lookup_by_value(self) -> None:
        assert EnumNamingScheme("camel") is EnumNamingScheme.CAMEL


class TestTokenKinds:
    """Tests for token kind classification."""

    @pytest.mark.parametrize(
        "kind", [EnumPhpTokenKind.WHITESPACE, EnumPhpTokenKind.COMMENT]
    )
    def test_trivia(self, kind: EnumPhpTokenKind) -> None:
        assert kind.is_trivia

    @pytest.mark.parametrize(
        "kind",
        [
            EnumPhpTokenKind.DOC_COMMENT,
            EnumPhpTokenKind.ATTRIBUTE,
            EnumPhpTokenKind.KEYWORD,
            EnumPhpTokenKind.NAME,
        ],
    )
    def test_significant(self, kind: EnumPhpTokenKind) -> None:
        assert not kind.is_trivia
