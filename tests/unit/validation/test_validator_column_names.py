# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ColumnNameValidator.

Tests cover:
- The naming convention, reserved keyword and join column checks
- Implicit column names and quoting exemptions
- Aggregation over files, classes and properties
- Recording of unreadable files and unresolvable classes
- Progress reporting and glob expansion
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from doctrine_validation.enums import (
    EnumDiagnosticKind,
    EnumNamingScheme,
    EnumSourceFailureKind,
    EnumSqlDialect,
)
from doctrine_validation.errors import ClassResolutionError
from doctrine_validation.models import (
    ModelColumnMapping,
    ModelDiagnostic,
    ModelJoinColumnMapping,
    ModelSourceUnit,
)
from doctrine_validation.registry import RegistryReservedKeywords
from doctrine_validation.validation import (
    PROGRESS_CLASS,
    PROGRESS_FILE,
    PROGRESS_PROPERTY,
    ColumnNameValidator,
    expand_file_patterns,
)

pytestmark = [pytest.mark.unit]

OWNER = "App\\Entity\\User"

ALL_DIALECTS = (
    EnumSqlDialect.POSTGRESQL,
    EnumSqlDialect.MYSQL,
    EnumSqlDialect.SQLITE,
)


class StubMappingMetadata:
    """In-memory mapping metadata for a single class."""

    def __init__(
        self,
        columns: dict[str, ModelColumnMapping | None] | None = None,
        join_columns: dict[str, ModelJoinColumnMapping] | None = None,
    ) -> None:
        self.columns = columns or {}
        self.join_columns = join_columns or {}

    def get_declared_properties(self, class_name: str) -> tuple[str, ...]:
        return tuple(dict.fromkeys([*self.columns, *self.join_columns]))

    def get_column_mapping(
        self, class_name: str, property_name: str
    ) -> ModelColumnMapping | None:
        return self.columns.get(property_name)

    def get_join_column_mapping(
        self, class_name: str, property_name: str
    ) -> ModelJoinColumnMapping | None:
        return self.join_columns.get(property_name)


def column(
    property_name: str, declared_name: str | None = None, *, quoted: bool = False
) -> ModelColumnMapping:
    if declared_name is None:
        return ModelColumnMapping(
            owner_class=OWNER,
            property_name=property_name,
            declared_name=property_name,
            quoted=True,
        )
    return ModelColumnMapping(
        owner_class=OWNER,
        property_name=property_name,
        declared_name=declared_name,
        quoted=quoted,
    )


def join_column(
    property_name: str, declared_name: str | None, *, quoted: bool = False
) -> ModelJoinColumnMapping:
    return ModelJoinColumnMapping(
        owner_class=OWNER,
        property_name=property_name,
        declared_name=declared_name,
        quoted=quoted,
    )


def check(
    metadata: StubMappingMetadata,
    property_name: str,
    scheme: EnumNamingScheme = EnumNamingScheme.SNAKE,
) -> list[ModelDiagnostic]:
    return ColumnNameValidator(scheme).check_property(metadata, OWNER, property_name)


class TestNamingConvention:
    """Tests for the naming convention check."""

    def test_snake_name_under_snake_scheme(self) -> None:
        """userName mapped to user_name passes under underscore_case."""
        metadata = StubMappingMetadata({"userName": column("userName", "user_name")})
        assert check(metadata, "userName") == []

    def test_snake_name_under_camel_scheme(self) -> None:
        """The same mapping fails under camelCase."""
        metadata = StubMappingMetadata({"userName": column("userName", "user_name")})
        assert check(metadata, "userName", EnumNamingScheme.CAMEL) == [
            ModelDiagnostic(
                kind=EnumDiagnosticKind.NAMING_CONVENTION,
                class_name=OWNER,
                property_name="userName",
                expected="userName",
                actual="user_name",
            )
        ]

    def test_implicit_name_is_checked(self) -> None:
        """Without a declared name the property name must follow the scheme."""
        metadata = StubMappingMetadata({"userName": column("userName")})
        (diagnostic,) = check(metadata, "userName")
        assert diagnostic.kind == EnumDiagnosticKind.NAMING_CONVENTION
        assert diagnostic.expected == "user_name"
        assert diagnostic.actual == "userName"

    def test_quoted_name_is_checked_without_backticks(self) -> None:
        """Quoting does not exempt a name from the naming convention."""
        metadata = StubMappingMetadata(
            {"createdAt": column("createdAt", "createdAt", quoted=True)}
        )
        (diagnostic,) = check(metadata, "createdAt")
        assert diagnostic.format_message() == (
            "App\\Entity\\User:$createdAt column name should be created_at, "
            "but is createdAt!"
        )

    def test_property_without_column_is_skipped(self) -> None:
        """Properties without any mapping produce nothing."""
        metadata = StubMappingMetadata({"transient": None})
        assert check(metadata, "transient") == []


class TestReservedKeywords:
    """Tests for the reserved keyword check."""

    def test_unquoted_keyword(self) -> None:
        """An unquoted reserved name lists every reserving dialect."""
        metadata = StubMappingMetadata({"select": column("select", "select")})
        assert check(metadata, "select") == [
            ModelDiagnostic(
                kind=EnumDiagnosticKind.RESERVED_KEYWORD,
                class_name=OWNER,
                property_name="select",
                actual="select",
                keyword="SELECT",
                dialects=ALL_DIALECTS,
            )
        ]

    def test_upper_case_keyword_reports_both_violations(self) -> None:
        """'SELECT' violates underscore_case and is reserved."""
        metadata = StubMappingMetadata({"select": column("select", "SELECT")})
        kinds = [d.kind for d in check(metadata, "select")]
        assert kinds == [
            EnumDiagnosticKind.NAMING_CONVENTION,
            EnumDiagnosticKind.RESERVED_KEYWORD,
        ]

    def test_quoted_keyword(self) -> None:
        """A quoted reserved name is allowed."""
        metadata = StubMappingMetadata(
            {"select": column("select", "select", quoted=True)}
        )
        assert check(metadata, "select") == []

    def test_implicit_keyword_name_is_exempt(self) -> None:
        """Implicit names count as quoted."""
        metadata = StubMappingMetadata({"order": column("order")})
        assert check(metadata, "order") == []

    def test_single_dialect(self) -> None:
        metadata = StubMappingMetadata({"status": column("status", "status")})
        (diagnostic,) = check(metadata, "status")
        assert diagnostic.dialects == (EnumSqlDialect.MYSQL,)
        assert diagnostic.format_message() == (
            "STATUS (App\\Entity\\User:$status) is a reserved keyword in "
            "(mysql) and must be quoted or renamed!"
        )

    def test_custom_registry(self) -> None:
        """The registry can be replaced."""
        registry = RegistryReservedKeywords({"USER_NAME": (EnumSqlDialect.SQLITE,)})
        validator = ColumnNameValidator(EnumNamingScheme.SNAKE, registry=registry)
        metadata = StubMappingMetadata({"userName": column("userName", "user_name")})
        (diagnostic,) = validator.check_property(metadata, OWNER, "userName")
        assert diagnostic.keyword == "USER_NAME"


class TestJoinColumns:
    """Tests for the join column quoting check."""

    @pytest.mark.parametrize("scheme", list(EnumNamingScheme))
    def test_quoted_join_column(self, scheme: EnumNamingScheme) -> None:
        """A quoted join column fails under every scheme."""
        metadata = StubMappingMetadata(
            join_columns={"group": join_column("group", "group_id", quoted=True)}
        )
        assert check(metadata, "group", scheme) == [
            ModelDiagnostic(
                kind=EnumDiagnosticKind.JOIN_COLUMN_QUOTING,
                class_name=OWNER,
                property_name="group",
                actual="group_id",
            )
        ]

    def test_unquoted_join_column(self) -> None:
        metadata = StubMappingMetadata(
            join_columns={"group": join_column("group", "group_id")}
        )
        assert check(metadata, "group") == []

    def test_join_column_without_name(self) -> None:
        """The check only applies to declared names."""
        metadata = StubMappingMetadata(
            join_columns={"group": join_column("group", None, quoted=True)}
        )
        assert check(metadata, "group") == []

    def test_join_column_name_is_not_convention_checked(self) -> None:
        """Join column names are only checked for quoting."""
        metadata = StubMappingMetadata(
            join_columns={"group": join_column("group", "groupId")}
        )
        assert check(metadata, "group") == []

    def test_join_column_of_only_quotes(
        self, make_unit: Callable[..., ModelSourceUnit]
    ) -> None:
        """A join column named only by backticks is still quoted."""
        unit = make_unit(
            "<?php\nuse Doctrine\\ORM\\Mapping as ORM;\n"
            "class Sample { #[ORM\\JoinColumn(name: '``')] private $owner; }\n"
        )
        report = ColumnNameValidator().validate_source(unit)
        assert [d.format_message() for d in report.diagnostics] == [
            "Sample:$owner join column name is quoted, "
            "but join columns must not be quoted!"
        ]

    def test_column_and_join_column_together(self) -> None:
        """Every check runs; nothing short-circuits."""
        metadata = StubMappingMetadata(
            columns={"owner": column("owner", "ownerRef")},
            join_columns={"owner": join_column("owner", "owner_id", quoted=True)},
        )
        kinds = [d.kind for d in check(metadata, "owner")]
        assert kinds == [
            EnumDiagnosticKind.NAMING_CONVENTION,
            EnumDiagnosticKind.JOIN_COLUMN_QUOTING,
        ]


class TestValidateFixtures:
    """End-to-end validation of the fixture entities."""

    def test_snake_case(self, entities_dir: Path) -> None:
        validator = ColumnNameValidator(EnumNamingScheme.SNAKE)
        report = validator.validate_patterns([str(entities_dir / "*.php")])

        assert [d.format_message() for d in report.diagnostics] == [
            "LIMIT (LegacyOrder:$limit) is a reserved keyword in "
            "(postgresql, mysql, sqlite) and must be quoted or renamed!",
            "LegacyOrderLine:$lineNumber column name should be line_number, "
            "but is lineNumber!",
            "App\\Entity\\Product:$productName column name should be product_name, "
            "but is productName!",
            "SELECT (App\\Entity\\Product:$select) is a reserved keyword in "
            "(postgresql, mysql, sqlite) and must be quoted or renamed!",
            "App\\Entity\\Product:$category join column name is quoted, "
            "but join columns must not be quoted!",
            "App\\Entity\\Product:$createdAt column name should be created_at, "
            "but is createdAt!",
        ]
        assert report.failures == []
        assert report.files_scanned == 3
        assert report.classes_scanned == 4
        assert report.properties_scanned == 16
        assert report.exit_code == 1

    def test_camel_case(self, entities_dir: Path) -> None:
        validator = ColumnNameValidator(EnumNamingScheme.CAMEL)
        report = validator.validate_patterns([str(entities_dir / "*.php")])

        assert [d.format_message() for d in report.diagnostics] == [
            "LegacyOrder:$status column name should be orderStatus, "
            "but is order_status!",
            "LIMIT (LegacyOrder:$limit) is a reserved keyword in "
            "(postgresql, mysql, sqlite) and must be quoted or renamed!",
            "SELECT (App\\Entity\\Product:$select) is a reserved keyword in "
            "(postgresql, mysql, sqlite) and must be quoted or renamed!",
            "App\\Entity\\Product:$category join column name is quoted, "
            "but join columns must not be quoted!",
            "App\\Entity\\User:$userName column name should be userName, "
            "but is user_name!",
        ]

    def test_valid_file(self, entities_dir: Path) -> None:
        report = ColumnNameValidator().validate_files([entities_dir / "User.php"])
        assert report.is_valid
        assert report.exit_code == 0
        assert report.properties_scanned == 5


class TestSourceFailures:
    """Unreadable files and unresolvable classes are skipped and recorded."""

    def test_missing_file(self, tmp_path: Path, entities_dir: Path) -> None:
        missing = tmp_path / "Missing.php"
        report = ColumnNameValidator().validate_files(
            [missing, entities_dir / "User.php"]
        )
        assert len(report.failures) == 1
        failure = report.failures[0]
        assert failure.kind == EnumSourceFailureKind.UNREADABLE_SOURCE
        assert failure.subject == str(missing)
        assert report.files_scanned == 1
        assert report.is_valid

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "Binary.php"
        path.write_bytes(b"<?php class A {} \xff\xfe")
        report = ColumnNameValidator().validate_files([path])
        assert [f.kind for f in report.failures] == [
            EnumSourceFailureKind.UNREADABLE_SOURCE
        ]

    def test_unresolvable_class_is_skipped(
        self, write_php: Callable[[str, str], Path]
    ) -> None:
        path = write_php(
            "Mixed.php",
            "<?php\n"
            "use Doctrine\\ORM\\Mapping as ORM;\n"
            "class Good { #[ORM\\Column(name: 'badName')] private $a; }\n"
            "class Broken\n",
        )
        report = ColumnNameValidator().validate_files([path])
        assert [f.subject for f in report.failures] == ["Broken"]
        assert report.failures[0].kind == EnumSourceFailureKind.CLASS_RESOLUTION
        assert len(report.diagnostics) == 1
        assert report.classes_scanned == 1

    def test_custom_extractor_failure(self, make_unit) -> None:
        """ClassResolutionError from any extractor is recorded."""

        class FailingMetadata(StubMappingMetadata):
            def get_declared_properties(self, class_name: str) -> tuple[str, ...]:
                raise ClassResolutionError(
                    "boom", class_name=class_name, reason="autoload failed"
                )

        validator = ColumnNameValidator(
            extractor_factory=lambda unit: FailingMetadata()
        )
        report = validator.validate_source(make_unit("<?php class A {}"))
        assert report.failures[0].format_message() == (
            "Could not resolve class A: autoload failed"
        )

    def test_other_errors_propagate(self, make_unit) -> None:
        """Errors other than resolution failures abort the run."""

        class ExplodingMetadata(StubMappingMetadata):
            def get_declared_properties(self, class_name: str) -> tuple[str, ...]:
                raise RuntimeError("unexpected")

        validator = ColumnNameValidator(
            extractor_factory=lambda unit: ExplodingMetadata()
        )
        with pytest.raises(RuntimeError):
            validator.validate_source(make_unit("<?php class A {}"))


class TestProgress:
    """Tests for progress callbacks."""

    def test_progress_messages(self, write_php: Callable[[str, str], Path]) -> None:
        path = write_php(
            "Entity.php",
            "<?php namespace App;\nclass One { private $a; private $b; }\n",
        )
        events: list[tuple[int, str]] = []
        validator = ColumnNameValidator(
            on_progress=lambda level, message: events.append((level, message))
        )
        validator.validate_files([path])
        assert events == [
            (PROGRESS_FILE, f" * Validating {path}"),
            (PROGRESS_CLASS, "    * Validating class App\\One"),
            (PROGRESS_PROPERTY, "       * Validating property a"),
            (PROGRESS_PROPERTY, "       * Validating property b"),
        ]

    def test_progress_does_not_affect_verdict(self, entities_dir: Path) -> None:
        quiet = ColumnNameValidator().validate_patterns([str(entities_dir / "*.php")])
        noisy = ColumnNameValidator(
            on_progress=lambda level, message: None
        ).validate_patterns([str(entities_dir / "*.php")])
        assert quiet.diagnostics == noisy.diagnostics


class TestExpandFilePatterns:
    """Tests for glob expansion."""

    def test_sorted_and_deduplicated(self, entities_dir: Path) -> None:
        files = expand_file_patterns(
            [str(entities_dir / "User.php"), str(entities_dir / "*.php")]
        )
        assert [f.name for f in files] == ["User.php", "Legacy.php", "Product.php"]

    def test_recursive(self, write_php: Callable[[str, str], Path], tmp_path: Path) -> None:
        write_php("a/B.php", "<?php")
        write_php("a/b/A.php", "<?php")
        files = expand_file_patterns([str(tmp_path / "**" / "*.php")])
        assert sorted(f.name for f in files) == ["A.php", "B.php"]

    def test_no_match(self, tmp_path: Path) -> None:
        assert expand_file_patterns([str(tmp_path / "*.php")]) == []

    def test_missing_literal_path_is_kept(self, tmp_path: Path) -> None:
        missing = tmp_path / "Missing.php"
        assert expand_file_patterns([str(missing)]) == [missing]

    def test_missing_literal_path_is_reported(self, tmp_path: Path) -> None:
        missing = tmp_path / "Missing.php"
        report = ColumnNameValidator().validate_patterns([str(missing)])
        (failure,) = report.failures
        assert failure.kind == EnumSourceFailureKind.UNREADABLE_SOURCE
        assert failure.subject == str(missing)

    def test_directories_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "Dir.php").mkdir()
        assert expand_file_patterns([str(tmp_path / "*.php")]) == []

    def test_empty_pattern_list(self) -> None:
        report = ColumnNameValidator().validate_patterns([])
        assert report.is_valid
        assert report.files_scanned == 0


class TestSourceUnits:
    """Validation of in-memory source units."""

    def test_validate_source(self, make_unit: Callable[..., ModelSourceUnit]) -> None:
        unit = make_unit(
            "<?php\nuse Doctrine\\ORM\\Mapping as ORM;\n"
            "class A { #[ORM\\Column(name: 'user')] private $owner; }\n"
        )
        report = ColumnNameValidator().validate_source(unit)
        (diagnostic,) = report.diagnostics
        assert diagnostic.keyword == "USER"
        assert diagnostic.dialects == (EnumSqlDialect.POSTGRESQL, EnumSqlDialect.MYSQL)
