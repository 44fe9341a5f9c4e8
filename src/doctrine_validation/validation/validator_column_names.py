# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Column name validation for Doctrine entity classes.

For every class found in the scanned files and every property of that class:

1. No column mapping: the property is skipped.
2. The column name (declared, or the property name when undeclared) must
   equal its conversion to the active naming scheme.
3. An unquoted column name must not be a reserved SQL keyword.
4. A declared join column name must not be quoted, whatever the scheme.

Validation never short-circuits. Every violation is recorded as a
diagnostic and the run fails if at least one diagnostic was recorded.

Unreadable files and classes that cannot be resolved are recorded as
failures and skipped; they do not fail the run by themselves. Any other
error propagates to the caller.

Usage:
    >>> validator = ColumnNameValidator(EnumNamingScheme.SNAKE)
    >>> report = validator.validate_patterns(["src/Entity/*.php"])
    >>> report.exit_code
    0
"""

from __future__ import annotations

import glob
import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Final

from doctrine_validation.enums import (
    EnumDiagnosticKind,
    EnumNamingScheme,
    EnumSourceFailureKind,
)
from doctrine_validation.errors import ClassResolutionError, UnreadableSourceError
from doctrine_validation.extraction import SourceMappingExtractor
from doctrine_validation.models import (
    ModelDiagnostic,
    ModelSourceFailure,
    ModelSourceUnit,
    ModelValidationReport,
)
from doctrine_validation.protocols import ProtocolMappingMetadata
from doctrine_validation.registry import (
    RegistryReservedKeywords,
    get_reserved_keyword_registry,
)
from doctrine_validation.scanning import iter_class_names

logger = logging.getLogger(__name__)

# Progress detail levels passed to the progress callback.
PROGRESS_FILE: Final[int] = 1
PROGRESS_CLASS: Final[int] = 2
PROGRESS_PROPERTY: Final[int] = 3

ExtractorFactory = Callable[[ModelSourceUnit], ProtocolMappingMetadata]
ProgressCallback = Callable[[int, str], None]


def expand_file_patterns(patterns: Iterable[str]) -> list[Path]:
    """Expand glob patterns into an ordered list of files.

    Matches of each pattern are sorted; patterns keep their input order and
    a file matched by several patterns is listed once. ``**`` matches
    directories recursively. A literal path without glob characters is kept
    even when it does not exist, so reading it reports the file as unreadable.
    """
    files: list[Path] = []
    seen: set[Path] = set()
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, recursive=True))
        if not matches:
            if not glob.has_magic(pattern):
                matches = [pattern]
            else:
                logger.info("Pattern %s matched no files", pattern)
        for match in matches:
            path = Path(match)
            if path.is_dir() or path in seen:
                continue
            seen.add(path)
            files.append(path)
    return files


class ColumnNameValidator:
    """Checks column and join column names of entity properties.

    Args:
        naming_scheme: Naming convention every column name must follow.
        extractor_factory: Builds the mapping metadata source for a file.
        registry: Reserved keyword lookup.
        on_progress: Called with a detail level and a message as files,
            classes and properties are visited.
    """

    def __init__(
        self,
        naming_scheme: EnumNamingScheme = EnumNamingScheme.SNAKE,
        *,
        extractor_factory: ExtractorFactory = SourceMappingExtractor.from_source,
        registry: RegistryReservedKeywords | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self._naming_scheme = naming_scheme
        self._extractor_factory = extractor_factory
        self._registry = (
            registry if registry is not None else get_reserved_keyword_registry()
        )
        self._on_progress = on_progress

    @property
    def naming_scheme(self) -> EnumNamingScheme:
        return self._naming_scheme

    def validate_patterns(self, patterns: Iterable[str]) -> ModelValidationReport:
        """Validate every file matched by the glob patterns."""
        return self.validate_files(expand_file_patterns(patterns))

    def validate_files(self, paths: Sequence[str | Path]) -> ModelValidationReport:
        """Validate files in the given order."""
        report = ModelValidationReport()
        for path in paths:
            self._progress(PROGRESS_FILE, f" * Validating {path}")
            try:
                unit = ModelSourceUnit.read(path)
            except UnreadableSourceError as e:
                logger.warning("Skipping unreadable file %s: %s", e.path, e.reason)
                report.failures.append(
                    ModelSourceFailure(
                        kind=EnumSourceFailureKind.UNREADABLE_SOURCE,
                        subject=e.path,
                        reason=e.reason or e.message,
                    )
                )
                continue
            report.merge(self.validate_source(unit))
        return report

    def validate_source(self, unit: ModelSourceUnit) -> ModelValidationReport:
        """Validate the classes declared in one source unit."""
        report = ModelValidationReport(files_scanned=1)
        extractor = self._extractor_factory(unit)

        for class_name in iter_class_names(unit.text, origin=unit.path):
            self._progress(PROGRESS_CLASS, f"    * Validating class {class_name}")
            try:
                properties = extractor.get_declared_properties(class_name)
            except ClassResolutionError as e:
                logger.warning("Skipping class %s: %s", class_name, e.reason)
                report.failures.append(
                    ModelSourceFailure(
                        kind=EnumSourceFailureKind.CLASS_RESOLUTION,
                        subject=class_name,
                        reason=e.reason or e.message,
                    )
                )
                continue

            report.classes_scanned += 1
            for property_name in properties:
                self._progress(
                    PROGRESS_PROPERTY, f"       * Validating property {property_name}"
                )
                report.properties_scanned += 1
                report.diagnostics.extend(
                    self.check_property(extractor, class_name, property_name)
                )

        logger.debug(
            "%s: %d diagnostics", unit.path, len(report.diagnostics)
        )
        return report

    def check_property(
        self,
        extractor: ProtocolMappingMetadata,
        class_name: str,
        property_name: str,
    ) -> list[ModelDiagnostic]:
        """Return the diagnostics for a single property."""
        diagnostics: list[ModelDiagnostic] = []

        column = extractor.get_column_mapping(class_name, property_name)
        if column is not None:
            current_name = column.current_name
            expected_name = self._naming_scheme.convert(current_name)
            if expected_name != current_name:
                diagnostics.append(
                    ModelDiagnostic(
                        kind=EnumDiagnosticKind.NAMING_CONVENTION,
                        class_name=class_name,
                        property_name=property_name,
                        expected=expected_name,
                        actual=current_name,
                    )
                )

            dialects = self._registry.lookup(current_name)
            if dialects and not column.quoted:
                diagnostics.append(
                    ModelDiagnostic(
                        kind=EnumDiagnosticKind.RESERVED_KEYWORD,
                        class_name=class_name,
                        property_name=property_name,
                        actual=current_name,
                        keyword=current_name.upper(),
                        dialects=dialects,
                    )
                )

        join_column = extractor.get_join_column_mapping(class_name, property_name)
        if join_column is not None and join_column.has_declared_name and join_column.quoted:
            diagnostics.append(
                ModelDiagnostic(
                    kind=EnumDiagnosticKind.JOIN_COLUMN_QUOTING,
                    class_name=class_name,
                    property_name=property_name,
                    actual=join_column.declared_name,
                )
            )

        return diagnostics

    def _progress(self, level: int, message: str) -> None:
        logger.debug(message.strip())
        if self._on_progress is not None:
            self._on_progress(level, message)


__all__: list[str] = [
    "ColumnNameValidator",
    "ExtractorFactory",
    "PROGRESS_CLASS",
    "PROGRESS_FILE",
    "PROGRESS_PROPERTY",
    "ProgressCallback",
    "expand_file_patterns",
]
