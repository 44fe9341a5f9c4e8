# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model for the aggregate result of a validation run."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from doctrine_validation.enums import EnumDiagnosticKind
from doctrine_validation.models.model_diagnostic import ModelDiagnostic
from doctrine_validation.models.model_source_failure import ModelSourceFailure

__all__: list[str] = [
    "ModelValidationReport",
]


@dataclass
class ModelValidationReport:
    """Diagnostics and skipped sources collected over a validation run.

    Entries are only ever appended, in input-file, declaration and property
    order.

    Attributes:
        diagnostics: Recorded column name violations.
        failures: Files and classes that were skipped.
        files_scanned: Number of files read successfully.
        classes_scanned: Number of classes whose properties were checked.
        properties_scanned: Number of properties checked.
    """

    diagnostics: list[ModelDiagnostic] = field(default_factory=list)
    failures: list[ModelSourceFailure] = field(default_factory=list)
    files_scanned: int = 0
    classes_scanned: int = 0
    properties_scanned: int = 0

    @property
    def is_valid(self) -> bool:
        """True if no diagnostic was recorded."""
        return not self.diagnostics

    @property
    def exit_code(self) -> int:
        """Process exit status for this report."""
        return 0 if self.is_valid else 1

    def count_by_kind(self) -> dict[EnumDiagnosticKind, int]:
        """Number of diagnostics per kind, omitting kinds with none."""
        counts = Counter(diagnostic.kind for diagnostic in self.diagnostics)
        return {kind: counts[kind] for kind in EnumDiagnosticKind if counts[kind]}

    def merge(self, other: ModelValidationReport) -> None:
        """Append another report's entries and counters to this one."""
        self.diagnostics.extend(other.diagnostics)
        self.failures.extend(other.failures)
        self.files_scanned += other.files_scanned
        self.classes_scanned += other.classes_scanned
        self.properties_scanned += other.properties_scanned

    def format_summary(self) -> str:
        """Format the run totals as a single line."""
        verdict = "PASS" if self.is_valid else "FAIL"
        return (
            f"{verdict}: {len(self.diagnostics)} violation(s) in "
            f"{self.files_scanned} file(s), {self.classes_scanned} class(es), "
            f"{self.properties_scanned} property(ies); "
            f"{len(self.failures)} skipped"
        )
