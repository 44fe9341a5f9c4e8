# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model for a file or class skipped during validation."""

from __future__ import annotations

from dataclasses import dataclass

from doctrine_validation.enums import EnumSourceFailureKind

__all__: list[str] = [
    "ModelSourceFailure",
]


@dataclass(frozen=True)
class ModelSourceFailure:
    """A file that could not be read or a class that could not be resolved.

    Attributes:
        kind: Why the subject was skipped.
        subject: File path or fully qualified class name.
        reason: Human-readable description of the failure.
    """

    kind: EnumSourceFailureKind
    subject: str
    reason: str

    def format_message(self) -> str:
        """Render the failure as a single report line."""
        if self.kind == EnumSourceFailureKind.UNREADABLE_SOURCE:
            return f"Could not read {self.subject}: {self.reason}"
        return f"Could not resolve class {self.subject}: {self.reason}"
