# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Doctrine Validation Error Classes.

Error Hierarchy:
    DoctrineValidationError (base error)
    ├── UnreadableSourceError -- source file missing or unreadable
    ├── ClassResolutionError -- declared class cannot be introspected
    └── ConfigurationError -- invalid configuration or static asset

Column naming violations are NOT errors. They are recorded as diagnostics
and scanning continues. The errors below are raised for conditions that
prevent a file, a class, or the whole run from being checked.

All errors:
    - Support proper error chaining with ``raise ... from e``
    - Carry structured context for debugging via keyword arguments
"""

from __future__ import annotations


class DoctrineValidationError(Exception):
    """Base error class for doctrine column name validation.

    Example:
        >>> raise DoctrineValidationError("Scan failed", operation="scan_file")
    """

    def __init__(self, message: str, **context: object) -> None:
        """Initialize DoctrineValidationError with structured context.

        Args:
            message: Human-readable error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context: dict[str, object] = dict(context)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class UnreadableSourceError(DoctrineValidationError):
    """Raised when a source file is missing, unreadable or not valid text.

    Fatal for the affected file only; the validator records it and continues
    with the remaining files.

    Attributes:
        path: The file that could not be read.
        reason: Short description of the underlying failure.
    """

    def __init__(self, message: str, *, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        super().__init__(message, path=path)


class ClassResolutionError(DoctrineValidationError):
    """Raised when a scanned class cannot be resolved for introspection.

    Fatal for the affected class only; its properties are skipped.

    Attributes:
        class_name: Fully qualified name of the class.
        reason: Short description of why resolution failed.
    """

    def __init__(self, message: str, *, class_name: str, reason: str = "") -> None:
        self.class_name = class_name
        self.reason = reason
        super().__init__(message, class_name=class_name)


class ConfigurationError(DoctrineValidationError):
    """Raised when configuration or the keyword asset is invalid.

    Example:
        >>> raise ConfigurationError("Unknown dialect 'oracle'", keyword="SELECT")
    """


__all__ = [
    "ClassResolutionError",
    "ConfigurationError",
    "DoctrineValidationError",
    "UnreadableSourceError",
]
