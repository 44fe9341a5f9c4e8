# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Data models for doctrine column name validation."""

from doctrine_validation.models.model_annotation import ModelAnnotation
from doctrine_validation.models.model_class_declaration import ModelClassDeclaration
from doctrine_validation.models.model_column_mapping import (
    ModelColumnMapping,
    ModelJoinColumnMapping,
)
from doctrine_validation.models.model_diagnostic import ModelDiagnostic
from doctrine_validation.models.model_php_token import ModelPhpToken
from doctrine_validation.models.model_property_declaration import (
    ModelPropertyDeclaration,
)
from doctrine_validation.models.model_source_failure import ModelSourceFailure
from doctrine_validation.models.model_source_unit import ModelSourceUnit
from doctrine_validation.models.model_validation_report import ModelValidationReport
from doctrine_validation.models.model_validator_config import ModelValidatorConfig

__all__: list[str] = [
    "ModelAnnotation",
    "ModelClassDeclaration",
    "ModelColumnMapping",
    "ModelDiagnostic",
    "ModelJoinColumnMapping",
    "ModelPhpToken",
    "ModelPropertyDeclaration",
    "ModelSourceFailure",
    "ModelSourceUnit",
    "ModelValidationReport",
    "ModelValidatorConfig",
]
