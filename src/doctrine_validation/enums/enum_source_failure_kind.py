# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Classification of files and classes skipped during a validation run."""

from __future__ import annotations

from enum import Enum

__all__: list[str] = [
    "EnumSourceFailureKind",
]


class EnumSourceFailureKind(str, Enum):
    """Why a file or class was skipped."""

    UNREADABLE_SOURCE = "unreadable_source"
    CLASS_RESOLUTION = "class_resolution"
