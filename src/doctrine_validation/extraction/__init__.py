# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mapping metadata extraction from PHP entity sources."""

from doctrine_validation.extraction.annotation_parser import (
    parse_arguments,
    parse_attribute_group,
    parse_doc_comment,
    split_top_level,
    unquote_string,
)
from doctrine_validation.extraction.extractor_source_mapping import (
    COLUMN_ANNOTATION,
    JOIN_COLUMN_ANNOTATION,
    PROPERTY_MODIFIERS,
    QUOTE_CHARACTER,
    SourceMappingExtractor,
)

__all__: list[str] = [
    "COLUMN_ANNOTATION",
    "JOIN_COLUMN_ANNOTATION",
    "PROPERTY_MODIFIERS",
    "QUOTE_CHARACTER",
    "SourceMappingExtractor",
    "parse_arguments",
    "parse_attribute_group",
    "parse_doc_comment",
    "split_top_level",
    "unquote_string",
]
