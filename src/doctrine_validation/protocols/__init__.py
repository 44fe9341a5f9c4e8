# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol interfaces for doctrine column name validation."""

from doctrine_validation.protocols.protocol_mapping_metadata import (
    ProtocolMappingMetadata,
)

__all__: list[str] = ["ProtocolMappingMetadata"]
