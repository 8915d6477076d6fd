"""Metadata artifact contract definitions.

This module defines the stable boundary between the process that extracts
container metadata and the reference registry that consumes it.
"""

from __future__ import annotations

# Metadata artifact schema version (metadata-v1).
METADATA_SCHEMA_VERSION = 1

# Default metadata artifact filename.
METADATA_JSONL = "metadata.jsonl"

# ContainerRecord.source value for bare export lists.
SOURCE_EXPORTS = "exports"

__all__ = [
    "METADATA_JSONL",
    "METADATA_SCHEMA_VERSION",
    "SOURCE_EXPORTS",
]
