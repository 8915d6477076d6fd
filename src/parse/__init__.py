"""Parsing utilities for reference text."""

from parse.reftext import (
    BASIC_TYPES,
    BUILT_IN_TYPES,
    ParseMode,
    container_from_text,
    local_type_ref,
    parse_ref,
)

__all__ = [
    "BASIC_TYPES",
    "BUILT_IN_TYPES",
    "ParseMode",
    "container_from_text",
    "local_type_ref",
    "parse_ref",
]
