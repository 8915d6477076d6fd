"""Stable metadata contract surface for doclinks.

Treat these exports as the authoritative boundary between metadata
extraction and reference resolution.
"""

from contract.artifacts import (
    METADATA_JSONL,
    METADATA_SCHEMA_VERSION,
    SOURCE_EXPORTS,
)


def __getattr__(name: str) -> object:
    if name in {"ContainerRecord", "DocEntryRecord"}:
        from contract.models import ContainerRecord, DocEntryRecord

        return {
            "ContainerRecord": ContainerRecord,
            "DocEntryRecord": DocEntryRecord,
        }[name]

    if name in {"ValidationMessage", "ValidationResult", "validate_metadata"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_metadata,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_metadata": validate_metadata,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "METADATA_JSONL",
    "METADATA_SCHEMA_VERSION",
    "SOURCE_EXPORTS",
    "ContainerRecord",
    "DocEntryRecord",
    "ValidationMessage",
    "ValidationResult",
    "validate_metadata",
]
