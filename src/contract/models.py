"""Metadata artifact records for per-container documentation surfaces."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, NonNegativeInt

from contract.artifacts import METADATA_SCHEMA_VERSION

EntryKind = Literal["function", "macro", "type", "callback", "macrocallback"]
MetadataSource = Literal["docs", "exports"]


class DocEntryRecord(BaseModel):
    """One documented entity of a container."""

    kind: EntryKind
    name: str
    arity: NonNegativeInt
    documented: bool = Field(
        default=True, description="False when the entry's docs are hidden"
    )
    defaults: NonNegativeInt = Field(
        default=0, description="Number of trailing optional parameters"
    )


class ContainerRecord(BaseModel):
    """Schema for metadata.jsonl records."""

    schema_version: int = Field(default=METADATA_SCHEMA_VERSION)
    container: str = Field(min_length=1)
    package: str | None = None
    source: MetadataSource = "docs"
    hidden: bool = Field(
        default=False, description="Container docs are hidden as a whole"
    )
    entries: list[DocEntryRecord] = Field(default_factory=list)
    exports: list[tuple[str, NonNegativeInt]] = Field(
        default_factory=list,
        description="Bare (name, arity) export list for containers without docs",
    )


__all__ = ["ContainerRecord", "DocEntryRecord", "EntryKind", "MetadataSource"]
