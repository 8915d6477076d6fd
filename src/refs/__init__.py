"""Structured references and the reference registry."""

from refs.metadata import (
    BareExports,
    ContainerMetadata,
    DocEntry,
    MetadataError,
    MetadataIndex,
    MetadataLoader,
    NotFound,
    RichDocs,
    entries_from_metadata,
)
from refs.models import (
    BasicTypeRef,
    BuiltInTypeRef,
    EntryKey,
    Kind,
    LocalRef,
    MixTaskRef,
    ModuleKey,
    ModuleRef,
    Ref,
    RegistryKey,
    RemoteRef,
)
from refs.registry import RefRegistry

__all__ = [
    "BareExports",
    "BasicTypeRef",
    "BuiltInTypeRef",
    "ContainerMetadata",
    "DocEntry",
    "EntryKey",
    "Kind",
    "LocalRef",
    "MetadataError",
    "MetadataIndex",
    "MetadataLoader",
    "MixTaskRef",
    "ModuleKey",
    "ModuleRef",
    "NotFound",
    "RefRegistry",
    "Ref",
    "RegistryKey",
    "RemoteRef",
    "RichDocs",
    "entries_from_metadata",
]
