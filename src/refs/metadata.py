"""Metadata loader contract and the file-backed metadata index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

import orjson
from pydantic import ValidationError

from contract.artifacts import SOURCE_EXPORTS
from contract.models import ContainerRecord
from refs.models import EntryKey, ModuleKey, normalize_kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from refs.models import RegistryKey


class MetadataError(Exception):
    """Raised when a metadata artifact cannot be read or parsed."""


@dataclass(frozen=True)
class DocEntry:
    """A documented entity as reported by the loader."""

    kind: str
    name: str
    arity: int
    documented: bool = True
    defaults: int = 0


@dataclass(frozen=True)
class RichDocs:
    entries: tuple[DocEntry, ...] = ()
    module_visible: bool = True


@dataclass(frozen=True)
class BareExports:
    """Public (name, arity) pairs with no visibility or kind information."""

    exports: tuple[tuple[str, int], ...] = ()


@dataclass(frozen=True)
class NotFound:
    pass


ContainerMetadata = RichDocs | BareExports | NotFound


class MetadataLoader(Protocol):
    def load(self, container: str) -> ContainerMetadata: ...


def entries_from_metadata(
    container: str, metadata: ContainerMetadata
) -> dict[RegistryKey, bool]:
    """Convert one loader result into the full batch of registry entries.

    Documented entries expand over their optional trailing parameters: an
    entry at arity A with N defaults yields keys for every arity in
    ``[A - N, A]``. Hidden entries are recorded as not public.
    """
    if isinstance(metadata, RichDocs):
        if not metadata.module_visible:
            return {ModuleKey(container): False}
        entries: dict[RegistryKey, bool] = {ModuleKey(container): True}
        for entry in metadata.entries:
            kind = normalize_kind(entry.kind)
            lowest = max(entry.arity - entry.defaults, 0)
            for arity in range(lowest, entry.arity + 1):
                entries[EntryKey(kind, container, entry.name, arity)] = (
                    entry.documented
                )
        return entries

    if isinstance(metadata, BareExports):
        entries = {ModuleKey(container): True}
        for name, arity in metadata.exports:
            entries[EntryKey("function", container, name, arity)] = True
        return entries

    if isinstance(metadata, NotFound):
        return {ModuleKey(container): False}

    raise AssertionError(metadata)


def _record_to_metadata(record: ContainerRecord) -> ContainerMetadata:
    if record.source == SOURCE_EXPORTS:
        return BareExports(
            exports=tuple((name, arity) for name, arity in record.exports)
        )
    return RichDocs(
        entries=tuple(
            DocEntry(
                kind=entry.kind,
                name=entry.name,
                arity=entry.arity,
                documented=entry.documented,
                defaults=entry.defaults,
            )
            for entry in record.entries
        ),
        module_visible=not record.hidden,
    )


class MetadataIndex:
    """In-memory metadata loader built from metadata.jsonl records.

    Also records which package owns each container, for link prefixes.
    """

    def __init__(
        self,
        containers: Mapping[str, ContainerMetadata] | None = None,
        packages: Mapping[str, str] | None = None,
    ) -> None:
        self._containers: dict[str, ContainerMetadata] = dict(containers or {})
        self._packages: dict[str, str] = dict(packages or {})

    @classmethod
    def from_records(cls, records: Iterable[ContainerRecord]) -> MetadataIndex:
        containers: dict[str, ContainerMetadata] = {}
        packages: dict[str, str] = {}
        for record in records:
            containers[record.container] = _record_to_metadata(record)
            if record.package is not None:
                packages[record.container] = record.package
        return cls(containers, packages)

    @classmethod
    def from_jsonl(cls, path: Path) -> MetadataIndex:
        """Load a metadata.jsonl artifact; later records win on duplicates."""
        records: list[ContainerRecord] = []
        try:
            handle = path.open("rb")
        except OSError as exc:
            msg = f"Failed to read metadata file {path}: {exc}"
            raise MetadataError(msg) from exc

        with handle:
            for line_number, raw_line in enumerate(handle, 1):
                line = raw_line.strip()
                if not line:
                    continue
                try:
                    records.append(ContainerRecord.model_validate(orjson.loads(line)))
                except (orjson.JSONDecodeError, ValidationError) as exc:
                    msg = f"Invalid metadata record at {path}:{line_number}: {exc}"
                    raise MetadataError(msg) from exc

        return cls.from_records(records)

    def load(self, container: str) -> ContainerMetadata:
        return self._containers.get(container, NotFound())

    def package_of(self, container: str) -> str | None:
        return self._packages.get(container)

    @property
    def packages(self) -> dict[str, str]:
        return dict(self._packages)

    def __len__(self) -> int:
        return len(self._containers)


__all__ = [
    "BareExports",
    "ContainerMetadata",
    "DocEntry",
    "MetadataError",
    "MetadataIndex",
    "MetadataLoader",
    "NotFound",
    "RichDocs",
    "entries_from_metadata",
]
