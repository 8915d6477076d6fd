"""Reference registry: lazily filled visibility cache over a metadata loader."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from refs.metadata import BareExports, entries_from_metadata
from refs.models import EntryKey

if TYPE_CHECKING:
    from collections.abc import Mapping

    from refs.metadata import ContainerMetadata, MetadataLoader
    from refs.models import RegistryKey

log = logging.getLogger(__name__)


class RefRegistry:
    """Answers whether a container or entity is public.

    A miss loads the whole container once and caches every entry it yields.
    Keys the batch did not mention are answered from the recorded load
    outcome, so a container is never loaded twice. The loader runs outside
    the lock; concurrent loads of one container insert identical batches.
    """

    def __init__(self, loader: MetadataLoader) -> None:
        self._loader = loader
        self._entries: dict[RegistryKey, bool] = {}
        self._exports_only: dict[str, bool] = {}
        self._lock = threading.Lock()

    def is_public(self, key: RegistryKey) -> bool:
        with self._lock:
            cached = self._entries.get(key)
            exports_only = self._exports_only.get(key.container)
        if cached is not None:
            return cached

        if exports_only is None:
            exports_only = self._load(key.container)
            with self._lock:
                cached = self._entries.get(key)
            if cached is not None:
                return cached

        # Bare export lists cannot enumerate types or callbacks.
        value = exports_only and isinstance(key, EntryKey) and key.kind != "function"
        self.insert({key: value})
        return value

    def insert(self, entries: Mapping[RegistryKey, bool]) -> None:
        with self._lock:
            self._entries.update(entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._exports_only.clear()

    def _load(self, container: str) -> bool:
        metadata: ContainerMetadata = self._loader.load(container)
        batch = entries_from_metadata(container, metadata)
        exports_only = isinstance(metadata, BareExports)
        log.debug(
            "loaded %s metadata for %s (%d entries)",
            type(metadata).__name__,
            container,
            len(batch),
        )
        with self._lock:
            self._entries.update(batch)
            self._exports_only[container] = exports_only
        return exports_only

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["RefRegistry"]
