"""Documentation-session wiring: config, metadata, registry and resolver."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from refs.metadata import MetadataIndex
from refs.registry import RefRegistry
from resolve.context import ResolutionContext
from resolve.resolver import LinkResolver
from rules.config import load_config, resolve_metadata_path

if TYPE_CHECKING:
    from pathlib import Path

    from resolve.resolver import DiagnosticSink
    from rules.config import DocLinksConfig

log = logging.getLogger(__name__)


@dataclass
class DocSession:
    """Owns the registry for one documentation run.

    Create one per run and drop it afterwards; nothing is shared between
    sessions.
    """

    config: DocLinksConfig
    index: MetadataIndex
    registry: RefRegistry
    resolver: LinkResolver

    def context(
        self,
        current_container: str | None = None,
        *,
        id: str | None = None,
        module_id: str | None = None,
    ) -> ResolutionContext:
        return ResolutionContext(
            package=self.config.package,
            current_container=current_container,
            id=id,
            module_id=module_id if module_id is not None else current_container,
            ext=self.config.ext,
            skip_undefined_reference_warnings_on=frozenset(
                self.config.skip_undefined_reference_warnings_on
            ),
        )


def open_session(
    *,
    root: Path,
    config: DocLinksConfig | None = None,
    index: MetadataIndex | None = None,
    sink: DiagnosticSink | None = None,
) -> DocSession:
    """Build a session for the project at ``root``.

    Args:
        root: Project root holding doclinks.toml and the metadata artifact
        config: Optional configuration; loaded from ``root`` when omitted
        index: Optional metadata index; read from the configured artifact
            when omitted (an absent artifact gives an empty index)
        sink: Optional diagnostic sink; defaults to logging warnings

    Returns:
        DocSession with a fresh registry.
    """
    if config is None:
        config = load_config(root)

    if index is None:
        metadata_path = resolve_metadata_path(root, config.metadata)
        if metadata_path.is_file():
            index = MetadataIndex.from_jsonl(metadata_path)
            log.info("loaded %d containers from %s", len(index), metadata_path)
        else:
            log.info("no metadata artifact at %s", metadata_path)
            index = MetadataIndex()

    registry = RefRegistry(index)
    ecosystem = config.build_ecosystem(index.packages)
    resolver = LinkResolver(registry, ecosystem, sink)
    return DocSession(config=config, index=index, registry=registry, resolver=resolver)


__all__ = ["DocSession", "open_session"]
