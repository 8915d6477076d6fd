"""Link resolution for structured references."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING
from urllib.parse import quote

from parse.reftext import parse_ref
from refs.models import (
    BasicTypeRef,
    BuiltInTypeRef,
    EntryKey,
    LocalRef,
    MixTaskRef,
    ModuleKey,
    ModuleRef,
    RemoteRef,
    ref_prefix,
)
from resolve.ecosystem import Ecosystem, Provenance

if TYPE_CHECKING:
    from parse.reftext import ParseMode
    from refs.models import Kind, Ref
    from refs.registry import RefRegistry
    from resolve.context import ResolutionContext

log = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]

CONTENT_ANCHOR = "#content"

# Reserved URI characters are kept as written in anchors.
_ANCHOR_SAFE = ":/?#[]@!$&'()*+,;="


def _log_diagnostic(message: str) -> None:
    log.warning("%s", message)


def encode_name(name: str) -> str:
    return quote(name, safe=_ANCHOR_SAFE)


def local_anchor(kind: Kind, name: str, arity: int) -> str:
    """Anchor of an entity on its container's page, without the ``#``."""
    return f"{ref_prefix(kind)}{encode_name(name)}/{arity}"


def stdlib_fragment(kind: Kind, name: str, arity: int) -> str:
    if kind == "function":
        return f"{name}-{arity}"
    if kind == "callback":
        return f"Module:{name}-{arity}"
    if kind == "type":
        return f"type-{name}"
    raise AssertionError(kind)


class LinkResolver:
    """Turns structured references into URLs.

    ``resolve`` returns a URL, an in-page anchor, ``""`` when the reference
    points at the current page and no navigation is needed, or None when
    there is nothing to link to. Likely typos (a public container without the
    named entity) are reported through ``sink``.
    """

    def __init__(
        self,
        registry: RefRegistry,
        ecosystem: Ecosystem | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.registry = registry
        self.ecosystem = ecosystem or Ecosystem()
        self._sink = sink or _log_diagnostic

    def resolve_text(
        self,
        text: str,
        context: ResolutionContext,
        mode: ParseMode = "regular",
    ) -> str | None:
        ref = parse_ref(text, mode, context.current_container)
        if ref is None:
            return None
        return self.resolve(ref, context)

    def resolve(self, ref: Ref, context: ResolutionContext) -> str | None:
        if isinstance(ref, (ModuleRef, MixTaskRef)):
            return self._resolve_module(ref.container, context)

        if isinstance(ref, BasicTypeRef):
            return self._primitives_url("basic-types", context)

        if isinstance(ref, BuiltInTypeRef):
            return self._primitives_url("built-in-types", context)

        if isinstance(ref, LocalRef):
            return self._resolve_local(ref, context)

        if isinstance(ref, RemoteRef):
            return self._resolve_remote(ref, context)

        raise AssertionError(ref)

    def _resolve_module(self, container: str, context: ResolutionContext) -> str | None:
        if container == context.current_container:
            if self.ecosystem.classify(container) is Provenance.OWN:
                return CONTENT_ANCHOR
            return ""

        if not self.registry.is_public(ModuleKey(container)):
            return None

        provenance = self.ecosystem.classify(container)
        if provenance is Provenance.OWN:
            prefix = self.ecosystem.package_prefix(context.package, container)
            return f"{prefix}{container}{context.ext}"
        if provenance is Provenance.STDLIB:
            return f"{self.ecosystem.stdlib_docs_url}{container}.html"
        return None

    def _resolve_local(self, ref: LocalRef, context: ResolutionContext) -> str | None:
        key = EntryKey(ref.kind, ref.container, ref.name, ref.arity)
        if self.registry.is_public(key):
            return "#" + local_anchor(ref.kind, ref.name, ref.arity)

        if ref.kind != "function":
            return None

        # Functions of the implicitly imported containers are callable unqualified.
        for container in self.ecosystem.builtin_containers:
            if self.registry.is_public(
                EntryKey(ref.kind, container, ref.name, ref.arity)
            ):
                return self._remote_url(
                    RemoteRef(ref.kind, container, ref.name, ref.arity), context
                )
        return None

    def _resolve_remote(
        self, ref: RemoteRef, context: ResolutionContext
    ) -> str | None:
        key = EntryKey(ref.kind, ref.container, ref.name, ref.arity)
        if self.registry.is_public(key):
            return self._remote_url(ref, context)

        if self.registry.is_public(ModuleKey(ref.container)):
            self._maybe_warn(ref, context)
        return None

    def _remote_url(self, ref: RemoteRef, context: ResolutionContext) -> str | None:
        provenance = self.ecosystem.classify(ref.container)
        if provenance is Provenance.OWN:
            prefix = self.ecosystem.package_prefix(context.package, ref.container)
            anchor = local_anchor(ref.kind, ref.name, ref.arity)
            return f"{prefix}{ref.container}{context.ext}#{anchor}"
        if provenance is Provenance.STDLIB:
            fragment = stdlib_fragment(ref.kind, ref.name, ref.arity)
            return f"{self.ecosystem.stdlib_docs_url}{ref.container}.html#{fragment}"
        return None

    def _primitives_url(self, anchor: str, context: ResolutionContext) -> str:
        container = self.ecosystem.primitives_container
        prefix = self.ecosystem.package_prefix(context.package, container)
        return f"{prefix}typespecs{context.ext}#{anchor}"

    def _maybe_warn(self, ref: RemoteRef, context: ResolutionContext) -> None:
        if context.warnings_suppressed():
            return
        container = ref.container
        if self.ecosystem.classify(container) is not Provenance.OWN:
            container = f":{container}"
        target = f"{ref_prefix(ref.kind)}{container}.{ref.name}/{ref.arity}"
        self._sink(
            f"documentation references {ref.kind} {target} but it doesn't exist "
            f"or isn't public (parsing {context.id} docs)"
        )


__all__ = [
    "CONTENT_ANCHOR",
    "DiagnosticSink",
    "LinkResolver",
    "encode_name",
    "local_anchor",
    "stdlib_fragment",
]
