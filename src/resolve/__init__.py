"""Reference resolution: context, provenance and URL building."""

from resolve.context import ResolutionContext
from resolve.ecosystem import Ecosystem, Provenance
from resolve.resolver import (
    CONTENT_ANCHOR,
    DiagnosticSink,
    LinkResolver,
    local_anchor,
    stdlib_fragment,
)

__all__ = [
    "CONTENT_ANCHOR",
    "DiagnosticSink",
    "Ecosystem",
    "LinkResolver",
    "Provenance",
    "ResolutionContext",
    "local_anchor",
    "stdlib_fragment",
]
