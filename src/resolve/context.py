"""Per-item resolution context."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResolutionContext:
    """Immutable configuration for resolving one documentation item.

    Attributes:
        package: Package the docs are being generated for. Links into other
            packages get an absolute hosted-docs prefix.
        current_container: Container being documented; local references
            resolve against it.
        id: Id of the item being documented (e.g. "String.upcase/2"),
            used in diagnostics.
        module_id: Id of the container being documented (e.g. "String").
        ext: Output file extension.
        skip_undefined_reference_warnings_on: Ids for which missing-reference
            diagnostics are suppressed.
    """

    package: str | None = None
    current_container: str | None = None
    id: str | None = None
    module_id: str | None = None
    ext: str = ".html"
    skip_undefined_reference_warnings_on: frozenset[str] = field(
        default_factory=frozenset
    )

    def warnings_suppressed(self) -> bool:
        skipped = self.skip_undefined_reference_warnings_on
        return self.module_id in skipped or self.id in skipped


__all__ = ["ResolutionContext"]
