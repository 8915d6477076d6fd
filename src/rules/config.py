from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract.artifacts import METADATA_JSONL
from resolve.ecosystem import (
    BUILTIN_CONTAINERS,
    DEFAULT_PACKAGES,
    DEFAULT_STDLIB_CONTAINERS,
    HOSTED_DOCS_URL,
    PRIMITIVES_CONTAINER,
    STDLIB_DOCS_URL,
    Ecosystem,
)

CONFIG_FILENAME = "doclinks.toml"


class EcosystemConfig(BaseModel):
    """Where containers outside the current package are documented."""

    model_config = ConfigDict(extra="forbid")

    hosted_docs_url: str = Field(
        default=HOSTED_DOCS_URL,
        description="Base URL of hosted package docs ({base}{package}/...)",
    )
    stdlib_docs_url: str = Field(
        default=STDLIB_DOCS_URL,
        description="Base URL of standard-library module docs",
    )
    stdlib_containers: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_STDLIB_CONTAINERS),
        description="Lowercase containers documented on the stdlib docs site",
    )
    primitives_container: str = Field(
        default=PRIMITIVES_CONTAINER,
        description="Container whose package hosts the typespecs page",
    )
    builtin_containers: list[str] = Field(
        default_factory=lambda: list(BUILTIN_CONTAINERS),
        description="Implicitly imported containers tried for local functions",
    )
    packages: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_PACKAGES),
        description="Container -> owning package overrides",
    )

    @field_validator("hosted_docs_url", "stdlib_docs_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.endswith("/"):
            msg = f"Base URL must end with '/': {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("stdlib_containers")
    @classmethod
    def validate_stdlib_containers(cls, v: list[str]) -> list[str]:
        for container in v:
            if container != container.lower():
                msg = f"Standard-library container must be lowercase: {container!r}"
                raise ValueError(msg)
        return v


class DocLinksConfig(BaseModel):
    """Configuration for reference autolinking."""

    model_config = ConfigDict(extra="forbid")

    package: str | None = Field(
        default=None,
        description="Package the documentation is generated for",
    )
    ext: str = Field(default=".html", description="Output file extension")
    metadata: str = Field(
        default=METADATA_JSONL,
        description="Metadata artifact path, relative to the project root",
    )
    skip_undefined_reference_warnings_on: list[str] = Field(
        default_factory=list,
        description="Item or container ids whose missing references are not reported",
    )
    ecosystem: EcosystemConfig = Field(
        default_factory=EcosystemConfig,
        description="Provenance and package ownership settings",
    )

    @field_validator("ext")
    @classmethod
    def validate_ext(cls, v: str) -> str:
        if not v.startswith("."):
            msg = f"ext must start with '.': {v!r}"
            raise ValueError(msg)
        return v

    def build_ecosystem(self, packages: dict[str, str] | None = None) -> Ecosystem:
        """Build the runtime ecosystem; configured packages win over ``packages``."""
        eco = self.ecosystem
        return Ecosystem(
            packages={**(packages or {}), **eco.packages},
            stdlib_containers=frozenset(eco.stdlib_containers),
            hosted_docs_url=eco.hosted_docs_url,
            stdlib_docs_url=eco.stdlib_docs_url,
            primitives_container=eco.primitives_container,
            builtin_containers=tuple(eco.builtin_containers),
        )


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_metadata_path(root: Path, metadata: str) -> Path:
    """Resolve a config-provided metadata path safely within the project root.

    The path must be non-empty and relative, and must stay inside the root
    after resolution.
    """
    if not metadata:
        msg = "metadata must be a non-empty relative path"
        raise ConfigError(msg)

    metadata_path = Path(metadata)
    if metadata.startswith("~") or metadata_path.is_absolute():
        msg = "metadata must be a relative path within the project root"
        raise ConfigError(msg)

    resolved_root = root.resolve()
    resolved = (resolved_root / metadata_path).resolve()
    if not resolved.is_relative_to(resolved_root):
        msg = f"metadata path '{metadata}' escapes the project root"
        raise ConfigError(msg)

    return resolved


def load_config(root: Path) -> DocLinksConfig:
    """Load configuration from doclinks.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return DocLinksConfig()

    try:
        with config_path.open("rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return DocLinksConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocLinksConfig",
    "EcosystemConfig",
    "load_config",
    "resolve_metadata_path",
]
