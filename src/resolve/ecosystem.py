"""Provenance classification and package ownership of containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

HOSTED_DOCS_URL = "https://hexdocs.pm/"
STDLIB_DOCS_URL = "http://www.erlang.org/doc/man/"

PRIMITIVES_CONTAINER = "Kernel"
BUILTIN_CONTAINERS: tuple[str, ...] = ("Kernel", "Kernel.SpecialForms")

DEFAULT_PACKAGES: dict[str, str] = {
    "Kernel": "elixir",
    "Kernel.SpecialForms": "elixir",
}

DEFAULT_STDLIB_CONTAINERS: frozenset[str] = frozenset(
    {
        # erts
        "erlang",
        "erl_prim_loader",
        "init",
        "zlib",
        # kernel
        "application",
        "code",
        "disk_log",
        "error_logger",
        "file",
        "gen_tcp",
        "gen_udp",
        "global",
        "inet",
        "logger",
        "net_kernel",
        "os",
        "rpc",
        # stdlib
        "array",
        "base64",
        "binary",
        "calendar",
        "dict",
        "digraph",
        "ets",
        "filelib",
        "filename",
        "gb_sets",
        "gb_trees",
        "gen_event",
        "gen_server",
        "gen_statem",
        "io",
        "io_lib",
        "lists",
        "maps",
        "math",
        "orddict",
        "ordsets",
        "proc_lib",
        "proplists",
        "queue",
        "rand",
        "re",
        "sets",
        "string",
        "supervisor",
        "sys",
        "timer",
        "unicode",
        "uri_string",
        # crypto, ssl
        "crypto",
        "ssl",
    }
)


class Provenance(str, Enum):
    """Where a container's documentation lives."""

    OWN = "own"
    STDLIB = "stdlib"
    NATIVE = "native"


@dataclass(frozen=True)
class Ecosystem:
    """Static knowledge about containers outside the registry.

    Containers with any uppercase character are documented by this tool.
    All-lowercase containers are native; they link to the standard-library
    docs site only when listed in ``stdlib_containers``.
    """

    packages: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PACKAGES))
    stdlib_containers: frozenset[str] = DEFAULT_STDLIB_CONTAINERS
    hosted_docs_url: str = HOSTED_DOCS_URL
    stdlib_docs_url: str = STDLIB_DOCS_URL
    primitives_container: str = PRIMITIVES_CONTAINER
    builtin_containers: tuple[str, ...] = BUILTIN_CONTAINERS

    def classify(self, container: str) -> Provenance:
        if container != container.lower():
            return Provenance.OWN
        if container in self.stdlib_containers:
            return Provenance.STDLIB
        return Provenance.NATIVE

    def package_of(self, container: str) -> str | None:
        return self.packages.get(container)

    def package_prefix(self, package: str | None, container: str) -> str:
        """URL prefix for linking from ``package`` docs into ``container``.

        Same package or unknown owner gives a relative link; another known
        package gives its hosted-docs base.
        """
        owner = self.package_of(container)
        if owner is None or owner == package:
            return ""
        return f"{self.hosted_docs_url}{owner}/"


__all__ = [
    "BUILTIN_CONTAINERS",
    "DEFAULT_PACKAGES",
    "DEFAULT_STDLIB_CONTAINERS",
    "HOSTED_DOCS_URL",
    "PRIMITIVES_CONTAINER",
    "STDLIB_DOCS_URL",
    "Ecosystem",
    "Provenance",
]
