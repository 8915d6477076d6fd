"""Structured references and registry keys.

A reference is one of a closed set of frozen dataclasses. Consumers dispatch
with ``isinstance`` chains that end in ``raise AssertionError`` so a new
variant cannot slip through silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Kind = Literal["function", "type", "callback"]

_KIND_ALIASES: dict[str, Kind] = {
    "function": "function",
    "macro": "function",
    "type": "type",
    "callback": "callback",
    "macrocallback": "callback",
}


def normalize_kind(kind: str) -> Kind:
    """Map loader kinds (``macro``, ``macrocallback``) onto reference kinds."""
    try:
        return _KIND_ALIASES[kind]
    except KeyError:
        msg = f"Unknown entry kind: {kind!r}"
        raise ValueError(msg) from None


@dataclass(frozen=True)
class ModuleRef:
    container: str


@dataclass(frozen=True)
class LocalRef:
    """Reference to an entity of the current container."""

    kind: Kind
    container: str
    name: str
    arity: int


@dataclass(frozen=True)
class RemoteRef:
    kind: Kind
    container: str
    name: str
    arity: int


@dataclass(frozen=True)
class MixTaskRef:
    container: str


@dataclass(frozen=True)
class BasicTypeRef:
    name: str
    arity: int


@dataclass(frozen=True)
class BuiltInTypeRef:
    name: str
    arity: int


Ref = ModuleRef | LocalRef | RemoteRef | MixTaskRef | BasicTypeRef | BuiltInTypeRef


@dataclass(frozen=True)
class ModuleKey:
    """Registry key for a container itself."""

    container: str


@dataclass(frozen=True)
class EntryKey:
    """Registry key for one arity-qualified entity of a container."""

    kind: Kind
    container: str
    name: str
    arity: int


RegistryKey = ModuleKey | EntryKey


def ref_prefix(kind: Kind) -> str:
    """Anchor/diagnostic prefix for a kind: ``""``, ``t:`` or ``c:``."""
    if kind == "function":
        return ""
    if kind == "type":
        return "t:"
    if kind == "callback":
        return "c:"
    raise AssertionError(kind)


__all__ = [
    "BasicTypeRef",
    "BuiltInTypeRef",
    "EntryKey",
    "Kind",
    "LocalRef",
    "MixTaskRef",
    "ModuleKey",
    "ModuleRef",
    "Ref",
    "RegistryKey",
    "RemoteRef",
    "normalize_kind",
    "ref_prefix",
]
