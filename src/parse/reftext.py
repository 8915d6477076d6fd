"""Parsing of reference text written by documentation authors.

Turns strings such as ``upcase/2``, ``String.upcase/2``, ``t:String.t/0``,
``c:GenServer.init/1`` or ``mix deps.get`` into structured references.
Anything that is not a reference parses to ``None``.
"""

from __future__ import annotations

import re
from typing import Literal

from refs.models import (
    BasicTypeRef,
    BuiltInTypeRef,
    LocalRef,
    MixTaskRef,
    ModuleRef,
    Ref,
    RemoteRef,
)
from utils import is_task_name, task_to_container

ParseMode = Literal["regular", "custom_link"]

BASIC_TYPES: frozenset[tuple[str, int]] = frozenset(
    {
        ("any", 0),
        ("none", 0),
        ("atom", 0),
        ("map", 0),
        ("pid", 0),
        ("port", 0),
        ("reference", 0),
        ("struct", 0),
        ("tuple", 0),
        ("integer", 0),
        ("float", 0),
        ("neg_integer", 0),
        ("non_neg_integer", 0),
        ("pos_integer", 0),
        ("list", 1),
        ("nonempty_list", 1),
        ("improper_list", 2),
        ("maybe_improper_list", 2),
    }
)

BUILT_IN_TYPES: frozenset[tuple[str, int]] = frozenset(
    {
        ("term", 0),
        ("arity", 0),
        ("as_boolean", 1),
        ("binary", 0),
        ("bitstring", 0),
        ("boolean", 0),
        ("byte", 0),
        ("char", 0),
        ("charlist", 0),
        ("nonempty_charlist", 0),
        ("fun", 0),
        ("function", 0),
        ("identifier", 0),
        ("iodata", 0),
        ("iolist", 0),
        ("keyword", 0),
        ("keyword", 1),
        ("list", 0),
        ("nonempty_list", 0),
        ("maybe_improper_list", 0),
        ("nonempty_maybe_improper_list", 0),
        ("mfa", 0),
        ("module", 0),
        ("no_return", 0),
        ("node", 0),
        ("number", 0),
        ("struct", 0),
        ("timeout", 0),
    }
)

# Special forms and operators that may appear as the name part of name/arity.
_OPERATOR_NAMES = (
    "<<>>", "%{}", "{}", "===", "!==", "...", "..", "++", "--", "<>", "==",
    "!=", "<=", ">=", "&&", "||", "|>", "=~", "::", "<-", "\\\\", "%", "<",
    ">", "+", "-", "*", "/", "^", "!", "&", "@", "=", ".", "|",
)

_ALIAS = r"[A-Z][A-Za-z0-9_]*(?:\.[A-Z][A-Za-z0-9_]*)*"
_ATOM = r":[a-z_][A-Za-z0-9_@]*"
_NAME = (
    r"(?:[a-z_][A-Za-z0-9_]*[?!]?|"
    + "|".join(re.escape(op) for op in sorted(_OPERATOR_NAMES, key=len, reverse=True))
    + r")"
)

_MODULE_PATTERN = re.compile(_ALIAS)
_NATIVE_MODULE_PATTERN = re.compile(r":?(?P<name>[a-z_][A-Za-z0-9_@]*)")
_LOCAL_PATTERN = re.compile(rf"(?P<name>{_NAME})/(?P<arity>\d+)")
_REMOTE_PATTERN = re.compile(
    rf"(?P<container>{_ALIAS}|{_ATOM})\.(?P<name>{_NAME})/(?P<arity>\d+)"
)


def container_from_text(text: str) -> str:
    """Normalize a written container (``String`` or ``:lists``) to its id."""
    return text[1:] if text.startswith(":") else text


def local_type_ref(container: str, name: str, arity: int) -> Ref:
    """Build a local type reference, recognising primitive types first."""
    if (name, arity) in BASIC_TYPES:
        return BasicTypeRef(name, arity)
    if (name, arity) in BUILT_IN_TYPES:
        return BuiltInTypeRef(name, arity)
    return LocalRef("type", container, name, arity)


def parse_ref(
    text: str, mode: ParseMode = "regular", current_container: str | None = None
) -> Ref | None:
    """Parse reference text into a structured reference.

    Returns None for anything that is not a reference, which is the usual
    outcome for code spans in prose. ``custom_link`` mode additionally
    accepts a bare lowercase native module name.
    """
    if text.startswith("mix "):
        return _parse_mix_task(text[len("mix ") :])

    if text.startswith("t:"):
        inner = parse_ref(text[2:], mode, current_container)
        if isinstance(inner, LocalRef) and inner.kind == "function":
            return local_type_ref(inner.container, inner.name, inner.arity)
        if isinstance(inner, RemoteRef) and inner.kind == "function":
            return RemoteRef("type", inner.container, inner.name, inner.arity)
        return None

    if text.startswith("c:"):
        inner = parse_ref(text[2:], mode, current_container)
        if isinstance(inner, LocalRef) and inner.kind == "function":
            return LocalRef("callback", inner.container, inner.name, inner.arity)
        if isinstance(inner, RemoteRef) and inner.kind == "function":
            return RemoteRef("callback", inner.container, inner.name, inner.arity)
        return None

    if any(char in text for char in " ()"):
        return None

    if _MODULE_PATTERN.fullmatch(text):
        return ModuleRef(text)

    match = _REMOTE_PATTERN.fullmatch(text)
    if match:
        return RemoteRef(
            "function",
            container_from_text(match.group("container")),
            match.group("name"),
            int(match.group("arity")),
        )

    match = _LOCAL_PATTERN.fullmatch(text)
    if match:
        return LocalRef(
            "function",
            current_container or "",
            match.group("name"),
            int(match.group("arity")),
        )

    if mode == "custom_link":
        match = _NATIVE_MODULE_PATTERN.fullmatch(text)
        if match:
            return ModuleRef(match.group("name"))

    return None


def _parse_mix_task(name: str) -> MixTaskRef | None:
    if name.startswith("help "):
        name = name[len("help ") :]
    if not is_task_name(name):
        return None
    return MixTaskRef(task_to_container(name))


__all__ = [
    "BASIC_TYPES",
    "BUILT_IN_TYPES",
    "ParseMode",
    "container_from_text",
    "local_type_ref",
    "parse_ref",
]
