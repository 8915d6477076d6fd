"""Autolinking of type references inside formatted signatures."""

from __future__ import annotations

import re
from html import escape
from typing import TYPE_CHECKING

from parse.reftext import container_from_text, local_type_ref
from refs.models import RemoteRef

if TYPE_CHECKING:
    from refs.models import Ref
    from resolve.context import ResolutionContext
    from resolve.resolver import LinkResolver

# qualified-or-bare name immediately followed by a parenthesised tail
_CALL_PATTERN = re.compile(
    r"((?:((?::[a-z][_a-zA-Z0-9]*)|(?:[A-Z][_a-zA-Z0-9]*(?:\.[A-Z][_a-zA-Z0-9]*)*))\.)?(\w+))(\(.*\))"
)
_LEADING_NAME = re.compile(r"^[a-z_][a-zA-Z0-9_]*[?!]?")

_OPENERS = "([{"
_CLOSERS = ")]}"


def count_args(text: str) -> int:
    """Count the arguments of the call whose ``(`` starts ``text``.

    Commas only count at the top nesting level; counting stops at the
    parenthesis that closes the first opener.

    Examples:
        >>> count_args("()")
        0
        >>> count_args("(a, {b, c}, [d])")
        3
    """
    if text.startswith("()"):
        return 0
    depth = 0
    count = 0
    for char in text:
        if char in _OPENERS:
            depth += 1
        elif char == ")" and depth == 1:
            return count + 1
        elif char in _CLOSERS:
            depth -= 1
        elif char == "," and depth == 1:
            count += 1
    return count


def leading_name(text: str) -> str:
    match = _LEADING_NAME.match(text)
    return match.group(0) if match else ""


def linkify_signature(
    text: str,
    resolver: LinkResolver,
    context: ResolutionContext,
    name: str | None = None,
) -> str:
    """Wrap type references in formatted signature ``text`` with links.

    The leading ``name`` (derived from the text when omitted) is left alone,
    so a type is never linked against a same-named function.
    """
    if name is None:
        name = leading_name(text)
    if name and text.startswith(name):
        return name + _linkify(text[len(name) :], resolver, context)
    return _linkify(text, resolver, context)


def _linkify(text: str, resolver: LinkResolver, context: ResolutionContext) -> str:
    match = _CALL_PATTERN.search(text)
    if match is None:
        return text

    call_string, container_string, name, rest = match.groups()
    arity = count_args(rest)

    ref: Ref
    if container_string:
        ref = RemoteRef("type", container_from_text(container_string), name, arity)
    else:
        ref = local_type_ref(context.current_container or "", name, arity)

    url = resolver.resolve(ref, context)
    if url:
        linked = f'<a href="{url}">{escape(call_string)}</a>'
    else:
        linked = call_string

    return (
        text[: match.start()]
        + linked
        + _linkify(rest, resolver, context)
        + _linkify(text[match.end() :], resolver, context)
    )


__all__ = ["count_args", "leading_name", "linkify_signature"]
