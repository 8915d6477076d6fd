"""Autolinking over markup trees."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from markup.tree import Element

if TYPE_CHECKING:
    from markup.tree import Node
    from resolve.context import ResolutionContext
    from resolve.resolver import LinkResolver

# Verbatim blocks are emitted exactly as authored.
VERBATIM_TAGS: frozenset[str] = frozenset({"pre"})

_CUSTOM_LINK_HREF = re.compile(r"`(.+)`")


def link_markup(
    nodes: list[Node],
    resolver: LinkResolver,
    context: ResolutionContext,
) -> list[Node]:
    """Return a copy of ``nodes`` with references turned into links.

    Code spans that resolve are wrapped in an anchor. Anchors whose href is a
    backtick-quoted reference get the resolved URL; unresolved ones are kept
    as authored. Anchor contents are not descended into.
    """
    return [_link_node(node, resolver, context) for node in nodes]


def _link_node(
    node: Node, resolver: LinkResolver, context: ResolutionContext
) -> Node:
    if isinstance(node, str):
        return node

    if node.tag in VERBATIM_TAGS:
        return node

    if node.tag == "code":
        return _link_code(node, resolver, context)

    if node.tag == "a":
        return _link_custom(node, resolver, context)

    return node.with_children(link_markup(node.children, resolver, context))


def _link_code(
    node: Element, resolver: LinkResolver, context: ResolutionContext
) -> Node:
    if len(node.children) != 1 or not isinstance(node.children[0], str):
        return node
    url = resolver.resolve_text(node.children[0], context, "regular")
    if not url:
        return node
    return Element("a", {"href": url}, [node])


def _link_custom(
    node: Element, resolver: LinkResolver, context: ResolutionContext
) -> Node:
    href = node.attr("href")
    if href is None:
        return node
    match = _CUSTOM_LINK_HREF.fullmatch(href)
    if match is None:
        return node
    url = resolver.resolve_text(match.group(1), context, "custom_link")
    if not url:
        return node
    return node.with_attr("href", url)


__all__ = ["VERBATIM_TAGS", "link_markup"]
