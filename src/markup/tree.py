"""Generic documentation markup tree.

A node is either a text string or an :class:`Element`. The JSON interchange
form writes an element as ``[tag, {attrs}, [children]]`` and text as a
string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "a",
        "br",
        "code",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "ul",
        "ol",
        "li",
        "p",
        "pre",
        "img",
        "em",
        "strong",
        "table",
        "thead",
        "tbody",
        "tr",
        "th",
        "td",
        "blockquote",
    }
)

ALLOWED_ATTRS: frozenset[str] = frozenset(
    {"href", "class", "src", "alt", "style", "title"}
)


class MarkupError(ValueError):
    """Raised when interchange data does not describe a valid tree."""


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def attr(self, name: str) -> str | None:
        return self.attrs.get(name)

    def with_attr(self, name: str, value: str) -> Element:
        """Copy with ``name`` set, keeping attribute order."""
        return Element(self.tag, {**self.attrs, name: value}, list(self.children))

    def with_children(self, children: list[Node]) -> Element:
        return Element(self.tag, dict(self.attrs), children)


Node = str | Element


def text_content(node: Node) -> str:
    if isinstance(node, str):
        return node
    return "".join(text_content(child) for child in node.children)


def from_data(data: Any) -> list[Node]:
    """Build a node list from JSON interchange data.

    Unknown tags and attributes are rejected and dropped respectively,
    matching the markdown adapter's allow-lists.
    """
    if isinstance(data, list) and not _looks_like_element(data):
        return [_node_from_data(item) for item in data]
    return [_node_from_data(data)]


def _looks_like_element(data: list[Any]) -> bool:
    return (
        len(data) == 3
        and isinstance(data[0], str)
        and isinstance(data[1], dict)
        and isinstance(data[2], list)
    )


def _node_from_data(data: Any) -> Node:
    if isinstance(data, str):
        return data

    if not isinstance(data, list) or not _looks_like_element(data):
        msg = f"Expected text or [tag, attrs, children], got {data!r}"
        raise MarkupError(msg)

    tag, raw_attrs, raw_children = data
    if tag not in ALLOWED_TAGS:
        msg = f"Unsupported tag: {tag!r}"
        raise MarkupError(msg)

    attrs: dict[str, str] = {}
    for name, value in raw_attrs.items():
        if name not in ALLOWED_ATTRS:
            continue
        if not isinstance(value, str):
            msg = f"Attribute {name!r} of <{tag}> must be a string"
            raise MarkupError(msg)
        attrs[name] = value

    return Element(tag, attrs, [_node_from_data(child) for child in raw_children])


def to_data(nodes: list[Node]) -> list[Any]:
    return [_node_to_data(node) for node in nodes]


def _node_to_data(node: Node) -> Any:
    if isinstance(node, str):
        return node
    return [node.tag, dict(node.attrs), to_data(node.children)]


__all__ = [
    "ALLOWED_ATTRS",
    "ALLOWED_TAGS",
    "Element",
    "MarkupError",
    "Node",
    "from_data",
    "text_content",
    "to_data",
]
