"""Markup tree model and reference autolinking."""

from markup.tree import (
    ALLOWED_ATTRS,
    ALLOWED_TAGS,
    Element,
    MarkupError,
    Node,
    from_data,
    text_content,
    to_data,
)
from markup.walker import VERBATIM_TAGS, link_markup

__all__ = [
    "ALLOWED_ATTRS",
    "ALLOWED_TAGS",
    "VERBATIM_TAGS",
    "Element",
    "MarkupError",
    "Node",
    "from_data",
    "link_markup",
    "text_content",
    "to_data",
]
