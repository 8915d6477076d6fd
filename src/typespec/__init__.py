"""Type signature autolinking."""

from typespec.linkify import count_args, leading_name, linkify_signature

__all__ = ["count_args", "leading_name", "linkify_signature"]
