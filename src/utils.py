"""Shared naming utilities for doclinks."""

from __future__ import annotations

import re

MIX_TASKS_NAMESPACE = "Mix.Tasks"

_TASK_NAME = re.compile(r"[a-z][a-z0-9_]*(?:\.[a-z][a-z0-9_]*)*")


def camelize(segment: str) -> str:
    """Convert an underscored segment to CamelCase.

    Examples:
        >>> camelize("deps")
        'Deps'
        >>> camelize("compile_all")
        'CompileAll'
    """
    return "".join(part[:1].upper() + part[1:] for part in segment.split("_"))


def is_task_name(name: str) -> bool:
    return _TASK_NAME.fullmatch(name) is not None


def task_to_container(name: str) -> str:
    """Convert a mix task name to its conventional container id.

    Args:
        name: Dot-segmented lowercase task name (e.g. "deps.get")

    Returns:
        Container id (e.g. "Mix.Tasks.Deps.Get")

    Examples:
        >>> task_to_container("deps.get")
        'Mix.Tasks.Deps.Get'
        >>> task_to_container("phx.gen_html")
        'Mix.Tasks.Phx.GenHtml'
    """
    if not is_task_name(name):
        msg = f"Invalid task name: {name!r}"
        raise ValueError(msg)
    parts = [camelize(segment) for segment in name.split(".")]
    return ".".join([MIX_TASKS_NAMESPACE, *parts])


__all__ = ["MIX_TASKS_NAMESPACE", "camelize", "is_task_name", "task_to_container"]
