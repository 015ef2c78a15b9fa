"""
treefilter.accessor — Default field accessor for records.

Dot-notation is supported for nested values::

    resolve_path({"specs": {"weight_g": 221}}, "specs.weight_g")  # -> 221
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .nodes import MISSING

GetValue = Callable[[Any, str], Any]


def resolve_path(record: Any, path: str) -> Any:
    """
    Resolve a dot-separated path against a record.

    Mapping records are indexed by key, other objects by attribute.

    Returns
    -------
    Any
        The value, or :data:`MISSING` when a segment does not exist.
        An empty path returns the record itself.
    """
    if not path:
        return record
    current: Any = record
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return MISSING
            current = current[part]
        elif hasattr(current, part):
            current = getattr(current, part)
        else:
            return MISSING
    return current


__all__ = ["GetValue", "resolve_path"]
