"""
treefilter.serialize — Render filter trees as plain dicts / JSON.

Meant for logging and debugging a grouped tree; there is no inverse.
"""

from __future__ import annotations

import datetime as _dt
import json
from enum import Enum
from typing import Any

from .nodes import CustomFilter, Filter, FilterTree, MultiFilter


def _callable_name(fn: Any) -> str | None:
    if fn is None:
        return None
    return getattr(fn, "__qualname__", None) or repr(fn)


def _operand(value: Any) -> Any:
    if isinstance(value, (_dt.date, _dt.time)):
        return value.isoformat()
    return value


def filter_to_dict(tree: FilterTree) -> dict[str, Any] | None:
    """Convert a filter tree to a JSON-serializable dict (``None`` for no tree)."""
    if tree is None:
        return None
    if isinstance(tree, Filter):
        operator = tree.operator
        return {
            "type": "filter",
            "path": tree.path,
            "operator": operator.value if isinstance(operator, Enum) else operator,
            "value1": _operand(tree.value1),
            "value2": _operand(tree.value2),
            "case_sensitive": tree.case_sensitive,
            "comparator": _callable_name(tree.comparator),
        }
    if isinstance(tree, CustomFilter):
        return {
            "type": "custom",
            "path": tree.path,
            "test": _callable_name(tree.test),
            "case_sensitive": tree.case_sensitive,
        }
    if isinstance(tree, MultiFilter):
        return {
            "type": "multi",
            "and": tree.and_,
            "filters": [filter_to_dict(child) for child in tree.filters],
        }
    raise TypeError(f"Unknown filter node type: {type(tree).__name__}")


def filter_to_json(tree: FilterTree) -> str:
    """
    Serialize a filter tree to a JSON string.

    Operands JSON cannot represent are rendered with ``str``.
    """
    return json.dumps(filter_to_dict(tree), default=str)


__all__ = ["filter_to_dict", "filter_to_json"]
