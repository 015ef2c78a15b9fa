"""
treefilter.evaluate — Evaluate a filter tree against records.

Usage::

    from treefilter import Filter, apply_filter

    records = [{"status": "A"}, {"status": "B"}]
    apply_filter(records, Filter("status", "EQ", "a"))  # -> [{"status": "A"}]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from loguru import logger

from .accessor import GetValue, resolve_path
from .config import DEFAULT_CONFIG, FilterConfig
from .nodes import MISSING, Filter, FilterTree, LeafFilter, MultiFilter
from .normalize import normalize_filter_value
from .operators import get_filter_function


def _evaluate_leaf(
    leaf: LeafFilter, record: Any, get_value: GetValue, config: FilterConfig
) -> bool:
    value = get_value(record, leaf.path)
    test = get_filter_function(leaf, config=config)
    if value is MISSING:
        return False
    if not (isinstance(leaf, Filter) and leaf.comparator is not None):
        value = normalize_filter_value(
            value, config.resolve_case_sensitive(leaf.case_sensitive)
        )
    return bool(test(value))


def _evaluate_multi(
    multi: MultiFilter, record: Any, get_value: GetValue, config: FilterConfig
) -> bool:
    if multi.and_:
        # first non-matching child decides
        for child in multi.filters:
            if not _evaluate(child, record, get_value, config):
                return False
        return True
    for child in multi.filters:
        if _evaluate(child, record, get_value, config):
            return True
    return False


def _evaluate(
    node: FilterTree, record: Any, get_value: GetValue, config: FilterConfig
) -> bool:
    if isinstance(node, MultiFilter):
        return _evaluate_multi(node, record, get_value, config)
    return _evaluate_leaf(node, record, get_value, config)


def evaluate_filter(
    tree: FilterTree,
    record: Any,
    get_value: GetValue = resolve_path,
    *,
    config: FilterConfig | None = None,
) -> bool:
    """
    Evaluate a filter tree against a single record.

    Parameters
    ----------
    tree : Filter | CustomFilter | MultiFilter
        Root of the tree. ``None`` matches every record.
    record : Any
        The record handed to *get_value*.
    get_value : Callable[[Any, str], Any], default resolve_path
        Field accessor; returns :data:`MISSING` for absent fields.
    config : FilterConfig | None
        Processing options, defaults to :data:`DEFAULT_CONFIG`.

    Returns
    -------
    bool
        True if the record matches.

    Raises
    ------
    FilterTypeMismatchError
        If a string operator meets a non-string value. Children after a
        short-circuiting AND / OR decision are never evaluated.
    """
    if tree is None:
        return True
    return _evaluate(tree, record, get_value, config or DEFAULT_CONFIG)


def apply_filter(
    records: Iterable[Any] | None,
    tree: FilterTree,
    get_value: GetValue = resolve_path,
    *,
    config: FilterConfig | None = None,
) -> list[Any]:
    """
    Filter records by a (grouped and combined) filter tree.

    Parameters
    ----------
    records : Iterable | None
        Records to filter. ``None`` yields an empty list.
    tree : Filter | CustomFilter | MultiFilter | None
        Root of the filter tree. ``None`` keeps every record.
    get_value : Callable[[Any, str], Any], default resolve_path
        Field accessor.
    config : FilterConfig | None
        Processing options, defaults to :data:`DEFAULT_CONFIG`.

    Returns
    -------
    list
        A new list with the matching records in their original order.
        The input is never modified.
    """
    if records is None:
        return []
    if tree is None:
        return list(records)

    config = config or DEFAULT_CONFIG
    records = list(records)
    filtered = [r for r in records if _evaluate(tree, r, get_value, config)]
    logger.trace("Filtered {} records down to {}", len(records), len(filtered))
    return filtered


__all__ = ["evaluate_filter", "apply_filter"]
