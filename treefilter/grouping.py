"""
treefilter.grouping — Build a single filter tree from flat filter lists.

Leaves on the same path are combined with OR ("status = A OR status = B"),
different paths and pre-built :class:`MultiFilter` nodes with AND.
"""

from __future__ import annotations

from collections.abc import Sequence

from .nodes import FilterList, FilterNode, FilterTree, MultiFilter


def _combine(filters: Sequence[FilterNode], and_: bool) -> FilterTree:
    if len(filters) == 1:
        return filters[0]
    if filters:
        return MultiFilter(filters, and_=and_)
    return None


def _sort_key(node: FilterNode) -> str:
    # MultiFilter has no path and sorts ahead of every leaf
    return "" if isinstance(node, MultiFilter) else node.path


def group_filters(filters: FilterList) -> FilterTree:
    """
    Group filters by path into one tree.

    Parameters
    ----------
    filters : Sequence[FilterNode] | None
        Leaves and pre-built multi filters.

    Returns
    -------
    FilterNode | None
        ``None`` for no filters, the only element for a single filter,
        otherwise an AND of per-path OR groups and the multi filters.

    Examples
    --------
    >>> from treefilter.nodes import Filter
    >>> a, b = Filter("status", "EQ", "A"), Filter("status", "EQ", "B")
    >>> group_filters([a, b]) == MultiFilter([a, b], and_=False)
    True
    """
    if not filters:
        return None
    if len(filters) == 1:
        return filters[0]

    groups: list[FilterNode] = []
    same_path: list[FilterNode] = []
    current_path: str | None = None
    for node in sorted(filters, key=_sort_key):
        if isinstance(node, MultiFilter):
            groups.append(node)
            continue
        if node.path != current_path:
            if same_path:
                groups.append(_combine(same_path, and_=False))
            current_path = node.path
            same_path = []
        same_path.append(node)
    if same_path:
        groups.append(_combine(same_path, and_=False))

    return _combine(groups, and_=True)


def combine_filters(
    user_filters: FilterList, application_filters: FilterList
) -> FilterTree:
    """
    AND-combine independently grouped user and application filters.

    Returns
    -------
    FilterNode | None
        ``MultiFilter([user, application], and_=True)`` when both are
        present, the present one otherwise, ``None`` when neither is.
    """
    combined = [
        tree
        for tree in (group_filters(user_filters), group_filters(application_filters))
        if tree is not None
    ]
    return _combine(combined, and_=True)


__all__ = ["group_filters", "combine_filters"]
