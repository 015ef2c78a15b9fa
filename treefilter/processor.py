"""
treefilter.processor — One entry-point bound to a :class:`FilterConfig`.

Usage::

    from treefilter import Filter, FilterConfig, FilterProcessor

    proc = FilterProcessor(FilterConfig(case_sensitive=True))
    rows = proc.filter(
        records,
        [Filter("status", "EQ", "A"), Filter("status", "EQ", "B")],
        [Filter("price", "LT", 100)],
    )
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .accessor import GetValue, resolve_path
from .config import DEFAULT_CONFIG, FilterConfig
from .evaluate import apply_filter, evaluate_filter
from .grouping import combine_filters, group_filters
from .nodes import FilterList, FilterTree, LeafFilter, TestFn
from .normalize import normalize_filter_value
from .operators import get_filter_function


class FilterProcessor:
    """
    Groups, combines and evaluates filters with one configuration.

    Parameters
    ----------
    config : FilterConfig | None, default None
        Processing options; :data:`DEFAULT_CONFIG` when omitted.
    get_value : Callable[[Any, str], Any], default resolve_path
        Field accessor used when a call does not pass its own.
    """

    __slots__ = ("config", "get_value")

    def __init__(
        self,
        config: FilterConfig | None = None,
        get_value: GetValue = resolve_path,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.get_value = get_value

    def __repr__(self) -> str:
        return f"FilterProcessor(config={self.config!r})"

    # ── Tree building ───────────────────────────────────────

    def group_filters(self, filters: FilterList) -> FilterTree:
        return group_filters(filters)

    def combine_filters(
        self, user_filters: FilterList, application_filters: FilterList
    ) -> FilterTree:
        return combine_filters(user_filters, application_filters)

    # ── Evaluation ──────────────────────────────────────────

    def normalize(self, value: Any, case_sensitive: bool | None = None) -> Any:
        return normalize_filter_value(
            value, self.config.resolve_case_sensitive(case_sensitive)
        )

    def get_filter_function(self, leaf: LeafFilter) -> TestFn:
        return get_filter_function(leaf, config=self.config)

    def evaluate(
        self, tree: FilterTree, record: Any, get_value: GetValue | None = None
    ) -> bool:
        return evaluate_filter(
            tree, record, get_value or self.get_value, config=self.config
        )

    def apply(
        self,
        records: Iterable[Any] | None,
        tree: FilterTree,
        get_value: GetValue | None = None,
    ) -> list[Any]:
        return apply_filter(
            records, tree, get_value or self.get_value, config=self.config
        )

    def filter(
        self,
        records: Iterable[Any] | None,
        user_filters: FilterList,
        application_filters: FilterList = None,
        get_value: GetValue | None = None,
    ) -> list[Any]:
        """
        Combine *user_filters* with *application_filters* and apply the
        result to *records* in one step.
        """
        tree = combine_filters(user_filters, application_filters)
        return self.apply(records, tree, get_value)


__all__ = ["FilterProcessor"]
