"""
treefilter — group, combine and evaluate declarative filter trees in memory.
"""

from __future__ import annotations

from . import (
    accessor,
    config,
    errors,
    evaluate,
    grouping,
    nodes,
    normalize,
    operators,
    processor,
    serialize,
)
from .accessor import resolve_path
from .config import DEFAULT_CONFIG, FilterConfig
from .errors import FilterError, FilterTypeMismatchError
from .evaluate import apply_filter, evaluate_filter
from .grouping import combine_filters, group_filters
from .nodes import (
    MISSING,
    CustomFilter,
    Filter,
    FilterOperator,
    FilterTree,
    MultiFilter,
)
from .normalize import default_comparator, normalize_filter_value
from .operators import get_filter_function
from .processor import FilterProcessor
from .serialize import filter_to_dict, filter_to_json

__version__: str = "0.1.0"

__all__ = [
    "accessor",
    "config",
    "errors",
    "evaluate",
    "grouping",
    "nodes",
    "normalize",
    "operators",
    "processor",
    "serialize",
    "MISSING",
    "CustomFilter",
    "Filter",
    "FilterOperator",
    "FilterTree",
    "MultiFilter",
    "FilterConfig",
    "DEFAULT_CONFIG",
    "FilterError",
    "FilterTypeMismatchError",
    "FilterProcessor",
    "apply_filter",
    "evaluate_filter",
    "combine_filters",
    "group_filters",
    "default_comparator",
    "normalize_filter_value",
    "get_filter_function",
    "resolve_path",
    "filter_to_dict",
    "filter_to_json",
    "__version__",
]
