"""
treefilter.operators — Resolve a leaf filter into a cached test function.

The returned function takes one (already normalized) record value and
returns whether it satisfies the leaf. It is memoized on the leaf, so a
filter tree can be evaluated against many records without rebuilding it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .config import DEFAULT_CONFIG, FilterConfig
from .errors import FilterTypeMismatchError
from .nodes import CustomFilter, Filter, FilterOperator, LeafFilter, TestFn
from .normalize import default_comparator, normalize_filter_value

# Operator -> predicate over the comparator's result
_COMPARISONS: dict[FilterOperator, Callable[[Any], bool]] = {
    FilterOperator.EQ: lambda c: c == 0,
    FilterOperator.NE: lambda c: c != 0,
    FilterOperator.LT: lambda c: c < 0,
    FilterOperator.LE: lambda c: c <= 0,
    FilterOperator.GT: lambda c: c > 0,
    FilterOperator.GE: lambda c: c >= 0,
}


def _ends_with(value: str, suffix: str) -> bool:
    pos = value.rfind(suffix)
    if pos == -1:
        return False
    return pos == len(value) - len(suffix)


# Operator -> (value, operand) string predicate
_STRING_TESTS: dict[FilterOperator, Callable[[str, str], bool]] = {
    FilterOperator.Contains: lambda value, operand: operand in value,
    FilterOperator.StartsWith: lambda value, operand: value.startswith(operand),
    FilterOperator.EndsWith: _ends_with,
}


def _match_all(value: Any) -> bool:
    return True


def _string_test(
    operator: FilterOperator, predicate: Callable[[str, str], bool], operand: Any
) -> TestFn:
    def test(value: Any) -> bool:
        if value is None:
            return False
        if not isinstance(value, str):
            raise FilterTypeMismatchError(operator.value, value)
        return predicate(value, operand)

    return test


def _build_test(leaf: Filter, case_sensitive: bool, config: FilterConfig) -> TestFn:
    compare = leaf.comparator or default_comparator
    value1, value2 = leaf.value1, leaf.value2
    operator = leaf.operator
    if operator in _STRING_TESTS and value1 is not None and not isinstance(value1, str):
        # string operators search for the operand's text form
        value1 = str(value1)
    if leaf.comparator is None:
        value1 = normalize_filter_value(value1, case_sensitive)
        value2 = normalize_filter_value(value2, case_sensitive)

    if operator in _COMPARISONS:
        check = _COMPARISONS[operator]
        return lambda value: check(compare(value, value1))
    if operator is FilterOperator.BT:
        return lambda value: compare(value, value1) >= 0 and compare(value, value2) <= 0
    if operator in _STRING_TESTS:
        return _string_test(operator, _STRING_TESTS[operator], value1)

    config.emit(f'The filter operator "{operator}" is unknown, filter will be ignored.')
    return _match_all


def get_filter_function(leaf: LeafFilter, *, config: FilterConfig | None = None) -> TestFn:
    """
    Return the test function for a leaf filter.

    Parameters
    ----------
    leaf : Filter | CustomFilter
        The leaf to resolve. A :class:`CustomFilter` returns its own test.
    config : FilterConfig | None
        Supplies the default case sensitivity and the diagnostic sink.

    Returns
    -------
    Callable[[Any], bool]
        Test over a normalized record value.

    Raises
    ------
    FilterTypeMismatchError
        From the returned function, when ``Contains`` / ``StartsWith`` /
        ``EndsWith`` receive a non-string value.

    Notes
    -----
    Unknown operators emit one diagnostic and produce a test that matches
    everything. The function is memoized on the leaf and rebuilt when a
    config with a different effective case sensitivity or diagnostic sink
    asks for it.
    """
    if isinstance(leaf, CustomFilter):
        return leaf.test

    config = config or DEFAULT_CONFIG
    case_sensitive = config.resolve_case_sensitive(leaf.case_sensitive)
    cell = leaf._cell
    key = (case_sensitive, config.diagnostic_sink)
    if cell.fn is None or cell.key != key:
        cell.fn = _build_test(leaf, case_sensitive, config)
        cell.key = key
    return cell.fn


__all__ = ["get_filter_function"]
