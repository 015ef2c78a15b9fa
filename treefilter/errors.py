"""
treefilter.errors — Exceptions raised while building or evaluating filters.

Unknown operators are deliberately absent here: they are reported through
the configured diagnostic sink and fail open instead of raising.
"""

from __future__ import annotations

from typing import Any


class FilterError(Exception):
    """Base class for all treefilter errors, also used for malformed nodes."""


class FilterTypeMismatchError(FilterError, TypeError):
    """
    A string-only operator was applied to a non-string value.

    Parameters
    ----------
    operator : str
        The operator symbol, e.g. ``"Contains"``.
    value : Any
        The offending (normalized) record value.
    """

    def __init__(self, operator: str, value: Any) -> None:
        self.operator = operator
        self.value = value
        super().__init__(
            f'Only "str" values are supported for the filter operator '
            f'"{operator}", got {type(value).__name__}'
        )


__all__ = ["FilterError", "FilterTypeMismatchError"]
