"""
treefilter.normalize — Canonical comparable form of filter values.

Strings are upper-cased unless case sensitive and always NFC composed, so
``"café"`` and ``"CAFE\\u0301"`` compare equal case-insensitively. Dates and
datetimes become integer epoch milliseconds. Everything else passes through.
"""

from __future__ import annotations

import datetime as _dt
import functools
import math
import unicodedata
from typing import Any

from pyuca import Collator

_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)


def _epoch_millis(value: _dt.date) -> int:
    if isinstance(value, _dt.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=_dt.timezone.utc)
    else:
        value = _dt.datetime(value.year, value.month, value.day, tzinfo=_dt.timezone.utc)
    # timedelta arithmetic keeps microsecond precision exact
    return (value - _EPOCH) // _dt.timedelta(milliseconds=1)


@functools.cache
def _collator() -> Collator:
    # loads the DUCET table once, on first string comparison
    return Collator()


def _collate(a: str, b: str) -> int:
    key_a, key_b = _collator().sort_key(a), _collator().sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def normalize_filter_value(value: Any, case_sensitive: bool | None = None) -> Any:
    """
    Convert *value* into the form used for comparisons.

    Parameters
    ----------
    value : Any
        Record value or filter operand.
    case_sensitive : bool | None, default None
        ``None`` is treated as ``False``.

    Returns
    -------
    Any
        Upper-cased (unless case sensitive) NFC string, epoch milliseconds
        for ``date`` / ``datetime``, or *value* unchanged.

    Examples
    --------
    >>> normalize_filter_value("café") == normalize_filter_value("CAFÉ")
    True
    >>> normalize_filter_value(_dt.datetime(1970, 1, 1, 0, 0, 1))
    1000
    """
    if isinstance(value, str):
        if not case_sensitive:
            value = value.upper()
        return unicodedata.normalize("NFC", value)
    if isinstance(value, _dt.date):
        return _epoch_millis(value)
    return value


def default_comparator(a: Any, b: Any) -> float:
    """
    Three-way compare two normalized values.

    Returns ``0`` when equal, ``-1`` / ``1`` when ordered, and ``nan`` when
    the values cannot be ordered (either side is ``None`` or the types do
    not support ``<``). Two strings are ordered by the Unicode Collation
    Algorithm, so ``"ÉCOLE"`` sorts between ``"A"`` and ``"F"``. Every
    ordering test against ``nan`` is false and ``nan != 0`` is true, so
    ``NE`` matches incomparable values.
    """
    if a == b:
        return 0
    if a is None or b is None:
        return math.nan
    if isinstance(a, str) and isinstance(b, str):
        return _collate(a, b)
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        return math.nan
    return math.nan


__all__ = ["normalize_filter_value", "default_comparator"]
