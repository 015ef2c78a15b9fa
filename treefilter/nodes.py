"""
treefilter.nodes — Filter tree model.

A filter tree is built from three explicit node types:

- :class:`Filter` — ``path OPERATOR value1 [value2]`` leaf condition
- :class:`CustomFilter` — leaf condition with a caller-supplied test function
- :class:`MultiFilter` — AND / OR combination of child nodes

``None`` stands for the absent tree, which matches every record.

Usage::

    from treefilter.nodes import Filter, FilterOperator, MultiFilter

    tree = MultiFilter(
        [
            Filter("status", FilterOperator.EQ, "open"),
            Filter("price", "BT", 10, 100),
        ],
        and_=True,
    )
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .errors import FilterError

CompareFn = Callable[[Any, Any], Any]
TestFn = Callable[[Any], bool]


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class FilterOperator(str, Enum):
    EQ = "EQ"
    NE = "NE"
    LT = "LT"
    LE = "LE"
    GT = "GT"
    GE = "GE"
    BT = "BT"
    Contains = "Contains"
    StartsWith = "StartsWith"
    EndsWith = "EndsWith"

    @classmethod
    def coerce(cls, operator: FilterOperator | str) -> FilterOperator | str:
        """Return the enum member for a known symbol, else the raw string."""
        try:
            return cls(operator)
        except ValueError:
            return operator


# ---------------------------------------------------------------------------
# Missing-value sentinel
# ---------------------------------------------------------------------------


class _Missing:
    """Marker returned by field accessors when a record has no such field."""

    __slots__ = ()
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


class _TestCell:
    """Write-once holder for a leaf's resolved test function."""

    __slots__ = ("fn", "key")

    def __init__(self) -> None:
        self.fn: TestFn | None = None
        # effective case sensitivity and diagnostic sink the fn was built with
        self.key: tuple[bool, Any] | None = None


@dataclass(frozen=True, slots=True)
class Filter:
    """
    ``path OPERATOR value1 [value2]`` leaf condition.

    Parameters
    ----------
    path : str
        Field path handed to the field accessor.
    operator : FilterOperator | str
        Operator symbol. Unknown symbols are kept as plain strings and
        reported when the filter is first evaluated.
    value1 : Any
        First operand.
    value2 : Any, default None
        Upper bound for ``BT``; ignored otherwise.
    case_sensitive : bool | None, default None
        ``None`` defers to :attr:`FilterConfig.case_sensitive`.
    comparator : Callable[[Any, Any], Any] | None, default None
        Custom three-way comparator. When given, neither the record value
        nor the operands are normalized.
    """

    path: str
    operator: FilterOperator | str
    value1: Any = None
    value2: Any = None
    case_sensitive: bool | None = None
    comparator: CompareFn | None = None
    _cell: _TestCell = field(
        default_factory=_TestCell, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", FilterOperator.coerce(self.operator))


@dataclass(frozen=True, slots=True)
class CustomFilter:
    """
    Leaf condition tested by a caller-supplied function.

    The function receives the normalized record value and returns a bool.
    Its operands are never normalized.
    """

    path: str
    test: TestFn
    case_sensitive: bool | None = None

    def __post_init__(self) -> None:
        if not callable(self.test):
            raise FilterError(f"CustomFilter test for {self.path!r} is not callable")


@dataclass(frozen=True, slots=True)
class MultiFilter:
    """
    AND / OR combination of child filters, evaluated left to right.

    Parameters
    ----------
    filters : Sequence[FilterTree]
        Non-empty child nodes; stored as a tuple.
    and_ : bool, default False
        ``True`` combines children with AND, ``False`` with OR.
    """

    filters: tuple[Filter | CustomFilter | MultiFilter, ...]
    and_: bool = False

    def __post_init__(self) -> None:
        filters = tuple(self.filters)
        if not filters:
            raise FilterError("MultiFilter requires at least one child filter")
        object.__setattr__(self, "filters", filters)


LeafFilter = Union[Filter, CustomFilter]
FilterNode = Union[Filter, CustomFilter, MultiFilter]
FilterTree = Union[Filter, CustomFilter, MultiFilter, None]
FilterList = Union[Sequence[FilterNode], None]


__all__ = [
    "CompareFn",
    "TestFn",
    "FilterOperator",
    "MISSING",
    "Filter",
    "CustomFilter",
    "MultiFilter",
    "LeafFilter",
    "FilterNode",
    "FilterTree",
    "FilterList",
]
