"""
treefilter.config — Processing options and the diagnostic sink.

Usage::

    from treefilter import FilterConfig, apply_filter

    seen: list[str] = []
    cfg = FilterConfig(case_sensitive=True, diagnostic_sink=seen.append)
    apply_filter(records, tree, config=cfg)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from loguru import logger

DiagnosticSink = Callable[[str], None]


@dataclasses.dataclass(frozen=True)
class FilterConfig:
    """
    Configuration shared by the resolver and evaluator.

    Parameters
    ----------
    case_sensitive : bool
        Default case sensitivity for leaves that leave ``case_sensitive``
        unset (``None``).
    diagnostic_sink : Callable[[str], None] | None
        Receives non-fatal diagnostics such as unknown operators.
        ``None`` routes them to ``loguru``'s ``logger.warning``.

    Examples
    --------
    >>> messages = []
    >>> cfg = FilterConfig(diagnostic_sink=messages.append)
    >>> cfg.emit("hello")
    >>> messages
    ['hello']
    """

    case_sensitive: bool = False
    diagnostic_sink: DiagnosticSink | None = None

    def emit(self, message: str) -> None:
        if self.diagnostic_sink is not None:
            self.diagnostic_sink(message)
        else:
            logger.warning(message)

    def resolve_case_sensitive(self, case_sensitive: bool | None) -> bool:
        return self.case_sensitive if case_sensitive is None else case_sensitive


DEFAULT_CONFIG = FilterConfig()


__all__ = ["DiagnosticSink", "FilterConfig", "DEFAULT_CONFIG"]
