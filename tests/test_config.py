"""Tests for treefilter.config — defaults, diagnostics and case sensitivity."""

from __future__ import annotations

from loguru import logger

from treefilter.config import DEFAULT_CONFIG, FilterConfig


class TestFilterConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.case_sensitive is False
        assert DEFAULT_CONFIG.diagnostic_sink is None

    def test_emit_to_sink(self) -> None:
        seen: list[str] = []
        FilterConfig(diagnostic_sink=seen.append).emit("x")
        assert seen == ["x"]

    def test_emit_to_loguru(self) -> None:
        seen: list[str] = []
        handler_id = logger.add(lambda message: seen.append(message.record["message"]), level="WARNING")
        try:
            FilterConfig().emit("unknown operator")
        finally:
            logger.remove(handler_id)
        assert seen == ["unknown operator"]

    def test_resolve_case_sensitive(self) -> None:
        cfg = FilterConfig(case_sensitive=True)
        assert cfg.resolve_case_sensitive(None) is True
        assert cfg.resolve_case_sensitive(False) is False
