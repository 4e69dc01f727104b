# SPDX-License-Identifier: MIT
"""Tests for mcp_secure.rules.engine — RuleEngine ordering and failure isolation."""

from __future__ import annotations

import logging

import pytest

from mcp_secure.rules import run_rules
from mcp_secure.rules.base import Issue, Severity
from mcp_secure.rules.context import FileContext, build_context
from mcp_secure.rules.engine import RuleEngine
from mcp_secure.rules.registry import RULE_REGISTRY, rule_info


class _AlwaysHighRule:
    """Test rule that always emits a HIGH issue on line 1."""

    id = "T-HIGH"
    name = "Always High"
    description = "Test rule"
    default_severity = Severity.HIGH

    def run(self, ctx: FileContext) -> list[Issue]:
        return [
            Issue(
                rule=self.id,
                severity=self.default_severity,
                message="test high",
                file=ctx.file,
                line=1,
            )
        ]


class _AlwaysInfoRule:
    """Test rule that always emits an INFO issue."""

    id = "T-INFO"
    name = "Always Info"
    description = "Test rule"
    default_severity = Severity.INFO

    def run(self, ctx: FileContext) -> list[Issue]:
        return [Issue(rule=self.id, severity=self.default_severity, message="i", file=ctx.file)]


class _ExplodingRule:
    """Test rule that raises on every file."""

    id = "T-BOOM"
    name = "Exploding"
    description = "Test rule"
    default_severity = Severity.CRITICAL

    def run(self, ctx: FileContext) -> list[Issue]:
        raise RuntimeError("boom")


class TestRuleEngine:
    def _ctx(self) -> FileContext:
        return build_context("server.ts", "const x = 1;\n")

    def test_run_collects_in_registration_order(self) -> None:
        engine = RuleEngine(rule_classes=[_AlwaysInfoRule, _AlwaysHighRule])
        results = engine.run(self._ctx())
        # No sorting at the engine level
        assert [r.rule for r in results] == ["T-INFO", "T-HIGH"]

    def test_run_empty_rules(self) -> None:
        engine = RuleEngine(rule_classes=[])
        assert engine.run(self._ctx()) == []

    def test_rules_property_instantiates(self) -> None:
        engine = RuleEngine(rule_classes=[_AlwaysHighRule])
        assert len(engine.rules) == 1
        assert isinstance(engine.rules[0], _AlwaysHighRule)

    def test_failing_rule_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = RuleEngine(rule_classes=[_AlwaysHighRule, _ExplodingRule, _AlwaysInfoRule])
        with caplog.at_level(logging.WARNING, logger="mcp_secure.rules.engine"):
            results = engine.run(self._ctx())
        assert [r.rule for r in results] == ["T-HIGH", "T-INFO"]
        assert "T-BOOM" in caplog.text
        assert "server.ts" in caplog.text

    def test_failing_rule_retried_on_next_file(self) -> None:
        engine = RuleEngine(rule_classes=[_ExplodingRule, _AlwaysInfoRule])
        first = engine.run(build_context("a.ts", "x"))
        second = engine.run(build_context("b.ts", "y"))
        assert [r.file for r in first + second] == ["a.ts", "b.ts"]


class TestDefaultRegistry:
    def test_ten_rules(self) -> None:
        assert len(RULE_REGISTRY) == 10

    def test_ids_unique_and_ordered(self) -> None:
        ids = [cls.id for cls in RULE_REGISTRY]
        assert ids == [f"MCP{n:03d}" for n in range(1, 11)]

    def test_default_engine_uses_registry(self) -> None:
        engine = RuleEngine()
        assert [type(r) for r in engine.rules] == list(RULE_REGISTRY)

    def test_rule_info(self) -> None:
        info = rule_info(RULE_REGISTRY[0])
        assert info.id == "MCP001"
        assert info.name == "Command Injection"
        assert info.severity == Severity.CRITICAL
        assert info.description

    def test_default_severities(self) -> None:
        severities = {cls.id: cls.default_severity for cls in RULE_REGISTRY}
        assert severities == {
            "MCP001": Severity.CRITICAL,
            "MCP002": Severity.CRITICAL,
            "MCP003": Severity.HIGH,
            "MCP004": Severity.HIGH,
            "MCP005": Severity.MEDIUM,
            "MCP006": Severity.MEDIUM,
            "MCP007": Severity.LOW,
            "MCP008": Severity.INFO,
            "MCP009": Severity.HIGH,
            "MCP010": Severity.MEDIUM,
        }


class TestRunRules:
    def test_wrapper_runs_all_rules(self) -> None:
        results = run_rules("server.ts", "eval(code);\n")
        assert [r.rule for r in results] == ["MCP001", "MCP008"]
        assert all(r.file == "server.ts" for r in results)

    def test_empty_content(self) -> None:
        assert run_rules("empty.ts", "") == []
