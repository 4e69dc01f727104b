# SPDX-License-Identifier: MIT
"""Security rule engine — deterministic, line-oriented checks for MCP server code."""

from mcp_secure.rules.base import Issue, Rule, RuleInfo, Severity
from mcp_secure.rules.config import ProfileConfig, load_profile, load_workers, resolve_fail_on
from mcp_secure.rules.context import FileContext, SourceLine, build_context
from mcp_secure.rules.engine import RuleEngine
from mcp_secure.rules.registry import RULE_REGISTRY

__all__ = [
    "RULE_REGISTRY",
    "FileContext",
    "Issue",
    "ProfileConfig",
    "Rule",
    "RuleEngine",
    "RuleInfo",
    "Severity",
    "SourceLine",
    "build_context",
    "load_profile",
    "load_workers",
    "resolve_fail_on",
    "run_rules",
]


def run_rules(file: str, content: str) -> list[Issue]:
    """Convenience: build the file context, run all rules, return issues."""
    ctx = build_context(file, content)
    engine = RuleEngine()
    return engine.run(ctx)
