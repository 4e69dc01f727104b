# SPDX-License-Identifier: MIT
"""Rule engine — instantiates rule classes and runs them against one file."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from mcp_secure.rules.base import Issue, Rule

if TYPE_CHECKING:
    from mcp_secure.rules.context import FileContext

log = logging.getLogger(__name__)


class RuleEngine:
    """Instantiates rules from class registry and runs them against a file context."""

    def __init__(self, rule_classes: Sequence[type[Rule]] | None = None) -> None:
        from mcp_secure.rules.registry import RULE_REGISTRY

        classes = RULE_REGISTRY if rule_classes is None else rule_classes
        self._rules: list[Rule] = [cls() for cls in classes]

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def run(self, ctx: FileContext) -> list[Issue]:
        """Run all rules in registration order and collect their issues.

        A rule that raises is skipped for this file only; the rest still run.
        """
        results: list[Issue] = []
        for rule in self._rules:
            try:
                issues = rule.run(ctx)
            except Exception:
                log.warning(
                    "Rule %s failed on %s; skipping it for this file",
                    rule.id,
                    ctx.file,
                    exc_info=True,
                )
                continue
            results.extend(issues)
        return results
