# SPDX-License-Identifier: MIT
"""MCP005: missing-input-validation — tool handlers that close without any check."""

from __future__ import annotations

from mcp_secure.rules.base import Issue, Severity
from mcp_secure.rules.context import FileContext
from mcp_secure.rules.trackers import HandlerValidationTracker


class InputValidationRule:
    """Report each tool-handler block that closes with no validation token inside."""

    id = "MCP005"
    name = "Missing Input Validation"
    description = "Detects missing input validation in tool handlers"
    default_severity = Severity.MEDIUM

    def run(self, ctx: FileContext) -> list[Issue]:
        results: list[Issue] = []
        tracker = HandlerValidationTracker()
        for line in ctx.lines:
            if tracker.step(line.text):
                results.append(
                    Issue(
                        rule=self.id,
                        severity=self.default_severity,
                        message="Tool handler lacks input validation",
                        file=ctx.file,
                        line=line.lineno,
                        fix=(
                            "Add input validation to verify argument types, ranges, "
                            "and formats before processing."
                        ),
                    )
                )
        return results
