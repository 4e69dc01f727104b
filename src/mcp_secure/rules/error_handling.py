# SPDX-License-Identifier: MIT
"""MCP007: missing-error-handling — async functions that await with no try block."""

from __future__ import annotations

from mcp_secure.rules.base import Issue, Severity
from mcp_secure.rules.context import FileContext
from mcp_secure.rules.trackers import AsyncErrorTracker


class ErrorHandlingRule:
    """Report async functions that close without try/catch after an await."""

    id = "MCP007"
    name = "Missing Error Handling"
    description = "Detects async operations without error handling"
    default_severity = Severity.LOW

    def run(self, ctx: FileContext) -> list[Issue]:
        results: list[Issue] = []
        tracker = AsyncErrorTracker(ctx.content)
        for line in ctx.lines:
            if tracker.step(line):
                results.append(
                    Issue(
                        rule=self.id,
                        severity=self.default_severity,
                        message="Async function missing try-catch error handling",
                        file=ctx.file,
                        line=line.lineno,
                        fix=(
                            "Wrap async operations in try-catch blocks to handle errors gracefully."
                        ),
                    )
                )
        return results
