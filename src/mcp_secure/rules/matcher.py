# SPDX-License-Identifier: MIT
"""Line/pattern matcher and the base classes shared by stateless rules."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from mcp_secure.rules.base import Issue, Severity
from mcp_secure.rules.context import FileContext, SourceLine


@dataclass(frozen=True)
class LinePattern:
    """One detection pattern of a rule."""

    label: str
    regex: re.Pattern[str]


def match_lines(
    ctx: FileContext, patterns: tuple[LinePattern, ...]
) -> Iterator[tuple[SourceLine, LinePattern]]:
    """Yield every (line, pattern) pair where the pattern matches the line.

    Ordered by line, then by pattern. Several patterns matching one line
    each yield their own pair.
    """
    for line in ctx.lines:
        for pattern in patterns:
            if pattern.regex.search(line.text):
                yield line, pattern


class PatternRule:
    """Stateless rule: one issue per matching (line, pattern) pair."""

    id: str
    name: str
    description: str
    default_severity: Severity
    message: str
    fix: str
    patterns: tuple[LinePattern, ...] = ()

    def run(self, ctx: FileContext) -> list[Issue]:
        results: list[Issue] = []
        for line, pattern in match_lines(ctx, self.patterns):
            if self.suppressed(line.text):
                continue
            results.append(
                Issue(
                    rule=self.id,
                    severity=self.default_severity,
                    message=self.message_for(pattern),
                    file=ctx.file,
                    line=line.lineno,
                    code=self.excerpt(line.text),
                    fix=self.fix,
                )
            )
        return results

    def suppressed(self, text: str) -> bool:
        """Return True if a matching line should not be reported."""
        return False

    def message_for(self, pattern: LinePattern) -> str:
        return self.message

    def excerpt(self, text: str) -> str:
        return text.strip()


class FileCheckRule:
    """File-level rule driven by substring presence/absence checks."""

    id: str
    name: str
    description: str
    default_severity: Severity

    def run(self, ctx: FileContext) -> list[Issue]:
        # An empty file has nothing to check
        if not ctx.content.strip():
            return []
        return [
            Issue(
                rule=self.id,
                severity=self.default_severity,
                message=message,
                file=ctx.file,
                fix=fix,
            )
            for message, fix in self.checks(ctx.content)
        ]

    def checks(self, content: str) -> list[tuple[str, str]]:
        """Return a (message, fix) pair for each failed check."""
        raise NotImplementedError
