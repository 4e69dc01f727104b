# SPDX-License-Identifier: MIT
"""Report rendering — JSON payloads, plain-text summaries, and exit codes."""

from __future__ import annotations

from collections.abc import Sequence

import navi_sanitize
from pydantic import BaseModel

from mcp_secure.rules.base import Issue, RuleInfo, Severity
from mcp_secure.scanner import ScanResult, filter_by_severity


class CiSummary(BaseModel):
    """Per-severity counts for the CI payload."""

    critical: int
    high: int
    medium: int
    low: int
    info: int


class CiReport(BaseModel):
    """Payload printed by the ``ci`` command."""

    passed: bool
    files: int
    summary: CiSummary
    issues: list[Issue]

    @classmethod
    def from_result(cls, result: ScanResult) -> CiReport:
        return cls(
            passed=result.passed,
            files=result.files,
            summary=CiSummary(
                critical=result.critical,
                high=result.high,
                medium=result.medium,
                low=result.low,
                info=result.info,
            ),
            issues=result.issues,
        )


def result_to_json(result: ScanResult) -> str:
    """Serialize a ScanResult field-for-field."""
    return result.model_dump_json(indent=2)


def exit_code(result: ScanResult, fail_on: Severity | None = None) -> int:
    """Map a result to a process exit code.

    With a floor, fail when any issue is at or above it. Without one, fail
    when the result did not pass.
    """
    if fail_on is not None:
        return 1 if filter_by_severity(result.issues, fail_on) else 0
    return 0 if result.passed else 1


def _clean(text: str) -> str:
    """Neutralize invisible, bidi, and homoglyph characters before printing.

    Excerpts come straight from scanned files, which may carry trojan-source
    style control characters.
    """
    return navi_sanitize.clean(text)


def format_text_report(result: ScanResult, severity: Severity | None = None) -> str:
    """Render a human-readable report: summary table, issues, and verdict."""
    lines: list[str] = []
    lines.append("Scan Results")
    lines.append("=" * 40)
    lines.append(f"Files scanned: {result.files}")
    lines.append(f"Total issues: {len(result.issues)}")
    lines.append("")

    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for level in Severity:
        lines.append(f"{level.value.capitalize():<10} | {result.count(level):>5}")
    lines.append("-" * len(header))

    shown = result.issues if severity is None else filter_by_severity(result.issues, severity)
    lines.append("")
    if shown:
        lines.append("Issues Found")
        lines.append("-" * 40)
        for idx, issue in enumerate(shown, start=1):
            location = issue.file if issue.line is None else f"{issue.file}:{issue.line}"
            lines.append(
                f"{idx}. [{issue.severity.value.upper()}] {issue.rule} - {_clean(issue.message)}"
            )
            lines.append(f"   File: {_clean(location)}")
            if issue.code:
                lines.append(f"   Code: {_clean(issue.code)}")
            if issue.fix:
                lines.append(f"   Fix: {issue.fix}")
            lines.append("")
    else:
        lines.append("No security issues found.")
        lines.append("")

    if result.passed:
        lines.append("PASSED - No critical or high severity issues")
    else:
        lines.append(
            f"FAILED - Found {result.critical + result.high} critical/high severity issues"
        )
    return "\n".join(lines)


def format_rules_table(rules: Sequence[RuleInfo]) -> str:
    """Render the rule catalog as a plain-text table."""
    lines: list[str] = []
    header = f"{'ID':<8} | {'Severity':<9} | {'Name':<28} | Description"
    lines.append(header)
    lines.append("-" * len(header))
    for rule in rules:
        lines.append(
            f"{rule.id:<8} | {rule.severity.value:<9} | {rule.name:<28} | {rule.description}"
        )
    lines.append("")
    lines.append(f"Total rules: {len(rules)}")
    return "\n".join(lines)
