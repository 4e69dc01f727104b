# SPDX-License-Identifier: MIT
"""mcp-secure — static security scanner for Model Context Protocol servers."""

from importlib.metadata import PackageNotFoundError, version

from mcp_secure.rules import Issue, RuleEngine, RuleInfo, Severity, run_rules
from mcp_secure.scanner import (
    ScanResult,
    ScanTargetError,
    SecurityScanner,
    filter_by_severity,
    list_rules,
    result_from_issues,
)

try:
    __version__ = version("mcp-secure")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0-dev"

__all__ = [
    "Issue",
    "RuleEngine",
    "RuleInfo",
    "ScanResult",
    "ScanTargetError",
    "SecurityScanner",
    "Severity",
    "__version__",
    "filter_by_severity",
    "list_rules",
    "result_from_issues",
    "run_rules",
]
