# SPDX-License-Identifier: MIT
"""MCP004: sql-injection — query calls and SQL statements built with interpolation."""

from __future__ import annotations

import re

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import LinePattern, PatternRule

_PATTERNS: tuple[LinePattern, ...] = (
    LinePattern("query()", re.compile(r"query\s*\([^)]*\$\{")),
    LinePattern("execute()", re.compile(r"execute\s*\([^)]*\$\{")),
    LinePattern("SELECT", re.compile(r"SELECT.*\$\{")),
    LinePattern("INSERT", re.compile(r"INSERT.*\$\{")),
    LinePattern("UPDATE", re.compile(r"UPDATE.*\$\{")),
    LinePattern("DELETE", re.compile(r"DELETE.*\$\{")),
)


class SqlInjectionRule(PatternRule):
    """Flag SQL built from template literals."""

    id = "MCP004"
    name = "SQL Injection"
    description = "Detects potential SQL injection vulnerabilities"
    default_severity = Severity.HIGH
    message = "Potential SQL injection vulnerability"
    fix = (
        "Use parameterized queries or prepared statements. "
        "Never concatenate user input into SQL queries."
    )
    patterns = _PATTERNS
