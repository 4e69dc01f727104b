# SPDX-License-Identifier: MIT
"""MCP001: command-injection — shell execution with interpolation, dynamic eval."""

from __future__ import annotations

import re

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import LinePattern, PatternRule

_PATTERNS: tuple[LinePattern, ...] = (
    LinePattern("exec() with interpolation", re.compile(r"exec\s*\([^)]*\$\{")),
    LinePattern("spawn() with interpolation", re.compile(r"spawn\s*\([^)]*\$\{")),
    LinePattern("execSync() with interpolation", re.compile(r"execSync\s*\([^)]*\$\{")),
    LinePattern("child_process with interpolation", re.compile(r"child_process.*\$\{")),
    LinePattern("eval()", re.compile(r"eval\s*\(")),
    LinePattern("new Function()", re.compile(r"new Function\s*\(")),
)


class CommandInjectionRule(PatternRule):
    """Flag exec/spawn calls built from template literals and dynamic code evaluation."""

    id = "MCP001"
    name = "Command Injection"
    description = "Detects potential command injection vulnerabilities"
    default_severity = Severity.CRITICAL
    message = "Potential command injection vulnerability detected"
    fix = (
        "Sanitize user input before executing commands. "
        "Use allowlists and avoid template literals in exec/spawn."
    )
    patterns = _PATTERNS
