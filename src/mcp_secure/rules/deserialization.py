# SPDX-License-Identifier: MIT
"""MCP006: insecure-deserialization — parsing untrusted data outside error handling."""

from __future__ import annotations

import re

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import LinePattern, PatternRule

_PATTERNS: tuple[LinePattern, ...] = (
    LinePattern("JSON.parse()", re.compile(r"JSON\.parse\s*\([^)]*\)")),
    LinePattern("yaml.load()", re.compile(r"yaml\.load\s*\([^)]*\)")),
    LinePattern("eval() of JSON", re.compile(r"eval\s*\([^)]*JSON")),
)

_GUARD_MARKERS = ("try", "catch")


class DeserializationRule(PatternRule):
    """Flag deserialization calls with no try/catch on the same line."""

    id = "MCP006"
    name = "Insecure Deserialization"
    description = "Detects unsafe deserialization patterns"
    default_severity = Severity.MEDIUM
    message = "Unprotected deserialization detected"
    fix = "Wrap deserialization in try-catch blocks and validate the structure after parsing."
    patterns = _PATTERNS

    def suppressed(self, text: str) -> bool:
        return any(marker in text for marker in _GUARD_MARKERS)
