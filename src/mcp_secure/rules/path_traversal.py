# SPDX-License-Identifier: MIT
"""MCP002: path-traversal — file I/O or module loading with ``..`` in the argument."""

from __future__ import annotations

import re

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import LinePattern, PatternRule

_PATTERNS: tuple[LinePattern, ...] = (
    LinePattern("readFile()", re.compile(r"readFile\s*\([^)]*\.\.")),
    LinePattern("writeFile()", re.compile(r"writeFile\s*\([^)]*\.\.")),
    LinePattern("require()", re.compile(r"require\s*\([^)]*\.\.")),
    LinePattern("dynamic import()", re.compile(r"import\s*\([^)]*\.\.")),
)

_COMMENT_MARKER = "//"


class PathTraversalRule(PatternRule):
    """Flag file and module operations whose argument walks up the tree."""

    id = "MCP002"
    name = "Path Traversal"
    description = "Detects path traversal vulnerabilities"
    default_severity = Severity.CRITICAL
    message = "Potential path traversal vulnerability"
    fix = (
        "Validate and sanitize file paths. "
        "Use path.resolve() and check against allowed directories."
    )
    patterns = _PATTERNS

    def suppressed(self, text: str) -> bool:
        # Any "//" counts, including URLs; lexical heuristic only
        return _COMMENT_MARKER in text
