# SPDX-License-Identifier: MIT
"""MCP009: unrestricted-network-access — outbound requests to interpolated URLs."""

from __future__ import annotations

import re

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import LinePattern, PatternRule

_PATTERNS: tuple[LinePattern, ...] = (
    LinePattern("fetch()", re.compile(r"fetch\s*\([^)]*\$\{")),
    LinePattern("axios()", re.compile(r"axios\s*\([^)]*\$\{")),
    LinePattern("request()", re.compile(r"request\s*\([^)]*\$\{")),
    LinePattern("http.get()", re.compile(r"http\.get\s*\([^)]*\$\{")),
)


class NetworkAccessRule(PatternRule):
    """Flag HTTP calls whose target is built from a template literal (SSRF risk)."""

    id = "MCP009"
    name = "Unrestricted Network Access"
    description = "Detects unrestricted network requests"
    default_severity = Severity.HIGH
    message = "Unrestricted network request with user-controlled URL"
    fix = "Validate URLs against an allowlist. Prevent SSRF by restricting to known-safe domains."
    patterns = _PATTERNS
