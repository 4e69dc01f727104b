# SPDX-License-Identifier: MIT
"""MCP010: missing-rate-limiting — request handlers with no throttling anywhere in the file."""

from __future__ import annotations

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import FileCheckRule

_HANDLER_MARKER = "server.setRequestHandler"
_LIMITER_MARKERS = ("rateLimit", "throttle")


class RateLimitingRule(FileCheckRule):
    """Flag servers that register request handlers but never rate-limit."""

    id = "MCP010"
    name = "Missing Rate Limiting"
    description = "Detects lack of rate limiting on tools"
    default_severity = Severity.MEDIUM

    def checks(self, content: str) -> list[tuple[str, str]]:
        if _HANDLER_MARKER not in content:
            return []
        if any(marker in content for marker in _LIMITER_MARKERS):
            return []
        return [
            (
                "No rate limiting detected in MCP server",
                "Implement rate limiting to prevent abuse and DoS attacks.",
            )
        ]
