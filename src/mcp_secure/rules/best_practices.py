# SPDX-License-Identifier: MIT
"""MCP008: best-practices — official SDK usage and tool descriptions."""

from __future__ import annotations

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import FileCheckRule

_SDK_PACKAGE = "@modelcontextprotocol/sdk"
_TOOLS_MARKER = "tools:"
_DESCRIPTION_MARKER = "description:"


class BestPracticesRule(FileCheckRule):
    """Informational checks on how the server is built."""

    id = "MCP008"
    name = "MCP Best Practices"
    description = "Checks MCP-specific best practices"
    default_severity = Severity.INFO

    def checks(self, content: str) -> list[tuple[str, str]]:
        found: list[tuple[str, str]] = []
        if _SDK_PACKAGE not in content:
            found.append(
                (
                    f"Consider using the official MCP SDK ({_SDK_PACKAGE})",
                    "Using the official SDK ensures compatibility and follows best practices.",
                )
            )
        if _TOOLS_MARKER in content and _DESCRIPTION_MARKER not in content:
            found.append(
                (
                    "Tools should include descriptions for better discoverability",
                    "Add description fields to all tools to help users understand their purpose.",
                )
            )
        return found
