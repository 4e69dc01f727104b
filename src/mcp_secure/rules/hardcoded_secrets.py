# SPDX-License-Identifier: MIT
"""MCP003: hardcoded-secrets — API keys, passwords, tokens, and provider key formats."""

from __future__ import annotations

import re

from mcp_secure.rules.base import Severity
from mcp_secure.rules.matcher import LinePattern, PatternRule

_PATTERNS: tuple[LinePattern, ...] = (
    LinePattern(
        "API Key",
        re.compile(
            r"""(?i:api[_-]?key|apikey)\s*[:=]\s*['"]"""
            r"""(?:(?:sk-|pk_live)[A-Za-z0-9_-]*|[A-Za-z0-9]{32,})['"]"""
        ),
    ),
    LinePattern("Password", re.compile(r"""(?:password|passwd|pwd)\s*[:=]\s*['"][^'"]{8,}['"]""")),
    LinePattern(
        "Auth Token", re.compile(r"""(?:token|auth[_-]?token)\s*[:=]\s*['"][A-Za-z0-9]{20,}['"]""")
    ),
    LinePattern(
        "Secret", re.compile(r"""(?:secret|client[_-]?secret)\s*[:=]\s*['"][A-Za-z0-9]{20,}['"]""")
    ),
    # Provider-specific formats
    LinePattern("AWS Access Key", re.compile(r"AKIA[0-9A-Z]{16}")),
    LinePattern("GitHub Token", re.compile(r"ghp_[A-Za-z0-9]{36}")),
    LinePattern("GitHub Fine-grained Token", re.compile(r"github_pat_[A-Za-z0-9_]{22,}")),
    LinePattern("Slack Token", re.compile(r"xox[abprs]-[A-Za-z0-9-]{10,}")),
)

# A line reading from the environment is not a hardcoded secret
_ENV_ACCESSORS = ("process.env", "import.meta.env", "os.environ", "os.getenv")
_EXAMPLE_MARKER = "example"

_EXCERPT_CHARS = 50


class HardcodedSecretsRule(PatternRule):
    """Detect secret-shaped values assigned in source."""

    id = "MCP003"
    name = "Hardcoded Secrets"
    description = "Detects hardcoded API keys, tokens, and secrets"
    default_severity = Severity.HIGH
    message = "Potential hardcoded secret detected"
    fix = (
        "Use environment variables (process.env) to store sensitive data. "
        "Never commit secrets to version control."
    )
    patterns = _PATTERNS

    def suppressed(self, text: str) -> bool:
        return _EXAMPLE_MARKER in text or any(accessor in text for accessor in _ENV_ACCESSORS)

    def message_for(self, pattern: LinePattern) -> str:
        return f"Potential hardcoded {pattern.label} detected"

    def excerpt(self, text: str) -> str:
        """Trim the excerpt to a fixed-length prefix; short lines still show the value."""
        return text.strip()[:_EXCERPT_CHARS] + "..."
