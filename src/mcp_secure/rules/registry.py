# SPDX-License-Identifier: MIT
"""Rule class registry — explicit, ordered tuple of all rule classes."""

from __future__ import annotations

from mcp_secure.rules.base import Rule, RuleInfo
from mcp_secure.rules.best_practices import BestPracticesRule
from mcp_secure.rules.command_injection import CommandInjectionRule
from mcp_secure.rules.deserialization import DeserializationRule
from mcp_secure.rules.error_handling import ErrorHandlingRule
from mcp_secure.rules.hardcoded_secrets import HardcodedSecretsRule
from mcp_secure.rules.input_validation import InputValidationRule
from mcp_secure.rules.network_access import NetworkAccessRule
from mcp_secure.rules.path_traversal import PathTraversalRule
from mcp_secure.rules.rate_limiting import RateLimitingRule
from mcp_secure.rules.sql_injection import SqlInjectionRule

RULE_REGISTRY: tuple[type[Rule], ...] = (
    CommandInjectionRule,
    PathTraversalRule,
    HardcodedSecretsRule,
    SqlInjectionRule,
    InputValidationRule,
    DeserializationRule,
    ErrorHandlingRule,
    BestPracticesRule,
    NetworkAccessRule,
    RateLimitingRule,
)


def rule_info(rule_class: type[Rule]) -> RuleInfo:
    """Describe a rule class without instantiating or running it."""
    return RuleInfo(
        id=rule_class.id,
        name=rule_class.name,
        severity=rule_class.default_severity,
        description=rule_class.description,
    )
