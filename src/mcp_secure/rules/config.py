# SPDX-License-Identifier: MIT
"""Profile and scan configuration — CLI > env > default priority."""

from __future__ import annotations

import os
from dataclasses import dataclass

from mcp_secure.rules.base import Severity

PROFILE_ENV = "MCP_SECURE_PROFILE"
FAIL_ON_ENV = "MCP_SECURE_FAIL_ON"
WORKERS_ENV = "MCP_SECURE_WORKERS"


@dataclass(frozen=True)
class ProfileConfig:
    """Configuration for a scan profile — controls the exit-code floor.

    ``fail_on=None`` means the run fails exactly when the result did not pass
    (any critical or high issue).
    """

    name: str
    fail_on: Severity | None


PROFILES: dict[str, ProfileConfig] = {
    "default": ProfileConfig(name="default", fail_on=None),
    "strict": ProfileConfig(name="strict", fail_on=Severity.MEDIUM),
    "pedantic": ProfileConfig(name="pedantic", fail_on=Severity.LOW),
}


def load_profile(cli_profile: str | None = None) -> ProfileConfig:
    """Load profile config with CLI > env > default priority.

    Args:
        cli_profile: Profile name from CLI --profile flag (highest priority).

    Returns:
        ProfileConfig for the resolved profile.

    Raises:
        ValueError: If the profile name is not recognized.
    """
    name = cli_profile or os.environ.get(PROFILE_ENV, "default")
    if name not in PROFILES:
        msg = f"Unknown profile: {name!r}. Valid profiles: {sorted(PROFILES.keys())}"
        raise ValueError(msg)
    return PROFILES[name]


def resolve_fail_on(cli_fail_on: str | None, profile: ProfileConfig) -> Severity | None:
    """Resolve the failure floor: --fail-on, then MCP_SECURE_FAIL_ON, then the profile."""
    name = cli_fail_on or os.environ.get(FAIL_ON_ENV)
    if name:
        return Severity.parse(name)
    return profile.fail_on


def load_workers(cli_workers: int | None = None) -> int:
    """Resolve the worker count: --workers, then MCP_SECURE_WORKERS, then 1.

    Raises:
        ValueError: If the value is not a positive integer.
    """
    if cli_workers is not None:
        workers = cli_workers
    else:
        raw = os.environ.get(WORKERS_ENV, "1")
        try:
            workers = int(raw)
        except ValueError:
            msg = f"Invalid {WORKERS_ENV}={raw!r}. Must be a positive integer"
            raise ValueError(msg) from None
    if workers < 1:
        msg = f"Invalid worker count: {workers}. Must be at least 1"
        raise ValueError(msg)
    return workers
