# SPDX-License-Identifier: MIT
"""Severity, issue dataclass, and Rule protocol for the security rule engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mcp_secure.rules.context import FileContext


class Severity(StrEnum):
    """Severity levels for issues, most severe first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Sort key: 0 for critical up to 4 for info."""
        return _RANKS[self]

    def at_least(self, floor: Severity) -> bool:
        """Return True if this severity is as severe as ``floor`` or more."""
        return self.rank <= floor.rank

    @classmethod
    def parse(cls, name: str) -> Severity:
        """Look up a severity by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known severity.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = [s.value for s in cls]
            msg = f"Unknown severity: {name!r}. Valid severities: {valid}"
            raise ValueError(msg) from None


_RANKS: dict[Severity, int] = {severity: idx for idx, severity in enumerate(Severity)}


@dataclass(frozen=True)
class Issue:
    """A single finding produced by one rule against one file."""

    rule: str
    severity: Severity
    message: str
    file: str
    line: int | None = None
    code: str | None = None
    fix: str | None = None


@dataclass(frozen=True)
class RuleInfo:
    """Rule metadata for listings; carries no matching logic."""

    id: str
    name: str
    severity: Severity
    description: str


@runtime_checkable
class Rule(Protocol):
    """Protocol that every security rule must satisfy."""

    id: str
    name: str
    description: str
    default_severity: Severity

    def run(self, ctx: FileContext) -> list[Issue]: ...
