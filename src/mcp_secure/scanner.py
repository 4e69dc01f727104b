# SPDX-License-Identifier: MIT
"""Scan orchestrator — runs the rule engine over files and aggregates a ScanResult."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

from mcp_secure.discovery import SOURCE_EXTENSIONS, read_sources
from mcp_secure.rules.base import Issue, RuleInfo, Severity
from mcp_secure.rules.context import build_context
from mcp_secure.rules.engine import RuleEngine
from mcp_secure.rules.registry import RULE_REGISTRY, rule_info

log = logging.getLogger(__name__)


class ScanTargetError(Exception):
    """Raised when the scan target does not exist or cannot be read."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot scan {target}: {reason}")


class ScanResult(BaseModel):
    """Aggregate over every file scanned in one invocation.

    Issues are stable-sorted by severity on construction, and the counts and
    ``passed`` are always derived from them.
    """

    model_config = ConfigDict(frozen=True)

    files: int
    issues: list[Issue]

    @field_validator("issues")
    @classmethod
    def _sort_by_severity(cls, issues: list[Issue]) -> list[Issue]:
        return sorted(issues, key=lambda issue: issue.severity.rank)

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def critical(self) -> int:
        return self.count(Severity.CRITICAL)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def high(self) -> int:
        return self.count(Severity.HIGH)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def medium(self) -> int:
        return self.count(Severity.MEDIUM)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def low(self) -> int:
        return self.count(Severity.LOW)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def info(self) -> int:
        return self.count(Severity.INFO)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return self.critical == 0 and self.high == 0


def result_from_issues(issues: Iterable[Issue], files: int = 1) -> ScanResult:
    """Wrap a bare issue list (e.g. from ``scan_file``) into a ScanResult."""
    return ScanResult(files=files, issues=list(issues))


def filter_by_severity(issues: Iterable[Issue], floor: Severity) -> list[Issue]:
    """Keep issues at or above ``floor``, preserving order."""
    return [issue for issue in issues if issue.severity.at_least(floor)]


def list_rules() -> list[RuleInfo]:
    """Describe every registered rule without running any of them."""
    return [rule_info(cls) for cls in RULE_REGISTRY]


class SecurityScanner:
    """Scans files or directory trees with every registered rule."""

    def __init__(
        self,
        base_path: str | Path = ".",
        *,
        workers: int = 1,
        extensions: Sequence[str] | None = None,
        engine: RuleEngine | None = None,
    ) -> None:
        self.base_path = Path(base_path)
        self.workers = workers
        self.extensions = tuple(extensions) if extensions else SOURCE_EXTENSIONS
        self._engine = engine or RuleEngine()

    def scan_sources(self, sources: Iterable[tuple[str, str]]) -> ScanResult:
        """Scan (file, content) pairs; one pair counts as one scanned file."""
        pairs = list(sources)
        if self.workers > 1 and len(pairs) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                # map() yields in submission order, not completion order
                per_file = list(pool.map(self._scan_source, pairs))
        else:
            per_file = [self._scan_source(pair) for pair in pairs]

        issues: list[Issue] = []
        for file_issues in per_file:
            issues.extend(file_issues)
        return ScanResult(files=len(pairs), issues=issues)

    def scan(self, target: str | Path | None = None) -> ScanResult:
        """Discover source files under a directory and scan them.

        Raises:
            ScanTargetError: If the target does not exist or is not a directory.
        """
        root = Path(target) if target is not None else self.base_path
        if not root.exists():
            raise ScanTargetError(str(root), "path does not exist")
        if not root.is_dir():
            raise ScanTargetError(str(root), "not a directory (use scan_file)")
        log.debug("Scanning directory %s", root)
        return self.scan_sources(read_sources(root, self.extensions))

    def scan_file(self, path: str | Path) -> list[Issue]:
        """Scan exactly one file, bypassing discovery. Issues come in rule order.

        Raises:
            ScanTargetError: If the file does not exist or cannot be read.
        """
        file_path = Path(path)
        try:
            content = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ScanTargetError(str(path), "path does not exist") from None
        except (OSError, UnicodeDecodeError) as exc:
            raise ScanTargetError(str(path), str(exc)) from exc
        return self._scan_source((str(path), content))

    def get_rules(self) -> list[RuleInfo]:
        """Describe the rules this scanner runs, in registration order."""
        return [rule_info(type(rule)) for rule in self._engine.rules]

    def _scan_source(self, source: tuple[str, str]) -> list[Issue]:
        file, content = source
        log.debug("Scanning %s", file)
        return self._engine.run(build_context(file, content))
