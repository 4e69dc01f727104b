# SPDX-License-Identifier: MIT
"""Command-line entry point — scan, rules, and ci subcommands.

Usage:
    mcp-secure scan [path] [--severity S] [--json] [--fail-on S] [--profile P]
    mcp-secure rules
    mcp-secure ci [path]

Environment variables:
    MCP_SECURE_PROFILE    — scan profile: default, strict, pedantic (default: default)
    MCP_SECURE_FAIL_ON    — exit non-zero on issues at or above this severity
    MCP_SECURE_WORKERS    — files scanned in parallel (default: 1)
    MCP_SECURE_LOG_LEVEL  — logging level name (default: WARNING)
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from mcp_secure import __version__
from mcp_secure.report import (
    CiReport,
    exit_code,
    format_rules_table,
    format_text_report,
    result_to_json,
)
from mcp_secure.rules.base import Severity
from mcp_secure.rules.config import PROFILES, load_profile, load_workers, resolve_fail_on
from mcp_secure.scanner import (
    ScanResult,
    ScanTargetError,
    SecurityScanner,
    list_rules,
    result_from_issues,
)

LOG_LEVEL_ENV = "MCP_SECURE_LOG_LEVEL"

_SEVERITY_CHOICES = [s.value for s in Severity]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-secure",
        description="Security scanner and linter for MCP servers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging (overrides MCP_SECURE_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan MCP server code for security vulnerabilities")
    scan.add_argument("path", nargs="?", default=None, help="File or directory (default: cwd)")
    scan.add_argument(
        "--severity",
        type=str.lower,
        choices=_SEVERITY_CHOICES,
        default=None,
        help="Only show issues of this severity or higher",
    )
    scan.add_argument("--json", action="store_true", help="Output results as JSON")
    scan.add_argument(
        "--fail-on",
        type=str.lower,
        choices=_SEVERITY_CHOICES,
        default=None,
        help="Exit with error code if issues found at or above this severity",
    )
    scan.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=None,
        help="Scan profile (overrides MCP_SECURE_PROFILE env var)",
    )
    scan.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Files to scan in parallel (overrides MCP_SECURE_WORKERS env var)",
    )

    sub.add_parser("rules", help="List all security rules")

    ci = sub.add_parser("ci", help="Run scan optimized for CI/CD (JSON output, exit codes)")
    ci.add_argument("path", nargs="?", default=None, help="Directory to scan (default: cwd)")
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Route library warnings (skipped files, failing rules) to stderr."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_scan(target: str | None, workers: int = 1) -> ScanResult:
    """Scan a file or directory; a file bypasses discovery and counts as one file.

    Raises:
        ScanTargetError: If the target does not exist or cannot be read.
    """
    path = Path(target) if target else Path.cwd()
    scanner = SecurityScanner(path, workers=workers)
    if path.is_file():
        return result_from_issues(scanner.scan_file(path), files=1)
    return scanner.scan(path)


def _cmd_scan(args: argparse.Namespace) -> int:
    try:
        profile = load_profile(cli_profile=args.profile)
        fail_on = resolve_fail_on(args.fail_on, profile)
        workers = load_workers(args.workers)
        result = run_scan(args.path, workers=workers)
    except (ScanTargetError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(result_to_json(result))
    else:
        severity = Severity.parse(args.severity) if args.severity else None
        print(format_text_report(result, severity=severity))
    return exit_code(result, fail_on)


def _cmd_rules(args: argparse.Namespace) -> int:
    print(format_rules_table(list_rules()))
    return 0


def _cmd_ci(args: argparse.Namespace) -> int:
    try:
        workers = load_workers()
        result = run_scan(args.path, workers=workers)
    except (ScanTargetError, ValueError) as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        return 1
    print(CiReport.from_result(result).model_dump_json(indent=2))
    return 0 if result.passed else 1


_COMMANDS = {
    "scan": _cmd_scan,
    "rules": _cmd_rules,
    "ci": _cmd_ci,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    return _COMMANDS[args.command](args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
