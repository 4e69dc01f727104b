# SPDX-License-Identifier: MIT
"""Tests for mcp_secure.cli — subcommands, output modes, exit codes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mcp_secure.cli import build_parser, main

_SDK_IMPORT = 'import { Server } from "@modelcontextprotocol/sdk/server/index.js";\n'


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MCP_SECURE_PROFILE",
        "MCP_SECURE_FAIL_ON",
        "MCP_SECURE_WORKERS",
        "MCP_SECURE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def medium_only(tmp_path: Path) -> Path:
    """A project whose only finding is a MEDIUM deserialization issue."""
    (tmp_path / "server.ts").write_text(
        _SDK_IMPORT + "const data = JSON.parse(raw);\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def critical(tmp_path: Path) -> Path:
    (tmp_path / "server.ts").write_text(_SDK_IMPORT + "eval(code);\n", encoding="utf-8")
    return tmp_path


class TestParser:
    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_severity_choices_case_insensitive(self) -> None:
        args = build_parser().parse_args(["scan", "--fail-on", "HIGH"])
        assert args.fail_on == "high"

    def test_unknown_severity_rejected(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["scan", "--severity", "severe"])


class TestRulesCommand:
    def test_lists_rules(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["rules"]) == 0
        out = capsys.readouterr().out
        assert "MCP001" in out
        assert "Total rules: 10" in out


class TestScanCommand:
    def test_text_output(self, critical: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["scan", str(critical)]) == 1
        out = capsys.readouterr().out
        assert "[CRITICAL] MCP001" in out
        assert "FAILED" in out

    def test_json_output(self, critical: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["scan", str(critical), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["files"] == 1
        assert data["critical"] == 1
        assert data["issues"][0]["file"] == "server.ts"

    def test_single_file_target(self, critical: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["scan", str(critical / "server.ts"), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["files"] == 1
        assert data["issues"][0]["line"] == 2

    def test_passing_scan_exits_zero(self, medium_only: Path) -> None:
        assert main(["scan", str(medium_only)]) == 0

    def test_fail_on_floor(self, medium_only: Path) -> None:
        assert main(["scan", str(medium_only), "--fail-on", "medium"]) == 1
        assert main(["scan", str(medium_only), "--fail-on", "high"]) == 0

    def test_fail_on_overrides_default_gate(self, critical: Path) -> None:
        (critical / "server.ts").write_text(
            _SDK_IMPORT + 'const password = "hunter2hunter2";\n', encoding="utf-8"
        )
        assert main(["scan", str(critical)]) == 1
        assert main(["scan", str(critical), "--fail-on", "critical"]) == 0

    def test_profile_env(self, medium_only: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_SECURE_PROFILE", "strict")
        assert main(["scan", str(medium_only)]) == 1

    def test_profile_flag(self, medium_only: Path) -> None:
        assert main(["scan", str(medium_only), "--profile", "strict"]) == 1

    def test_severity_filter(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "server.ts").write_text("eval(code);\n", encoding="utf-8")
        main(["scan", str(tmp_path), "--severity", "critical"])
        out = capsys.readouterr().out
        assert "[CRITICAL]" in out
        assert "[INFO]" not in out

    def test_missing_path(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["scan", str(tmp_path / "missing")]) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("error: Cannot scan")
        assert captured.out == ""

    def test_invalid_workers_env(
        self,
        medium_only: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("MCP_SECURE_WORKERS", "lots")
        assert main(["scan", str(medium_only)]) == 1
        assert "MCP_SECURE_WORKERS" in capsys.readouterr().err

    def test_parallel_workers(self, critical: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (critical / "other.ts").write_text("JSON.parse(x);\n", encoding="utf-8")
        main(["scan", str(critical), "--json", "--workers", "3"])
        data = json.loads(capsys.readouterr().out)
        assert data["files"] == 2


class TestCiCommand:
    def test_passing(self, medium_only: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["ci", str(medium_only)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["passed"] is True
        assert data["files"] == 1
        assert data["summary"]["medium"] == 1

    def test_failing(self, critical: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["ci", str(critical)]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["passed"] is False
        assert data["summary"]["critical"] == 1

    def test_missing_path_reports_json_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["ci", str(tmp_path / "missing")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        data = json.loads(captured.err)
        assert "Cannot scan" in data["error"]
