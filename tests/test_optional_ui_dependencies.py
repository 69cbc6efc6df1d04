"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands are resilient when optional UI
packages are missing, and prompting fails cleanly only when UI paths
are actually exercised.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from rung_cli.cli import exit_codes
from rung_cli.cli.app import main
from rung_cli.cli.console import emit_info
from rung_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def _extension(tmp_path: Path) -> Path:
    path = tmp_path / "index.py"
    path.write_text("params = {'name': {'description': 'Name'}}\n", encoding="utf-8")
    return path


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_no_command_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert main([]) == exit_codes.SUCCESS


def test_status_lines_fall_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    emit_info("hello")
    assert "Info: hello" in capsys.readouterr().err


def test_run_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main(["run", "--file", str(_extension(tmp_path))])
