"""CLI behaviour coverage for the Click entry points."""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_store import __init__conf__
from lib_log_store import cli as cli_mod
from lib_log_store.cli import summary_info

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


@pytest.fixture(autouse=True)
def _clean_log_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_HISTORY_LENGTH", "LOG_EXPORT_DIR", "LOG_DEFAULT_LEVEL", "LOG_DEFAULT_COMPLEXITY", "LOG_DATE_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("LIB_LOG_STORE_USE_DOTENV", raising=False)


def test_summary_info_lists_metadata() -> None:
    summary = summary_info()

    assert summary.startswith("Info for lib_log_store:")
    assert f"version       = {__init__conf__.version}" in summary
    assert "shell_command = lib_log_store" in summary


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [], prog_name=__init__conf__.shell_command)

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_option() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"lib_log_store, version {__init__conf__.version}"


def test_cli_demo_prints_entries_and_statistics() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--no-color"])

    assert result.exit_code == 0, result.output
    plain = strip_ansi(result.output)
    assert "⚙️ Starting demo run" in plain
    assert "⚠️ Disk usage high, 92%" in plain
    assert "Hydrogen Reporter statistics" in plain
    assert "16.67" in plain
    assert "0.00" in plain
    assert "Total" in plain


def test_cli_demo_complex_rendering_includes_call_site() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--no-color", "--complexity", "complex"])

    assert result.exit_code == 0, result.output
    assert "in function demo" in strip_ansi(result.output)


def test_cli_demo_export_writes_report(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--no-color", "--export", "--export-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    location = Path(result.output.strip().splitlines()[-1])
    assert location.parent == tmp_path / "logs"
    assert location.name.startswith("log[")
    content = location.read_text(encoding="utf-8")
    assert content.startswith("Hydrogen Reporter logs for ")
    assert "--- ✅ Total Success Logs: 1 ---" in content
    assert content.endswith("=== END LOGS ===")


def test_cli_demo_export_failure_reports_error(tmp_path: Path) -> None:
    (tmp_path / "logs").write_text("not a directory", encoding="utf-8")

    result = CliRunner().invoke(cli_mod.cli, ["demo", "--no-color", "--export", "--export-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "report" in result.output


def test_cli_demo_history_trims_entries(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli_mod.cli,
        ["demo", "--no-color", "--history", "2", "--export", "--export-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    content = Path(result.output.strip().splitlines()[-1]).read_text(encoding="utf-8")
    assert "--- ✨ Total Logs: 2 ---" in content
    assert "Starting demo run" not in content.split("=== START LOGS ===", 1)[1]


def test_cli_demo_rejects_zero_history() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--history", "0"])

    assert result.exit_code == 2


def test_cli_demo_reports_invalid_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_HISTORY_LENGTH", "many")

    result = CliRunner().invoke(cli_mod.cli, ["demo"])

    assert result.exit_code == 2
    assert "LOG_HISTORY_LENGTH must be an integer" in result.output


def test_main_returns_exit_codes(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert "Info for lib_log_store" in capsys.readouterr().out

    assert cli_mod.main(["demo", "--history", "0"]) == 2
    assert "Invalid value" in capsys.readouterr().err
