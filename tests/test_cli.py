"""Mini README: Tests for the Typer command line.

Drives the interactive console with scripted input and checks that ``run``
hands the application factory to uvicorn with the chosen options.
"""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import main_spendchart

runner = CliRunner()


def test_console_applies_budget_and_expenses() -> None:
    """Budget 3000 minus rent 1200 and groceries 500 leaves 1300."""

    result = runner.invoke(
        main_spendchart.cli,
        ["console"],
        input="b\n3000\n1\n1200\n3\n500\nq\n",
    )

    assert result.exit_code == 0, result.output
    assert "Groceries" in result.output
    assert "$3000.00" in result.output
    assert "$1700.00" in result.output
    assert "$1300.00" in result.output


def test_console_blank_reply_cancels_savings() -> None:
    result = runner.invoke(main_spendchart.cli, ["console"], input="s\n\nq\n")

    assert result.exit_code == 0, result.output
    savings_lines = [line for line in result.output.splitlines() if line.startswith("Savings:")]
    assert len(savings_lines) == 2
    assert all(line.endswith("$0.00") for line in savings_lines)


def test_console_rejects_unknown_choice() -> None:
    result = runner.invoke(main_spendchart.cli, ["console"], input="9\nq\n")

    assert result.exit_code == 0, result.output
    assert "Unknown choice '9'." in result.output


def test_run_starts_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {}

    def fake_run(app: str, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(main_spendchart.uvicorn, "run", fake_run)

    result = runner.invoke(
        main_spendchart.cli,
        ["run", "--host", "0.0.0.0", "--port", "9100", "--production"],
    )

    assert result.exit_code == 0, result.output
    assert "http://127.0.0.1:9100" in result.output
    assert calls["app"] == "spendchart.interface.web_app:create_application"
    assert calls["port"] == 9100
    assert calls["factory"] is True
    assert calls["reload"] is False
