"""Mini README: Tests for environment-driven settings.

Validates defaults, ``SPENDCHART_`` environment overrides and the
validation of ports, session limits and log levels.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from spendchart.configuration import SpendChartSettings


def test_defaults() -> None:
    settings = SpendChartSettings(_env_file=None)

    assert settings.interface_port == 8000
    assert settings.session_limit == 256
    assert settings.log_level == "INFO"
    assert settings.is_production is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed environment variables override the defaults."""

    monkeypatch.setenv("SPENDCHART_INTERFACE_PORT", "9001")
    monkeypatch.setenv("SPENDCHART_ENVIRONMENT", "Production")
    monkeypatch.setenv("SPENDCHART_LOG_LEVEL", "debug")

    settings = SpendChartSettings(_env_file=None)

    assert settings.interface_port == 9001
    assert settings.is_production is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"interface_port": 0},
        {"interface_port": 70000},
        {"session_limit": 0},
        {"log_level": "chatty"},
    ],
)
def test_invalid_values_are_rejected(overrides) -> None:
    with pytest.raises(ValidationError):
        SpendChartSettings(_env_file=None, **overrides)
