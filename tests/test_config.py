"""Tests for settings and the command line."""

import pytest
from typer.testing import CliRunner

from unotable.cli import app
from unotable.config import Settings


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings == Settings(seats=2, presentation_delay=0.8, seed=None, hand_size=7, log_level="WARNING")


def test_values_from_environment() -> None:
    settings = Settings.from_env(
        {
            "UNOTABLE_SEATS": "4",
            "UNOTABLE_DELAY": "0",
            "UNOTABLE_SEED": "12",
            "UNOTABLE_HAND_SIZE": "5",
            "UNOTABLE_LOG_LEVEL": "debug",
        }
    )
    assert settings.seats == 4
    assert settings.presentation_delay == 0.0
    assert settings.seed == 12
    assert settings.hand_size == 5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "environ",
    [
        {"UNOTABLE_SEATS": "5"},
        {"UNOTABLE_SEATS": "1"},
        {"UNOTABLE_DELAY": "-1"},
        {"UNOTABLE_HAND_SIZE": "0"},
        {"UNOTABLE_SEATS": "4", "UNOTABLE_HAND_SIZE": "30"},
    ],
)
def test_invalid_settings(environ) -> None:
    with pytest.raises(ValueError):
        Settings.from_env(environ)


def test_simulate_command(monkeypatch) -> None:
    monkeypatch.setenv("UNOTABLE_SEATS", "2")
    monkeypatch.setenv("UNOTABLE_LOG_LEVEL", "WARNING")
    result = CliRunner().invoke(app, ["simulate", "--rounds", "3", "--seats", "3", "--seed", "4"])
    assert result.exit_code == 0, result.output
    assert "Series results:" in result.output
    assert "wins" in result.output


def test_simulate_rejects_seat_count() -> None:
    result = CliRunner().invoke(app, ["simulate", "--rounds", "1", "--seats", "6"])
    assert result.exit_code != 0


def test_oversized_hand_is_a_usage_error(monkeypatch) -> None:
    monkeypatch.setenv("UNOTABLE_SEATS", "4")
    monkeypatch.setenv("UNOTABLE_HAND_SIZE", "30")
    result = CliRunner().invoke(app, ["simulate", "--rounds", "1"])
    assert result.exit_code == 2


def test_seat_override_is_checked_against_hand_size(monkeypatch) -> None:
    monkeypatch.setenv("UNOTABLE_SEATS", "2")
    monkeypatch.setenv("UNOTABLE_HAND_SIZE", "25")
    result = CliRunner().invoke(app, ["simulate", "--rounds", "1", "--seats", "4"])
    assert result.exit_code == 2
