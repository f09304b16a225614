from pathlib import Path

import pytest

from pairingplanner.config import PlannerSettings
from pairingplanner.exceptions import InvalidConfigurationException


def test_defaults():
    settings = PlannerSettings.from_env({})

    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.export_format == "csv"
    assert settings.export_dir is None
    assert settings.round_interval_days == 7
    assert settings.cors_origins == []


def test_values_are_read_from_the_environment():
    settings = PlannerSettings.from_env(
        {
            "PAIRING_PLANNER_HOST": "0.0.0.0",
            "PAIRING_PLANNER_PORT": "9000",
            "PAIRING_PLANNER_EXPORT_FORMAT": "xlsx",
            "PAIRING_PLANNER_EXPORT_DIR": "/tmp/plans",
            "PAIRING_PLANNER_ROUND_INTERVAL_DAYS": "14",
            "PAIRING_PLANNER_CORS_ORIGINS": "http://localhost:3000, https://club.example",
        }
    )

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.export_format == "xlsx"
    assert settings.export_dir == Path("/tmp/plans")
    assert settings.round_interval_days == 14
    assert settings.cors_origins == ["http://localhost:3000", "https://club.example"]


@pytest.mark.parametrize(
    "environ",
    [
        {"PAIRING_PLANNER_PORT": "eighty"},
        {"PAIRING_PLANNER_PORT": "70000"},
        {"PAIRING_PLANNER_EXPORT_FORMAT": "pdf"},
        {"PAIRING_PLANNER_ROUND_INTERVAL_DAYS": "0"},
    ],
)
def test_invalid_values_are_rejected(environ):
    with pytest.raises(InvalidConfigurationException):
        PlannerSettings.from_env(environ)


def test_dict_round_trip():
    settings = PlannerSettings(port=9100, export_dir=Path("out"), cors_origins=["*"])
    assert PlannerSettings.from_dict(settings.to_dict()) == settings


def test_log_level_is_normalized_and_checked():
    assert PlannerSettings.from_env({"PAIRING_PLANNER_LOG_LEVEL": "debug"}).log_level == "DEBUG"
    with pytest.raises(InvalidConfigurationException):
        PlannerSettings.from_env({"PAIRING_PLANNER_LOG_LEVEL": "chatty"})
