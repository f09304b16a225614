import json
import logging

import pytest

from pairingplanner.cli import (
    EXIT_INVALID_INPUT,
    EXIT_OK,
    create_parser,
    main,
    read_players_file,
)
from pairingplanner.export import parse_csv, parse_xlsx


def test_generate_prints_text(capsys):
    code = main(["generate", "--players", "A", "B", "C", "D", "--rounds", "3"])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "Round robin: 4 players, 3 rounds (cycle length 3)" in out
    assert "Round 1:\n  A vs D\n  B vs C" in out
    assert "repeated pairs: 0" in out


def test_generate_text_shows_byes_and_dates(capsys):
    code = main(
        [
            "generate",
            "--players",
            "A",
            "B",
            "C",
            "--rounds",
            "2",
            "--start-date",
            "2025-03-01",
        ]
    )

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "Round 1 (2025-03-01):" in out
    assert "Round 2 (2025-03-08):" in out
    assert "  Bye: " in out


def test_generate_json(capsys):
    code = main(["generate", "--players", "A", "B", "--rounds", "2", "--format", "json"])

    data = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert data["numberOfRounds"] == 2
    assert data["statistics"]["repeatedPairs"] == 1
    assert data["playerUsage"]["A"] == {"appearances": 2, "byes": 0}


def test_generate_csv_to_file(tmp_path):
    output = tmp_path / "plan.csv"
    code = main(
        [
            "generate",
            "--players",
            "A",
            "B",
            "C",
            "--rounds",
            "3",
            "--format",
            "csv",
            "--output",
            str(output),
        ]
    )

    assert code == EXIT_OK
    rows = parse_csv(output.read_bytes())
    assert len(rows) == 6
    assert sum(1 for row in rows if row.is_bye) == 3


def test_generate_xlsx_into_directory(tmp_path):
    code = main(
        [
            "generate",
            "--players",
            "A",
            "B",
            "--rounds",
            "1",
            "--format",
            "xlsx",
            "--output",
            str(tmp_path),
        ]
    )

    assert code == EXIT_OK
    rows = parse_xlsx((tmp_path / "schedule-2p-1r.xlsx").read_bytes())
    assert [(r.player_a, r.player_b) for r in rows] == [("A", "B")]


def test_players_file(tmp_path, capsys):
    roster = tmp_path / "roster.txt"
    roster.write_text("# club night\nAnna\n\n  Ben  \nClara\n", encoding="utf-8")

    assert read_players_file(roster) == ["Anna", "Ben", "Clara"]
    assert main(["generate", "--players-file", str(roster), "--rounds", "3"]) == EXIT_OK
    assert "3 players" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["generate", "--rounds", "3"],
        ["generate", "--players", "A", "A", "--rounds", "3"],
        ["generate", "--players", "A", "B", "--rounds", "0"],
    ],
)
def test_invalid_input_exits_with_two(argv):
    assert main(argv) == EXIT_INVALID_INPUT


def test_invalid_environment_exits_with_two(monkeypatch):
    monkeypatch.setenv("PAIRING_PLANNER_PORT", "not-a-port")
    assert main(["generate", "--players", "A", "B", "--rounds", "1"]) == EXIT_INVALID_INPUT


@pytest.mark.parametrize(
    "argv",
    [
        ["generate", "--players", "A", "--rounds", "three"],
        ["generate", "--players", "A", "--rounds", "1", "--start-date", "soon"],
        ["generate", "--players", "A", "--rounds", "1", "--format", "pdf"],
    ],
)
def test_malformed_arguments_are_rejected_by_the_parser(argv):
    with pytest.raises(SystemExit) as excinfo:
        create_parser().parse_args(argv)
    assert excinfo.value.code == 2


def test_start_date_help_names_the_interval_setting(capsys):
    with pytest.raises(SystemExit):
        main(["generate", "--help"])
    assert "PAIRING_PLANNER_ROUND_INTERVAL_DAYS" in capsys.readouterr().out


def test_cli_applies_the_configured_log_level(monkeypatch):
    package_logger = logging.getLogger("pairingplanner")
    previous = package_logger.level
    monkeypatch.setenv("PAIRING_PLANNER_LOG_LEVEL", "ERROR")
    try:
        assert main(["generate", "--players", "A", "B", "--rounds", "1"]) == EXIT_OK
        assert package_logger.level == logging.ERROR
    finally:
        package_logger.setLevel(previous)
