import logging

import pytest
from fastapi.testclient import TestClient

from pairingplanner.api import create_app
from pairingplanner.config import PlannerSettings


@pytest.fixture
def client():
    return TestClient(create_app(PlannerSettings()))


def _generate(client, players, rounds, **extra):
    body = {"playerNames": players, "numberOfRounds": rounds}
    body.update(extra)
    return client.post("/planer/generate", json=body)


def test_health(client):
    response = client.get("/planer/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK"}


@pytest.mark.parametrize(
    "path",
    [
        "/planer/pairings",
        "/planer/player-usage",
        "/planer/statistics",
        "/planer/pairing-frequencies",
        "/planer/download",
    ],
)
def test_reads_before_generation_return_404(client, path):
    response = client.get(path)

    assert response.status_code == 404
    assert response.json()["reason"] == "NoScheduleYet"


def test_generate_returns_the_full_schedule(client):
    response = _generate(client, ["A", "B", "C", "D"], 3)

    assert response.status_code == 200
    data = response.json()
    assert data["players"] == ["A", "B", "C", "D"]
    assert data["numberOfRounds"] == 3
    assert data["cycleLength"] == 3
    assert data["rounds"][0] == {
        "round": 1,
        "pairings": [
            {"playerA": "A", "playerB": "D"},
            {"playerA": "B", "playerB": "C"},
        ],
        "bye": None,
    }


def test_pairings_usage_and_statistics_after_generation(client):
    _generate(client, ["A", "B", "C"], 3)

    rounds = client.get("/planer/pairings").json()
    assert [r["round"] for r in rounds] == [1, 2, 3]
    assert sorted(r["bye"] for r in rounds) == ["A", "B", "C"]

    usage = client.get("/planer/player-usage").json()
    assert usage == {
        "A": {"appearances": 2, "byes": 1},
        "B": {"appearances": 2, "byes": 1},
        "C": {"appearances": 2, "byes": 1},
    }

    stats = client.get("/planer/statistics").json()
    assert stats["totalPairings"] == 3
    assert stats["totalByes"] == 3
    assert stats["repeatedPairs"] == 0
    assert stats["balanceSpread"] == 0


def test_regeneration_replaces_the_schedule(client):
    _generate(client, ["A", "B", "C"], 3)
    _generate(client, ["X", "Y"], 5)

    stats = client.get("/planer/statistics").json()
    assert stats["playerCount"] == 2
    assert stats["repeatedPairs"] == 1


@pytest.mark.parametrize(
    "body,reason",
    [
        ({"playerNames": [], "numberOfRounds": 3}, "EmptyRoster"),
        ({"playerNames": ["A", "A"], "numberOfRounds": 3}, "DuplicatePlayer"),
        ({"playerNames": ["A", " "], "numberOfRounds": 3}, "InvalidPlayerName"),
        ({"playerNames": ["A", "B"], "numberOfRounds": 0}, "InvalidRoundCount"),
        ({"playerNames": ["A", "B"]}, "BadRequest"),
        ({"numberOfRounds": 2}, "BadRequest"),
        ({"playerNames": ["A", "B"], "numberOfRounds": "many"}, "BadRequest"),
    ],
)
def test_invalid_generate_requests_return_400(client, body, reason):
    response = client.post("/planer/generate", json=body)

    assert response.status_code == 400
    payload = response.json()
    assert payload["reason"] == reason
    assert payload["error"]


def test_failed_generate_keeps_the_previous_schedule(client):
    _generate(client, ["A", "B"], 1)
    _generate(client, [], 1)

    assert client.get("/planer/statistics").json()["playerCount"] == 2


def test_download_csv(client):
    _generate(client, ["A", "B", "C", "D"], 3)
    response = client.get("/planer/download")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/vnd.ms-excel")
    assert (
        response.headers["content-disposition"]
        == 'attachment; filename="schedule-4p-3r.csv"'
    )
    assert response.content.decode("utf-8-sig").startswith("Round,Player A,Player B")


def test_download_xlsx_and_unknown_format(client):
    _generate(client, ["A", "B"], 2)

    response = client.get("/planer/download", params={"format": "xlsx"})
    assert response.status_code == 200
    assert response.content.startswith(b"PK")

    response = client.get("/planer/download", params={"format": "pdf"})
    assert response.status_code == 400
    assert response.json()["reason"] == "InvalidExportFormat"


def test_dated_generation(client):
    data = _generate(client, ["A", "B"], 2, startDate="2025-03-01").json()
    assert [r["date"] for r in data["rounds"]] == ["2025-03-01", "2025-03-08"]


def test_player_schedule_and_frequencies(client):
    _generate(client, ["A", "B", "C", "D"], 4)

    response = client.get("/planer/players/B/schedule")
    assert response.status_code == 200
    assert [entry["round"] for entry in response.json()] == [1, 2, 3, 4]

    frequencies = client.get("/planer/pairing-frequencies").json()
    assert frequencies[0]["frequency"] == 2

    response = client.get("/planer/players/Zed/schedule")
    assert response.status_code == 404
    assert response.json()["reason"] == "PlayerNotFound"


def test_applications_do_not_share_schedules():
    first = TestClient(create_app(PlannerSettings()))
    second = TestClient(create_app(PlannerSettings()))
    _generate(first, ["A", "B"], 1)

    assert second.get("/planer/pairings").status_code == 404


def test_names_with_control_characters_are_rejected(client):
    response = _generate(client, ["Al\u0001ice", "Bob"], 2)

    assert response.status_code == 400
    assert response.json()["reason"] == "InvalidPlayerName"
    assert client.get("/planer/download", params={"format": "xlsx"}).status_code == 404


def test_download_xlsx_with_formula_like_names(client):
    _generate(client, ["=1+1", "@home", "Bob"], 3)

    response = client.get("/planer/download", params={"format": "xlsx"})
    assert response.status_code == 200
    assert response.content.startswith(b"PK")


def test_app_applies_the_configured_log_level():
    package_logger = logging.getLogger("pairingplanner")
    previous = package_logger.level
    try:
        create_app(PlannerSettings(log_level="warning"))
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(previous)
