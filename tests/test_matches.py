"""Testes dos endpoints de Matches"""
from datetime import datetime, timedelta, timezone

import pytest


def match_payload(**overrides):
    payload = {
        "homeTeam": "FC Club",
        "awayTeam": "Rivals United",
        "date": "2030-05-01T15:00:00",
        "time": "15:00",
        "venue": "Club Stadium",
    }
    payload.update(overrides)
    return payload


def iso(delta):
    return (datetime.now(timezone.utc) + delta).replace(microsecond=0, tzinfo=None).isoformat()


@pytest.fixture
def create_match(client, admin_headers):
    def _create(**overrides):
        response = client.post("/api/matches", json=match_payload(**overrides), headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _create


class TestMatchCrud:

    def test_create_applies_defaults(self, create_match):
        match = create_match()
        assert match["competition"] == "League"
        assert match["status"] == "scheduled"
        assert match["homeScore"] is None
        assert match["awayScore"] is None
        assert match["goalScorers"] == []

    def test_goal_scorers_keep_insertion_order(self, client, create_match):
        scorers = [
            {"playerName": "Smith", "goals": 2, "team": "home"},
            {"playerName": "Jones", "goals": 1, "team": "away"},
        ]
        match = create_match(homeScore=2, awayScore=1, goalScorers=scorers)

        fetched = client.get(f"/api/matches/{match['id']}").json()
        assert [(s["playerName"], s["goals"], s["team"]) for s in fetched["goalScorers"]] == [
            ("Smith", 2, "home"),
            ("Jones", 1, "away"),
        ]
        assert fetched["homeScore"] == 2
        assert fetched["awayScore"] == 1

    def test_goal_scorers_are_not_checked_against_score(self, create_match):
        match = create_match(
            homeScore=0,
            awayScore=0,
            goalScorers=[{"playerName": "Ghost", "goals": 3, "team": "home", "player": "no-such-player"}],
        )
        assert match["goalScorers"][0]["player"] == "no-such-player"

    @pytest.mark.parametrize("overrides", [
        {"status": "postponed"},
        {"homeTeam": ""},
        {"date": "not-a-date"},
        {"goalScorers": [{"playerName": "Smith", "goals": 0, "team": "home"}]},
        {"goalScorers": [{"playerName": "Smith", "team": "neutral"}]},
        {"goalScorers": [{"goals": 1, "team": "home"}]},
        {"homeScore": -1},
        {"awayScore": 2 ** 31},
        {"homeScore": 2 ** 63},
        {"goalScorers": [{"playerName": "Smith", "goals": 2 ** 63, "team": "home"}]},
    ])
    def test_invalid_payload_is_400(self, client, admin_headers, overrides):
        response = client.post("/api/matches", json=match_payload(**overrides), headers=admin_headers)
        assert response.status_code == 400

    def test_list_is_ordered_by_date(self, client, create_match):
        create_match(awayTeam="C", date="2030-03-01T15:00:00")
        create_match(awayTeam="A", date="2030-01-01T15:00:00")
        create_match(awayTeam="B", date="2030-02-01T15:00:00")
        matches = client.get("/api/matches").json()
        assert [m["awayTeam"] for m in matches] == ["A", "B", "C"]

    def test_timezone_aware_dates_are_normalized(self, client, create_match):
        create_match(awayTeam="Late", date="2030-01-01T12:00:00+00:00")
        create_match(awayTeam="Early", date="2030-01-01T12:00:00+05:00")
        matches = client.get("/api/matches").json()
        assert [m["awayTeam"] for m in matches] == ["Early", "Late"]
        assert matches[0]["date"].startswith("2030-01-01T07:00:00")

    def test_update_score_and_status(self, client, create_match, admin_headers):
        match = create_match()
        response = client.put(
            f"/api/matches/{match['id']}",
            json={"homeScore": 3, "awayScore": 1, "status": "completed"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        updated = response.json()
        assert (updated["homeScore"], updated["awayScore"], updated["status"]) == (3, 1, "completed")
        assert updated["venue"] == match["venue"]
        assert updated["date"] == match["date"]

    def test_update_can_clear_score(self, client, create_match, admin_headers):
        match = create_match(homeScore=1, awayScore=0)
        response = client.put(f"/api/matches/{match['id']}", json={"homeScore": None}, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["homeScore"] is None
        assert response.json()["awayScore"] == 0

    def test_update_rejects_invalid_status(self, client, create_match, admin_headers):
        match = create_match()
        response = client.put(f"/api/matches/{match['id']}", json={"status": "abandoned"}, headers=admin_headers)
        assert response.status_code == 400
        assert client.get(f"/api/matches/{match['id']}").json()["status"] == "scheduled"

    def test_update_rejects_out_of_range_score(self, client, create_match, admin_headers):
        match = create_match()
        response = client.put(f"/api/matches/{match['id']}", json={"homeScore": 2 ** 63}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "homeScore"
        assert client.get(f"/api/matches/{match['id']}").json()["homeScore"] is None

    def test_update_revalidates_merged_record(self, client, create_match, admin_headers):
        match = create_match()
        response = client.put(f"/api/matches/{match['id']}", json={"venue": None}, headers=admin_headers)
        assert response.status_code == 400

    def test_unknown_id_is_404(self, client, admin_headers):
        assert client.get("/api/matches/missing").status_code == 404
        assert client.get("/api/matches/missing").json()["message"] == "Match not found"
        assert client.delete("/api/matches/missing", headers=admin_headers).status_code == 404

    def test_delete_then_get_is_404(self, client, create_match, admin_headers):
        match = create_match()
        response = client.delete(f"/api/matches/{match['id']}", headers=admin_headers)
        assert response.json()["message"] == "Match deleted successfully"
        assert client.get(f"/api/matches/{match['id']}").status_code == 404

    def test_writes_require_admin(self, client, create_match, user_headers):
        match = create_match()
        assert client.post("/api/matches", json=match_payload()).status_code == 401
        assert client.post("/api/matches", json=match_payload(), headers=user_headers).status_code == 403
        assert client.put(f"/api/matches/{match['id']}", json={"homeScore": 9}, headers=user_headers).status_code == 403
        assert client.delete(f"/api/matches/{match['id']}", headers=user_headers).status_code == 403
        assert len(client.get("/api/matches").json()) == 1
        assert client.get(f"/api/matches/{match['id']}").json()["homeScore"] is None


class TestUpcomingMatches:

    def test_only_future_scheduled_matches(self, client, create_match):
        create_match(awayTeam="Past", date=iso(timedelta(days=-2)))
        create_match(awayTeam="Done", date=iso(timedelta(days=2)), status="completed")
        create_match(awayTeam="Cancelled", date=iso(timedelta(days=3)), status="cancelled")
        create_match(awayTeam="Next", date=iso(timedelta(days=4)))
        upcoming = client.get("/api/matches/upcoming").json()
        assert [m["awayTeam"] for m in upcoming] == ["Next"]

    def test_capped_at_five_in_date_order(self, client, create_match):
        for day in (7, 3, 5, 1, 6, 2, 4):
            create_match(awayTeam=f"Day {day}", date=iso(timedelta(days=day)))
        upcoming = client.get("/api/matches/upcoming").json()
        assert [m["awayTeam"] for m in upcoming] == ["Day 1", "Day 2", "Day 3", "Day 4", "Day 5"]
