"""HTTP tests for the dashboard and heatmap endpoints."""

import datetime

DASHBOARD = "/api/v1/analytics/dashboard"
HEATMAP = "/api/v1/analytics/heatmap"


def _log(client, date, *groups):
    response = client.post("/api/v1/sessions", json={"date": date, "muscle_groups": list(groups)})
    assert response.status_code == 201, response.text


class TestDashboard:
    def test_empty_log(self, client):
        body = client.get(DASHBOARD, params={"as_of": "2024-03-15"}).json()
        assert body["as_of"] == "2024-03-15"
        assert set(body["stats"]) == {"Chest", "Legs", "Delts", "Lats", "Triceps", "Biceps"}
        assert body["stats"]["Chest"] == {
            "days_since_last_trained": None,
            "sessions_last_7_days": 0,
            "sessions_last_30_days": 0,
            "status": "bad",
        }
        assert body["balance"] == {"level": "poor"}
        assert body["balance_display"]["label"] == "Poor Balance"

    def test_trained_today(self, client):
        _log(client, "2024-03-15", "Chest", "Legs")
        body = client.get(DASHBOARD, params={"as_of": "2024-03-15"}).json()
        assert body["stats"]["Chest"]["days_since_last_trained"] == 0
        assert body["stats"]["Chest"]["status"] == "good"
        assert body["stats"]["Delts"]["status"] == "bad"
        cards = {card["muscle_group"]: card for card in body["cards"]}
        assert cards["Chest"]["last_trained"] == "Trained today"
        assert cards["Delts"]["last_trained"] == "Never trained"
        assert [card["muscle_group"] for card in body["cards"]] == ["Chest", "Legs", "Delts", "Lats", "Triceps",
                                                                    "Biceps"]

    def test_excellent_balance(self, client):
        for date in ("2024-03-10", "2024-03-14"):
            _log(client, date, "Chest", "Legs", "Delts", "Lats", "Triceps", "Biceps")
        body = client.get(DASHBOARD, params={"as_of": "2024-03-15"}).json()
        assert body["balance"]["level"] == "excellent"
        assert body["balance_display"]["mood"] == "happy"

    def test_defaults_to_today(self, client):
        body = client.get(DASHBOARD).json()
        assert body["as_of"] == datetime.date.today().isoformat()

    def test_bad_as_of_rejected(self, client):
        assert client.get(DASHBOARD, params={"as_of": "yesterday"}).status_code == 422


class TestHeatmap:
    def test_points(self, client):
        _log(client, "2024-01-05", "Chest", "Triceps")
        _log(client, "2024-01-05", "Legs", "Lats", "Biceps")
        _log(client, "2024-01-07", "Delts")
        body = client.get(HEATMAP).json()
        assert body["points"] == [
            {"date": "2024-01-05", "intensity": 5},
            {"date": "2024-01-07", "intensity": 1},
        ]
        assert body["calendar"] is None

    def test_year_calendar(self, client):
        _log(client, "2023-01-02", "Chest", "Triceps")
        body = client.get(HEATMAP, params={"year": 2023}).json()
        assert body["year"] == 2023
        assert len(body["calendar"]) == 365
        assert body["calendar"][0] == {"date": "2023-01-01", "intensity": 0, "level": 0, "color": "#ebedf0"}
        assert body["calendar"][1]["intensity"] == 2
        assert body["calendar"][1]["level"] == 2
