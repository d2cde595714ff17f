"""
===================================================================
  Reputation Scoring Service — HTTP Tests
===================================================================
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from services import reputation_service
from services.reputation_service import app


NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def agent_stats(**overrides) -> dict:
    stats = {
        "total_transactions": 150,
        "successful_transactions": 142,
        "avg_rating": 4.6,
        "reviews_count": 23,
        "uptime_percent": 99.4,
        "created_at": (NOW - timedelta(days=400)).isoformat(),
        "connections_count": 12,
    }
    stats.update(overrides)
    return stats


class TestScoringEndpoint:
    def setup_method(self):
        self.client = TestClient(app)

    def test_compute_reputation(self):
        r = self.client.post("/reputation", json=agent_stats(), params={"now": NOW.isoformat()})
        assert r.status_code == 200
        body = r.json()
        assert body["score"] == 831
        assert body["normalized_score"] == 83
        assert body["tier"] == "trusted"
        assert body["tier_info"]["name"] == "Trusted"
        assert set(body["breakdown"]) == {
            "transactions", "success_rate", "reviews", "uptime", "age", "connections",
        }

    def test_logs_one_event_per_computation(self):
        with capture_logs() as logs:
            r = self.client.post("/reputation", json=agent_stats(), params={"now": NOW.isoformat()})
        assert r.status_code == 200
        computed = [e for e in logs if e["event"] == "reputation_computed"]
        assert len(computed) == 1
        assert computed[0]["score"] == 831
        assert computed[0]["log_level"] == "info"

    def test_strict_mode_rejects_inconsistent_stats(self):
        r = self.client.post("/reputation", json=agent_stats(successful_transactions=200))
        assert r.status_code == 422
        problems = r.json()["detail"]["problems"]
        assert any("exceeds total_transactions" in p for p in problems)

    def test_lenient_mode_scores_anything(self, monkeypatch):
        monkeypatch.setattr(reputation_service, "STRICT_INPUT", False)
        r = self.client.post(
            "/reputation",
            json=agent_stats(successful_transactions=200, uptime_percent=250.0),
            params={"now": NOW.isoformat()},
        )
        assert r.status_code == 200
        assert r.json()["breakdown"]["success_rate"] == 100
        assert r.json()["breakdown"]["uptime"] == 100

    def test_malformed_body(self):
        r = self.client.post("/reputation", json=agent_stats(total_transactions="lots"))
        assert r.status_code == 422


class TestTierEndpoints:
    def setup_method(self):
        self.client = TestClient(app)

    def test_list_tiers(self):
        tiers = self.client.get("/tiers").json()
        assert [t["tier"] for t in tiers] == [
            "newcomer", "active", "reliable", "trusted", "elite", "legendary",
        ]
        assert tiers[0]["max_score"] == 99
        assert tiers[-1]["max_score"] is None

    def test_classify_score(self):
        body = self.client.get("/tiers/1500").json()
        assert body["tier"] == "legendary"
        assert body["formatted"] == "1,500"
        assert body["tier_info"]["icon"] == "👑"

    def test_progress(self):
        body = self.client.get("/progress/150").json()
        assert body["progress"] == pytest.approx(25.0)
        assert body["next_tier"] == "reliable"

    def test_progress_terminal(self):
        body = self.client.get("/progress/4000").json()
        assert body == {"progress": 100.0, "next_tier": None}

    def test_delta(self):
        body = self.client.get("/delta", params={"old": 100, "new": 40}).json()
        assert body == {"delta": -60, "direction": "down", "description": "Significant change"}

    def test_delta_requires_both_scores(self):
        assert self.client.get("/delta", params={"old": 100}).status_code == 422


class TestLeaderboardEndpoint:
    def setup_method(self):
        self.client = TestClient(app)

    def test_leaderboard(self):
        r = self.client.post("/leaderboard", json={
            "scores": {"alpha": 120, "bravo": 950, "charlie": 610},
            "limit": 2,
        })
        assert r.status_code == 200
        body = r.json()
        assert body["total"] == 3
        assert [e["agent_id"] for e in body["leaderboard"]] == ["bravo", "charlie"]
        assert body["leaderboard"][0] == {"rank": 1, "agent_id": "bravo", "score": 950, "tier": "elite"}

    def test_limit_bounds(self):
        r = self.client.post("/leaderboard", json={"scores": {}, "limit": 500})
        assert r.status_code == 422


def test_health():
    body = TestClient(app).get("/health").json()
    assert body["status"] == "healthy"
    assert body["tiers"] == 6
