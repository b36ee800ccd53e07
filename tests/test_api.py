"""
HTTP tests for listings, swipe sessions and story-mode progress.

Each test gets a fresh TestClient, hence a fresh guest cookie and progress row.
The seeded data holds 8 listings, 4 of them scams, so accepting every listing
always scores 4/8.
"""
import pytest

SEEDED_LISTINGS = 8


def start(client, **body):
    response = client.post("/api/swipe-sessions", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def accept_all(client, session_id, total=SEEDED_LISTINGS):
    for _ in range(total):
        response = client.post(f"/api/swipe-sessions/{session_id}/decisions", json={"accept": True})
        assert response.status_code == 200, response.text
    return response.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class TestListings:
    def test_lists_seeded_listings_without_verdict(self, client):
        response = client.get("/api/accommodations")

        assert response.status_code == 200
        listings = response.json()
        assert len(listings) == SEEDED_LISTINGS
        for listing in listings:
            assert "is_scam" not in listing
            assert "red_flags" not in listing
            assert listing["title"]


class TestSwipeSessions:
    def test_start_uses_player_level(self, client):
        state = start(client)

        assert state["level"] == "A1"
        assert state["position"] == 0
        assert state["score"] == 0
        assert state["total"] == SEEDED_LISTINGS
        assert state["is_complete"] is False
        assert state["current"] is not None
        assert "is_scam" not in state["current"]

    def test_start_with_explicit_level(self, client):
        assert start(client, level="B1")["level"] == "B1"

    def test_start_with_bad_level(self, client):
        response = client.post("/api/swipe-sessions", json={"level": "Z9"})

        assert response.status_code == 400

    def test_decision_returns_explanation(self, client):
        state = start(client)

        response = client.post(f"/api/swipe-sessions/{state['id']}/decisions", json={"accept": False})

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "reject"
        decision = body["decision"]
        assert decision["listing_id"] == state["current"]["id"]
        assert decision["is_correct"] == decision["actual_is_scam"]
        assert decision["points_awarded"] == (1 if decision["is_correct"] else 0)
        assert decision["explanation"]["kind"] == ("scam" if decision["actual_is_scam"] else "legitimate")
        assert len(decision["explanation"]["tips"]) == 2  # A1
        assert decision["explanation"]["flags"]
        assert body["session"]["position"] == 1

    def test_short_swipe_cancels(self, client):
        state = start(client)

        response = client.post(f"/api/swipe-sessions/{state['id']}/swipes", json={"dx": 60})

        body = response.json()
        assert body["outcome"] == "cancel"
        assert body["decision"] is None
        assert body["session"]["position"] == 0

    def test_long_swipe_decides(self, client):
        state = start(client)

        response = client.post(f"/api/swipe-sessions/{state['id']}/swipes", json={"dx": -150, "dy": 12})

        body = response.json()
        assert body["outcome"] == "reject"
        assert body["decision"]["user_choice"] is False
        assert body["session"]["position"] == 1

    def test_full_run_summary(self, client):
        state = start(client)

        last = accept_all(client, state["id"])
        summary = client.get(f"/api/swipe-sessions/{state['id']}/summary").json()

        assert last["session"]["is_complete"] is True
        assert last["session"]["current"] is None
        assert summary["score"] == 4
        assert summary["total"] == SEEDED_LISTINGS
        assert summary["percentage"] == 50
        assert summary["rating"] == "Novice"
        assert len(summary["history"]) == SEEDED_LISTINGS

    def test_decision_after_end_conflicts(self, client):
        state = start(client)
        accept_all(client, state["id"])

        response = client.post(f"/api/swipe-sessions/{state['id']}/decisions", json={"accept": True})

        assert response.status_code == 409

    def test_reset(self, client):
        state = start(client)
        client.post(f"/api/swipe-sessions/{state['id']}/decisions", json={"accept": True})

        response = client.post(f"/api/swipe-sessions/{state['id']}/reset")

        assert response.status_code == 200
        assert response.json()["position"] == 0
        assert response.json()["score"] == 0

    def test_unknown_session(self, client):
        assert client.get("/api/swipe-sessions/nope").status_code == 404

    def test_other_player_cannot_see_session(self, client):
        state = start(client)
        client.cookies.clear()

        assert client.get(f"/api/swipe-sessions/{state['id']}").status_code == 404

    def test_delete_session(self, client):
        state = start(client)

        assert client.delete(f"/api/swipe-sessions/{state['id']}").status_code == 204
        assert client.get(f"/api/swipe-sessions/{state['id']}").status_code == 404

    def test_complete_unfinished_conflicts(self, client):
        state = start(client)

        response = client.post(f"/api/swipe-sessions/{state['id']}/complete")

        assert response.status_code == 409

    def test_complete_records_progress(self, client):
        state = start(client)
        accept_all(client, state["id"])

        response = client.post(f"/api/swipe-sessions/{state['id']}/complete")

        assert response.status_code == 200
        body = response.json()
        assert body["percentage"] == 50
        assert body["total_score"] == 50
        assert body["unlocked_scenario"] is None

        progress = client.get("/api/progress").json()
        assert progress["completed_games"][0]["game_type"] == "swipe"
        assert progress["completed_games"][0]["scenario"] == "accommodation"
        assert progress["completed_games"][0]["score"] == 50
        assert client.get(f"/api/swipe-sessions/{state['id']}").status_code == 404


class TestProgress:
    def test_new_player(self, client):
        progress = client.get("/api/progress").json()

        assert progress == {
            "current_level": "A1",
            "total_score": 0,
            "unlocked_scenarios": ["accommodation"],
            "completed_games": [],
        }

    def test_update_level(self, client):
        assert client.put("/api/progress/level", json={"level": "B2"}).status_code == 200

        assert client.get("/api/progress").json()["current_level"] == "B2"
        assert start(client)["level"] == "B2"

    def test_update_level_rejects_unknown(self, client):
        assert client.put("/api/progress/level", json={"level": "C1"}).status_code == 400

    @pytest.mark.parametrize(
        "field, value",
        [("scenario", "moon_base"), ("level", "A0"), ("game_type", "chess")],
    )
    def test_complete_validates_enumerations(self, client, field, value):
        body = {"scenario": "accommodation", "level": "A1", "game_type": "quiz", "score": 70}
        body[field] = value

        assert client.post("/api/progress/complete", json=body).status_code == 400

    def test_best_score_kept_total_accumulates(self, client):
        body = {"scenario": "accommodation", "level": "A1", "game_type": "quiz"}
        client.post("/api/progress/complete", json={**body, "score": 70})
        client.post("/api/progress/complete", json={**body, "score": 40})

        progress = client.get("/api/progress").json()

        assert progress["total_score"] == 110
        assert len(progress["completed_games"]) == 1
        assert progress["completed_games"][0]["score"] == 70

    def test_two_good_games_unlock_next_scenario(self, client):
        state = start(client)
        accept_all(client, state["id"])
        client.post(f"/api/swipe-sessions/{state['id']}/complete")

        response = client.post(
            "/api/progress/complete",
            json={"scenario": "accommodation", "level": "A1", "game_type": "memory", "score": 80},
        )

        assert response.json()["unlocked_scenario"] == "city_registration"
        progress = client.get("/api/progress").json()
        assert progress["unlocked_scenarios"] == ["accommodation", "city_registration"]

    def test_unlock_reported_once(self, client):
        game = {"scenario": "accommodation", "level": "A1", "score": 90}
        client.post("/api/progress/complete", json={**game, "game_type": "quiz"})
        first = client.post("/api/progress/complete", json={**game, "game_type": "taboo"}).json()
        second = client.post("/api/progress/complete", json={**game, "game_type": "scrabble"}).json()

        assert first["unlocked_scenario"] == "city_registration"
        assert second["unlocked_scenario"] is None

    def test_explicit_unlock(self, client):
        response = client.post("/api/progress/unlock", json={"scenario": "banking"})

        assert response.status_code == 200
        assert response.json()["unlocked_scenarios"] == ["accommodation", "banking"]
        assert client.post("/api/progress/unlock", json={"scenario": "mars"}).status_code == 400


class TestAvailableGames:
    def test_defaults_when_nothing_deployed(self, client):
        response = client.get("/api/games/university/A2")

        assert response.status_code == 200
        body = response.json()
        assert (body["scenario"], body["level"]) == ("university", "A2")
        assert body["available_games"] == [
            {"game_type": "memory", "is_active": True, "max_score": 100, "time_limit": 10},
            {"game_type": "scrabble", "is_active": True, "max_score": 100, "time_limit": 15},
            {"game_type": "anagrams", "is_active": True, "max_score": 100, "time_limit": 8},
        ]

    @pytest.mark.parametrize("path", ["/api/games/moon_base/A1", "/api/games/banking/C1"])
    def test_unknown_scenario_or_level(self, client, path):
        assert client.get(path).status_code == 400

    def test_deployment_lists_only_active_games(self, client, deploy):
        deploy(
            "banking",
            "B1",
            [
                {"game_type": "quiz", "max_score": 50, "time_limit": 12},
                {"game_type": "taboo", "is_active": False},
            ],
        )

        games = client.get("/api/games/banking/B1").json()["available_games"]

        assert games == [{"game_type": "quiz", "is_active": True, "max_score": 50, "time_limit": 12}]
        # other levels keep the defaults
        assert len(client.get("/api/games/banking/B2").json()["available_games"]) == 3

    def test_inactive_deployment_falls_back_to_defaults(self, client, deploy):
        deploy("accommodation", "A1", [{"game_type": "quiz"}], is_active=False)

        games = client.get("/api/games/accommodation/A1").json()["available_games"]

        assert [g["game_type"] for g in games] == ["memory", "scrabble", "anagrams"]
