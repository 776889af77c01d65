import json
from datetime import datetime

import pytest

import server
from server import app


@pytest.fixture
def client():
    return app.test_client()


def _post(client, path, body):
    return client.post(path, data=json.dumps(body), content_type="application/json")


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "ok"


def test_analyze_ok(client):
    resp = _post(client, "/emotion/analyze", {"text": "すごく嬉しい！！ありがとう！"})
    assert resp.status_code == 200
    data = resp.get_json()
    for key in ["emotion", "intensity", "emotions", "contextual"]:
        assert key in data, f"missing key: {key}"
    assert data["emotion"] == "happy"
    assert data["intensity"] > 70
    assert data["emotions"] == ["happy"]
    assert data["contextual"] == "happy"


def test_analyze_uses_previous_messages(client):
    resp = _post(client, "/emotion/analyze", {"text": "そうなんだ", "previous": ["悲しい"]})
    data = resp.get_json()
    assert data["emotion"] == "normal"
    assert data["intensity"] == 50
    assert data["contextual"] == "worried"


def test_analyze_with_time_of_day(client):
    resp = _post(client, "/emotion/analyze", {"text": "やった！やった！", "time_of_day": "afternoon"})
    assert resp.status_code == 200
    assert resp.get_json()["contextual"] == "excited"


def test_analyze_blank_text_is_baseline(client):
    resp = _post(client, "/emotion/analyze", {"text": "   "})
    assert resp.status_code == 200
    assert resp.get_json() == {"emotion": "normal", "intensity": 50, "emotions": [], "contextual": "normal"}


@pytest.mark.parametrize(
    "body",
    [
        {"text": 5},
        {"text": "hi", "previous": "not a list"},
        {"text": "hi", "time_of_day": "dawn"},
        ["not", "an", "object"],
    ],
)
def test_analyze_bad_request(client, body):
    resp = _post(client, "/emotion/analyze", body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_transition(client):
    resp = _post(client, "/emotion/transition", {"current": "happy", "target": "love"})
    assert resp.status_code == 200
    assert resp.get_json() == {"emotion": "love"}

    resp = _post(client, "/emotion/transition", {"target": "sad"})
    assert resp.get_json() == {"emotion": "sad"}


def test_transition_unknown_category(client):
    resp = _post(client, "/emotion/transition", {"current": "happy", "target": "furious"})
    assert resp.status_code == 400


def test_mood_requires_character(client):
    resp = _post(client, "/mood", {})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Character data is required"}


def test_mood_ok(client):
    resp = _post(client, "/mood", {"character": {"gender": "girlfriend"}})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    data = body["data"]
    assert -100 <= data["current_mood"] <= 100
    assert data["cycle_day"] == 1
    assert data["factors"][0]["kind"] == "cycle"
    assert isinstance(data["description"], str)


def test_mood_bad_timestamp(client):
    resp = _post(client, "/mood", {"character": {"gender": "girlfriend", "last_mood_update": "yesterday"}})
    assert resp.status_code == 400


def _clock(hour):
    class _Clock(datetime):
        @classmethod
        def now(cls, tz=None):
            return datetime(2024, 5, 1, hour, 0)

    return _Clock


def test_analyze_takes_time_of_day_from_clock(client, monkeypatch):
    monkeypatch.setattr(server, "datetime", _clock(14))
    resp = _post(client, "/emotion/analyze", {"text": "やった！やった！"})
    assert resp.get_json()["contextual"] == "excited"

    monkeypatch.setattr(server, "datetime", _clock(23))
    resp = _post(client, "/emotion/analyze", {"text": "やった！やった！"})
    assert resp.get_json()["contextual"] == "normal"
