"""Tests for the FastAPI application routes."""
from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from superquiz import app as app_module
from superquiz.app import app
from superquiz.config import Settings
from superquiz.models import LeaderboardEntry, TopicConfig
from superquiz.providers.base import TTSProvider
from superquiz.sample_data import get_sample_questions


@pytest.fixture
def test_app(tmp_path):
    """Set up test app with temporary settings and no network access."""
    settings = Settings(audio_cache_dir=str(tmp_path / "audio"))

    # Set globals BEFORE creating TestClient so startup() is a no-op
    app_module._settings = settings
    app_module._active_sessions.clear()

    configs = [TopicConfig("Theme", "TBA", "1", "Space", "Easy")]
    with patch("superquiz.app.save_settings") as save, \
         patch("superquiz.app.fetch_topic_config", AsyncMock(return_value=configs)), \
         patch("superquiz.app.fetch_questions", AsyncMock(side_effect=lambda t, **kw: get_sample_questions(t.id))), \
         patch("superquiz.app.fetch_leaderboard", AsyncMock(return_value=[LeaderboardEntry("Asha", 3, 9, 2)])):
        client = TestClient(app, raise_server_exceptions=False)
        yield client, settings, save
        client.close()

    app_module._settings = None
    app_module._active_sessions.clear()


def start(client, mode: str) -> int:
    return client.post("/api/session/start", json={"mode": mode}).json()["session_id"]


class TestTopicsAPI:
    def test_topics(self, test_app):
        client, _, _ = test_app
        data = client.get("/api/topics").json()
        assert [t["id"] for t in data] == ["space", "geography", "math", "spell"]
        assert data[0]["configured"] is False

    def test_questions(self, test_app):
        client, _, _ = test_app
        resp = client.get("/api/topics/space/questions")
        assert resp.status_code == 200
        data = resp.json()
        assert data[1]["correct_answer"] == "B"
        assert len(data[0]["answers"]) == 4

    def test_questions_unknown_topic(self, test_app):
        client, _, _ = test_app
        assert client.get("/api/topics/history/questions").status_code == 404

    def test_questions_randomized(self, test_app):
        client, settings, _ = test_app
        settings.randomize = True
        data = client.get("/api/topics/space/questions").json()
        assert sorted(q["id"] for q in data) == ["space-q1", "space-q2"]

    def test_leaderboard(self, test_app):
        client, _, _ = test_app
        assert client.get("/api/leaderboard").json() == [
            {"name": "Asha", "quizzes": 3, "stars": 9, "streaks": 2},
        ]


class TestSessionAPI:
    def test_start(self, test_app):
        client, _, _ = test_app
        data = client.post("/api/session/start", json={"mode": "spell"}).json()
        assert data["mode"] == "spell"
        assert data["score"] == 0

    def test_start_defaults_to_quiz(self, test_app):
        client, _, _ = test_app
        assert client.post("/api/session/start").json()["mode"] == "quiz"

    def test_start_unknown_mode(self, test_app):
        client, _, _ = test_app
        assert client.post("/api/session/start", json={"mode": "chess"}).status_code == 400

    def test_summary_missing(self, test_app):
        client, _, _ = test_app
        assert client.get("/api/session/9999").status_code == 404

    def test_quiz_answers(self, test_app):
        client, _, _ = test_app
        sid = start(client, "quiz")
        client.post("/api/quiz/answer", json={"session_id": sid, "correct": True})
        data = client.post("/api/quiz/answer", json={"session_id": sid, "correct": False}).json()
        assert data["score"] == 10
        assert data["percentage"] == 50

    def test_quiz_answer_needs_session(self, test_app):
        client, _, _ = test_app
        assert client.post("/api/quiz/answer", json={"correct": True}).status_code == 400


class TestSpellAPI:
    def test_words_have_patterns(self, test_app):
        client, _, _ = test_app
        words = client.get("/api/spell/words").json()
        assert words[0]["word"] == "elephant"
        assert words[0]["pattern"] == "ele____t"

    def test_check_without_session(self, test_app):
        client, _, _ = test_app
        data = client.post("/api/spell/check", json={"word_id": 1, "answer": "elefant"}).json()
        assert data["feedback"]["verdict"] == "close"
        assert "session" not in data

    def test_check_with_session(self, test_app):
        client, _, _ = test_app
        sid = start(client, "spell")
        data = client.post("/api/spell/check", json={
            "session_id": sid, "word_id": 1, "answer": "Elephant",
        }).json()
        assert data["feedback"]["verdict"] == "correct"
        assert data["points"] == 10
        assert data["next_index"] == 1
        assert data["session"]["streak"] == 1

    def test_check_unknown_word(self, test_app):
        client, _, _ = test_app
        assert client.post("/api/spell/check", json={"word_id": 99, "answer": "x"}).status_code == 404

    def test_check_unknown_session(self, test_app):
        client, _, _ = test_app
        resp = client.post("/api/spell/check", json={"session_id": 9999, "word_id": 1, "answer": "x"})
        assert resp.status_code == 404

    def test_audio(self, test_app):
        client, _, _ = test_app

        class FakeTTS(TTSProvider):
            async def synthesize(self, text, output_path):
                output_path.write_bytes(b"mp3")
                return output_path

            def name(self):
                return "fake-tts"

        with patch("superquiz.app._get_tts", return_value=FakeTTS()):
            resp = client.get("/api/spell/1/audio")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "audio/mpeg"
        assert resp.content == b"mp3"

    def test_audio_served_as_provider_media_type(self, test_app):
        client, _, _ = test_app

        class WavTTS(TTSProvider):
            suffix = ".wav"
            media_type = "audio/wav"

            async def synthesize(self, text, output_path):
                output_path.write_bytes(b"RIFF")
                return output_path

            def name(self):
                return "wav-tts"

        with patch("superquiz.app._get_tts", return_value=WavTTS()):
            resp = client.get("/api/spell/1/audio")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "audio/wav"


class TestMeaningAPI:
    def test_words_hide_answers(self, test_app):
        client, _, _ = test_app
        word = client.get("/api/meaning/words").json()[0]
        assert word["word"] == "Happy"
        assert "meaning" not in word
        assert "synonyms" not in word

    def test_hint(self, test_app):
        client, _, _ = test_app
        assert "cheerful" in client.get("/api/meaning/1/hint").json()["synonyms"]

    def test_partial_credit(self, test_app):
        client, _, _ = test_app
        sid = start(client, "meaning")
        data = client.post("/api/meaning/check", json={
            "session_id": sid, "word_id": 1, "answer": "something good",
        }).json()
        assert data["feedback"]["verdict"] == "partial"
        assert data["feedback"]["matched_concepts"] == ["good"]
        assert data["points"] == 5
        assert data["session"]["streak"] == 0

    def test_synonym(self, test_app):
        client, _, _ = test_app
        data = client.post("/api/meaning/check", json={"word_id": 1, "answer": "very cheerful"}).json()
        assert data["feedback"]["verdict"] == "correct"
        assert data["feedback"]["correct_meaning"] == "feeling joy or pleasure"


class TestSettingsAPI:
    def test_unlock(self, test_app):
        client, _, _ = test_app
        assert client.post("/api/settings/unlock", json={"password": "Superdad"}).json() == {"ok": True}

    def test_unlock_wrong_password(self, test_app):
        client, _, _ = test_app
        assert client.post("/api/settings/unlock", json={"password": "nope"}).status_code == 403

    def test_get_requires_password(self, test_app):
        client, _, _ = test_app
        assert client.get("/api/settings").status_code == 403
        resp = client.get("/api/settings", headers={"X-Settings-Password": "Superdad"})
        assert resp.status_code == 200
        assert "settings_password" not in resp.json()

    def test_update(self, test_app):
        client, settings, save = test_app
        resp = client.put(
            "/api/settings",
            json={"randomize": True, "bogus": 1},
            headers={"X-Settings-Password": "Superdad"},
        )
        assert resp.status_code == 200
        assert resp.json()["randomize"] is True
        assert settings.randomize is True
        save.assert_called_once()
