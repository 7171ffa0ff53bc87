"""FastAPI application with all routes."""
from __future__ import annotations

import itertools
import logging
import random
from dataclasses import asdict

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse

from superquiz.audio import get_or_create_audio
from superquiz.config import Settings, load_settings, save_settings
from superquiz.grading import grade_meaning, grade_spelling
from superquiz.sample_data import (
    MEANING_WORDS,
    SPELL_WORDS,
    TOPICS,
    get_meaning_word,
    get_spell_word,
    get_topic,
)
from superquiz.scoring import MODES, GameSession
from superquiz.sheets import fetch_leaderboard, fetch_questions, fetch_topic_config, resolve_topic

log = logging.getLogger("superquiz.app")

app = FastAPI(title="SuperQuiz")

# Global state (initialized in startup)
_settings: Settings | None = None
_active_sessions: dict[int, GameSession] = {}  # session_id -> session state
_session_ids = itertools.count(1)

PASSWORD_HEADER = "X-Settings-Password"


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def _get_tts():
    s = get_settings()
    if s.tts_provider == "edge-tts":
        from superquiz.providers.tts_edge import EdgeTTSProvider
        return EdgeTTSProvider(voice=s.tts_voice, rate=s.tts_rate)
    raise ValueError(f"Unknown TTS provider: {s.tts_provider}")


def _get_session(session_id: int | None) -> GameSession | None:
    if session_id is None:
        return None
    session = _active_sessions.get(session_id)
    if session is None:
        raise HTTPException(404, "Session not found")
    return session


@app.on_event("startup")
async def startup():
    global _settings
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()


# ── API: Topics & questions ───────────────────────────────────────────────

@app.get("/api/topics")
async def api_topics():
    s = get_settings()
    configs = await fetch_topic_config(s.master_config_url, timeout=s.fetch_timeout)
    result = []
    for topic in TOPICS:
        resolved = resolve_topic(topic, configs)
        d = asdict(resolved)
        d["configured"] = not resolved.is_placeholder
        result.append(d)
    return result


@app.get("/api/topics/{topic_id}/questions")
async def api_topic_questions(topic_id: str):
    topic = get_topic(topic_id)
    if topic is None:
        raise HTTPException(404, f"Unknown topic: {topic_id}")
    s = get_settings()
    configs = await fetch_topic_config(s.master_config_url, timeout=s.fetch_timeout)
    questions = await fetch_questions(resolve_topic(topic, configs), timeout=s.fetch_timeout)
    if s.randomize and len(questions) > 1:
        questions = random.sample(questions, len(questions))
    return [q.to_dict() for q in questions]


@app.get("/api/leaderboard")
async def api_leaderboard():
    s = get_settings()
    entries = await fetch_leaderboard(s.master_config_url, timeout=s.fetch_timeout)
    return [asdict(e) for e in entries]


# ── API: Game sessions ────────────────────────────────────────────────────

@app.post("/api/session/start")
async def api_session_start(request: Request):
    body = await request.json() if await request.body() else {}
    mode = body.get("mode", "quiz")
    if mode not in MODES:
        raise HTTPException(400, f"Unknown mode: {mode}")
    session_id = next(_session_ids)
    _active_sessions[session_id] = GameSession(mode=mode)
    log.info("Session %d started (%s)", session_id, mode)
    return {"session_id": session_id, **_active_sessions[session_id].summary()}


@app.get("/api/session/{session_id}")
async def api_session_summary(session_id: int):
    return {"session_id": session_id, **_get_session(session_id).summary()}


@app.post("/api/quiz/answer")
async def api_quiz_answer(request: Request):
    body = await request.json()
    session = _get_session(body.get("session_id"))
    if session is None:
        raise HTTPException(400, "No session_id provided")
    points = session.record_choice(bool(body.get("correct")))
    return {"points": points, **session.summary()}


def _graded_response(feedback, session: GameSession | None, n_items: int) -> dict:
    result = {"feedback": feedback.to_dict()}
    if session is not None:
        result["points"] = session.record(feedback)
        result["next_index"] = session.advance(n_items)
        result["session"] = session.summary()
    return result


# ── API: Spell check ──────────────────────────────────────────────────────

@app.get("/api/spell/words")
async def api_spell_words():
    return [{**asdict(w), "pattern": w.pattern} for w in SPELL_WORDS]


@app.post("/api/spell/check")
async def api_spell_check(request: Request):
    body = await request.json()
    word = get_spell_word(body.get("word_id", -1))
    if word is None:
        raise HTTPException(404, "Word not found")
    session = _get_session(body.get("session_id"))
    feedback = grade_spelling(body.get("answer", ""), word.word)
    return _graded_response(feedback, session, len(SPELL_WORDS))


@app.get("/api/spell/{word_id}/audio")
async def api_spell_audio(word_id: int):
    word = get_spell_word(word_id)
    if word is None:
        raise HTTPException(404, "Word not found")
    s = get_settings()
    tts = _get_tts()
    audio_path = await get_or_create_audio(word.word, tts, s.audio_cache_full_path)
    if audio_path is None:
        raise HTTPException(500, "TTS generation failed")
    return FileResponse(audio_path, media_type=tts.media_type)


# ── API: Word meaning ─────────────────────────────────────────────────────

@app.get("/api/meaning/words")
async def api_meaning_words():
    # Meaning, keywords and synonyms would give the answer away
    return [
        {"id": w.id, "word": w.word, "example": w.example, "difficulty": w.difficulty}
        for w in MEANING_WORDS
    ]


@app.get("/api/meaning/{word_id}/hint")
async def api_meaning_hint(word_id: int):
    word = get_meaning_word(word_id)
    if word is None:
        raise HTTPException(404, "Word not found")
    return {"id": word.id, "synonyms": word.synonyms}


@app.post("/api/meaning/check")
async def api_meaning_check(request: Request):
    body = await request.json()
    word = get_meaning_word(body.get("word_id", -1))
    if word is None:
        raise HTTPException(404, "Word not found")
    session = _get_session(body.get("session_id"))
    feedback = grade_meaning(body.get("answer", ""), word)
    return _graded_response(feedback, session, len(MEANING_WORDS))


# ── API: Settings ─────────────────────────────────────────────────────────

def _require_password(request: Request) -> None:
    if request.headers.get(PASSWORD_HEADER) != get_settings().settings_password:
        raise HTTPException(403, "Wrong password")


@app.post("/api/settings/unlock")
async def api_settings_unlock(request: Request):
    body = await request.json()
    if body.get("password") != get_settings().settings_password:
        raise HTTPException(403, "Wrong password")
    return {"ok": True}


@app.get("/api/settings")
async def api_get_settings(request: Request):
    _require_password(request)
    return get_settings().public_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    _require_password(request)
    body = await request.json()
    s = get_settings()
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    for k, v in body.items():
        if k in known:
            setattr(s, k, v)
    save_settings(s)
    return s.public_dict()
