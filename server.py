"""Flask server exposing the companion emotion engine."""
from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from companion_emotion import (
    EmotionCategory,
    EngineSettings,
    InvalidPayloadError,
    TimeOfDay,
    TransitionSmoother,
    calculate_current_mood,
    contextualize,
    extract,
    format_mood,
    format_score,
    score,
)

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

settings = EngineSettings.from_env()
smoother = TransitionSmoother(settings)

app = Flask(__name__)
CORS(app)


def _payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise InvalidPayloadError("Request body must be a JSON object.")
    return payload


def _text(payload: Dict[str, Any]) -> str:
    text = payload.get("text", "")
    if not isinstance(text, str):
        raise InvalidPayloadError("'text' must be a string.")
    return text


def _previous(payload: Dict[str, Any]) -> List[str]:
    previous = payload.get("previous") or []
    if not isinstance(previous, list) or not all(isinstance(p, str) for p in previous):
        raise InvalidPayloadError("'previous' must be a list of strings.")
    return previous


def _cycle_start(character: Dict[str, Any]) -> Optional[datetime]:
    raw = character.get("last_mood_update")
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(str(raw))
    except ValueError as exc:
        raise InvalidPayloadError("'last_mood_update' must be an ISO 8601 timestamp.") from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _current_time_of_day() -> TimeOfDay:
    return TimeOfDay.from_hour(datetime.now().hour)


@app.errorhandler(InvalidPayloadError)
def bad_request(exc: InvalidPayloadError):
    return jsonify({"error": str(exc)}), 400


@app.get("/health")
def health() -> tuple[str, int]:
    return "ok", 200


@app.post("/emotion/analyze")
def analyze():
    payload = _payload()
    text = _text(payload)
    previous = _previous(payload)
    raw_time = payload.get("time_of_day")
    time_of_day = TimeOfDay.parse(raw_time) if raw_time is not None else _current_time_of_day()
    try:
        contextual = contextualize(text, time_of_day, previous, settings=settings)
        result = score(text)
        return jsonify(format_score(result, extract(text), contextual)), 200
    except Exception as exc:
        logger.exception("emotion analysis failed")
        return jsonify({"error": f"Internal server error: {exc}"}), 500


@app.post("/emotion/transition")
def transition():
    payload = _payload()
    current = EmotionCategory.parse(payload.get("current", EmotionCategory.NORMAL.value))
    target = EmotionCategory.parse(payload.get("target"))
    return jsonify({"emotion": smoother(current, target).value}), 200


@app.post("/mood")
def mood():
    payload = _payload()
    character = payload.get("character")
    if not character or not isinstance(character, dict):
        return jsonify({"error": "Character data is required"}), 400
    try:
        state = calculate_current_mood(
            character.get("gender"),
            cycle_start=_cycle_start(character),
        )
        return jsonify({"success": True, "data": format_mood(state)}), 200
    except InvalidPayloadError:
        raise
    except Exception:
        logger.exception("mood calculation failed")
        return jsonify({"error": "Internal server error"}), 500


if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "5000"))
    logger.info("starting emotion server on %s:%d", host, port)
    app.run(host=host, port=port)
