from __future__ import annotations

import logging
import os
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from nineholes_core.logconf import configure_logging
from nineholes_core.session import GameSession, SessionSnapshot
from nineholes_core.state import Position
from nineholes_core.variants import variant_names

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = os.getenv("NINE_HOLES_VARIANT", "nine-holes")
MAX_SESSIONS = int(os.getenv("NINE_HOLES_MAX_SESSIONS", "256"))

app = Flask(__name__)


class SessionStore:
    """In-memory sessions keyed by id; the oldest are dropped once ``capacity`` is exceeded."""

    def __init__(self, capacity: int) -> None:
        self.capacity = max(1, capacity)
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def add(self, session: GameSession) -> str:
        sid = uuid.uuid4().hex
        with self._lock:
            self._sessions[sid] = session
            while len(self._sessions) > self.capacity:
                old, _ = self._sessions.popitem(last=False)
                logger.info("evicted session %s", old)
        return sid

    def get(self, sid: Any) -> Optional[GameSession]:
        if not isinstance(sid, str):
            return None
        with self._lock:
            return self._sessions.get(sid)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


SESSIONS = SessionStore(MAX_SESSIONS)


# ---------- JSON helpers ----------

def board_to_json(position: Position) -> Dict[str, Any]:
    geo = position.variant.geometry
    return {
        "files": list(geo.files),
        "ranks": list(geo.ranks),
        "holding": [list(geo.holding[0]), list(geo.holding[1])],
        "spaces": position.occupants(),
    }


def session_to_json(sid: str, s: GameSession, snap: Optional[SessionSnapshot] = None) -> Dict[str, Any]:
    snap = snap if snap is not None else s.snapshot()
    last = snap.last_ai_move
    return {
        "id": sid,
        "variant": s.variant.name,
        "players": list(s.variant.players),
        "human": s.human,
        "ai": s.ai,
        "board": board_to_json(snap.position),
        "picked": snap.picked,
        "winner": snap.winner,
        "legalMoves": [str(m) for m in snap.legal_moves],
        "lastAiMove": str(last) if last is not None else None,
    }


def _bad_request(message: str) -> Any:
    return jsonify({"ok": False, "error": message}), 400


def _body() -> Optional[Dict[str, Any]]:
    """The JSON object sent with the request; an empty body counts as {}, anything but an object as None."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _missing(sid: Any) -> Any:
    return jsonify({"ok": False, "error": f"Unknown session: {sid}"}), 404


def _lookup() -> Tuple[Dict[str, Any], Optional[GameSession], Any]:
    """Returns (body, session, error response); the error is None when the session was found."""
    body = _body()
    if body is None:
        return {}, None, _bad_request("request body must be a JSON object")
    sid = body.get("id")
    s = SESSIONS.get(sid)
    if s is None:
        return body, None, _missing(sid)
    return body, s, None


# ---------- Routes ----------

@app.get("/")
def index() -> Any:
    return jsonify({"ok": True, "name": "nine-holes", "variants": variant_names(), "default": DEFAULT_VARIANT})


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    if body is None:
        return _bad_request("request body must be a JSON object")
    variant = body.get("variant") or DEFAULT_VARIANT
    if not isinstance(variant, str):
        return _bad_request("variant must be a string")
    human = body.get("human") or None
    if human is not None and not isinstance(human, str):
        return _bad_request("human must be a string")
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return _bad_request("seed must be an integer")
    ai_starts = body.get("aiStarts", False)
    if not isinstance(ai_starts, bool):
        return _bad_request("aiStarts must be a boolean")
    try:
        s = GameSession(variant, seed=seed, human=human, ai_starts=ai_starts)
    except ValueError as e:
        return _bad_request(str(e))
    sid = SESSIONS.add(s)
    logger.info("new session %s variant=%s", sid, s.variant.name)
    return jsonify({"ok": True, "id": sid, "state": session_to_json(sid, s)})


@app.post("/api/select")
def api_select() -> Any:
    body, s, err = _lookup()
    if s is None:
        return err
    space = body.get("space")
    if not isinstance(space, str) or not space:
        return _bad_request("space must be a non-empty string")
    changed, snap = s.select(space)
    return jsonify({"ok": True, "changed": changed, "state": session_to_json(body["id"], s, snap)})


@app.post("/api/state")
def api_state() -> Any:
    body, s, err = _lookup()
    if s is None:
        return err
    return jsonify({"ok": True, "state": session_to_json(body["id"], s)})


@app.post("/api/reset")
def api_reset() -> Any:
    body, s, err = _lookup()
    if s is None:
        return err
    snap = s.restart()
    return jsonify({"ok": True, "state": session_to_json(body["id"], s, snap)})


@app.post("/api/legal")
def api_legal() -> Any:
    _, s, err = _lookup()
    if s is None:
        return err
    return jsonify({"ok": True, "legalMoves": [str(m) for m in s.snapshot().legal_moves]})


if __name__ == "__main__":
    configure_logging()
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=False, threaded=True)
