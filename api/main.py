"""FastAPI app: create games, apply player actions, read state."""

import logging
import uuid

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from api.config import configure_logging, get_cors_origins, get_discussion_seconds
from api.dispatch import (
    InvalidPayloadError,
    UnknownActionError,
    action_types,
    apply_action,
    create_state,
    is_finished,
)
from api.game_store import (
    STATUS_FINISHED,
    STATUS_PLAYING,
    StaleStateError,
    create as store_create,
    get as store_get,
    list_games,
    update as store_update,
)
from api.models import ActionRequest, GameCreateRequest, GameResponse, entry_to_response
from games import GAME_KINDS

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Party Portal API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _response(game_id: str) -> GameResponse:
    entry = store_get(game_id)
    return entry_to_response(game_id, entry, action_types(entry["kind"]))


@app.post("/games", response_model=GameResponse, tags=["Games"], summary="Create game")
def create_game(body: GameCreateRequest):
    """Create a game of the given kind. The state is dealt immediately."""
    if body.player_ids is not None and len(body.player_ids) != body.player_count:
        raise HTTPException(400, "player_ids must have one entry per player")
    options = dict(body.options)
    try:
        if body.kind == "secret_word" and "discussion_seconds" not in options:
            options["discussion_seconds"] = get_discussion_seconds()
        state = create_state(body.kind, body.player_count, options)
    except (ValueError, InvalidPayloadError) as e:
        raise HTTPException(400, str(e))
    game_id = str(uuid.uuid4())
    player_ids = body.player_ids or [f"Player {i + 1}" for i in range(body.player_count)]
    store_create(game_id, body.kind, state, player_ids=player_ids, status=STATUS_PLAYING)
    return _response(game_id)


@app.get("/games", response_model=list[str], tags=["Games"], summary="List games")
def list_games_route():
    """List all game IDs."""
    return list_games()


@app.get("/games/{game_id}", response_model=GameResponse, tags=["Games"], summary="Get game state")
def get_game(game_id: str):
    entry = store_get(game_id)
    if not entry:
        raise HTTPException(404, "Game not found")
    return _response(game_id)


@app.post("/games/{game_id}/actions", response_model=GameResponse, tags=["Games"], summary="Apply player action")
def submit_action(game_id: str, body: ActionRequest):
    """
    Apply one action and store the result. An action the rules do not allow right now
    leaves the game untouched and returns 409, as does a stale expected_version.
    """
    entry = store_get(game_id)
    if not entry:
        raise HTTPException(404, "Game not found")
    if body.player >= len(entry["player_ids"]):
        raise HTTPException(400, f"player must be 0-{len(entry['player_ids']) - 1}")
    if body.expected_version is not None and body.expected_version != entry["version"]:
        raise HTTPException(409, "Game has changed since expected_version; reload and retry")

    kind = entry["kind"]
    version = entry["version"]
    try:
        new_state = apply_action(kind, entry["state"], body.player, body.action_type, body.payload)
    except UnknownActionError as e:
        raise HTTPException(400, str(e))
    except InvalidPayloadError as e:
        raise HTTPException(400, str(e))
    if new_state is None:
        raise HTTPException(409, f"{body.action_type} is not allowed right now")

    status = STATUS_FINISHED if is_finished(kind, new_state) else STATUS_PLAYING
    try:
        store_update(game_id, new_state, expected_version=version, status=status)
    except StaleStateError as e:
        raise HTTPException(409, str(e))
    return _response(game_id)


@app.get("/kinds", response_model=list[str], tags=["System"], summary="List game kinds")
def list_kinds():
    return list(GAME_KINDS)


@app.get("/health", tags=["System"], summary="Health check")
def health():
    return {"status": "ok"}
