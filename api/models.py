"""Pydantic request/response models for the API."""

import dataclasses
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field, field_validator

from games import GAME_KINDS

MAX_PLAYER_ID_LENGTH = 50


class GameCreateRequest(BaseModel):
    """Body for POST /games."""

    kind: str = Field(..., description="One of " + ", ".join(GAME_KINDS))
    player_count: int = Field(..., ge=1)
    player_ids: list[str] | None = Field(default=None, description="Display ids, one per seat; defaults to Player N")
    options: dict = Field(default_factory=dict, description="value_talk: {difficulty}. secret_word: {discussion_seconds}.")

    @field_validator("kind")
    @classmethod
    def kind_known(cls, v: str) -> str:
        if v not in GAME_KINDS:
            raise ValueError(f"kind must be one of {GAME_KINDS}")
        return v

    @field_validator("player_ids")
    @classmethod
    def player_ids_short(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and any(not p or len(p) > MAX_PLAYER_ID_LENGTH for p in v):
            raise ValueError(f"player ids must be 1-{MAX_PLAYER_ID_LENGTH} characters")
        return v


class ActionRequest(BaseModel):
    """Body for POST /games/{id}/actions."""

    player: int = Field(..., ge=0, description="Seat index of the acting player")
    action_type: str = Field(..., min_length=1)
    payload: dict = Field(default_factory=dict)
    expected_version: int | None = Field(default=None, description="Version the client last saw; stale writes are refused")


class GameResponse(BaseModel):
    """A stored game: envelope plus the full engine state."""

    game_id: str
    kind: str
    status: str
    version: int
    player_ids: list[str]
    actions: list[str]
    state: dict[str, Any]


def state_to_public(state: Any) -> dict[str, Any]:
    """Engine dataclass to a JSON-ready dict (enums become their values)."""
    return jsonable_encoder(dataclasses.asdict(state))


def entry_to_response(game_id: str, entry: dict[str, Any], actions: list[str]) -> GameResponse:
    return GameResponse(
        game_id=game_id,
        kind=entry["kind"],
        status=entry["status"],
        version=entry["version"],
        player_ids=entry["player_ids"],
        actions=actions,
        state=state_to_public(entry["state"]),
    )
