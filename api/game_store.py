"""In-memory game store. Replace with DB later if needed."""

import logging
import threading
from typing import Any, Optional

logger = logging.getLogger(__name__)

# game_id -> { kind, state, status, player_ids, version }
_store: dict[str, dict[str, Any]] = {}
_lock = threading.Lock()

STATUS_PLAYING = "playing"
STATUS_FINISHED = "finished"


class StaleStateError(Exception):
    """The caller read an older version of the game than the one stored."""

    def __init__(self, game_id: str, expected: int, actual: int):
        super().__init__(f"Game {game_id} is at version {actual}, not {expected}")
        self.game_id = game_id
        self.expected = expected
        self.actual = actual


def create(
    game_id: str,
    kind: str,
    state: Any,
    player_ids: list[str] | None = None,
    status: str = STATUS_PLAYING,
) -> None:
    with _lock:
        _store[game_id] = {
            "kind": kind,
            "state": state,
            "status": status,
            "player_ids": list(player_ids or []),
            "version": 0,
        }
    logger.info("Created %s game %s", kind, game_id)


def get(game_id: str) -> dict[str, Any] | None:
    return _store.get(game_id)


def update(
    game_id: str,
    state: Any,
    expected_version: Optional[int] = None,
    status: Optional[str] = None,
) -> int:
    """
    Replace the stored state and bump the version. With expected_version set,
    the write is refused unless nobody else wrote since that version was read.
    Returns the new version.
    """
    with _lock:
        entry = _store.get(game_id)
        if entry is None:
            raise KeyError(game_id)
        if expected_version is not None and expected_version != entry["version"]:
            logger.warning(
                "Stale write to game %s: expected version %s, stored %s",
                game_id,
                expected_version,
                entry["version"],
            )
            raise StaleStateError(game_id, expected_version, entry["version"])
        entry["state"] = state
        entry["version"] += 1
        if status is not None:
            entry["status"] = status
        return entry["version"]


def list_games() -> list[str]:
    return list(_store.keys())


def clear() -> None:
    """Drop every game. Used by tests."""
    _store.clear()
