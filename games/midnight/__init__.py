"""Midnight Party: bluff-bidding on a partly hidden total."""

from games.midnight.engine import (
    create_initial_state,
    cards_per_player,
    calculate_total,
    bid,
    call_midnight,
    start_next_round,
    restart_game,
    active_players,
)
from games.midnight.rules import Phase
from games.midnight.state import GameState

__all__ = [
    "create_initial_state",
    "cards_per_player",
    "calculate_total",
    "bid",
    "call_midnight",
    "start_next_round",
    "restart_game",
    "active_players",
    "Phase",
    "GameState",
]
