"""Value Talk: cooperative ascending-order card game."""

from games.valuetalk.engine import (
    create_initial_state,
    get_hand_counts,
    get_new_theme,
    update_description,
    play_card,
    change_theme,
    restart_game,
    remaining_cards,
)
from games.valuetalk.rules import Difficulty, Phase, THEME_SETS
from games.valuetalk.state import GameState, LastFailure, PlayedCard, PlayerHand

__all__ = [
    "create_initial_state",
    "get_hand_counts",
    "get_new_theme",
    "update_description",
    "play_card",
    "change_theme",
    "restart_game",
    "remaining_cards",
    "Difficulty",
    "Phase",
    "THEME_SETS",
    "GameState",
    "LastFailure",
    "PlayedCard",
    "PlayerHand",
]
