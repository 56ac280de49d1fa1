"""Cursed Gifts: take the card or pay a chip."""

from games.gifts.engine import (
    create_initial_state,
    pay_chip,
    take_card,
    score_for_cards,
    calculate_scores,
    get_winner,
    restart_game,
)
from games.gifts.rules import Phase
from games.gifts.state import GameState

__all__ = [
    "create_initial_state",
    "pay_chip",
    "take_card",
    "score_for_cards",
    "calculate_scores",
    "get_winner",
    "restart_game",
    "Phase",
    "GameState",
]
