"""Court Intrigue: 16-card elimination deduction game."""

from games.court.engine import (
    create_initial_state,
    card_needs_target,
    card_needs_guess,
    must_discard_minister,
    get_discardable_cards,
    get_valid_targets,
    play_card,
    card_count,
)
from games.court.rules import CARD_NAMES, Phase
from games.court.state import DiscardEntry, GameState, Player, PriestReveal

__all__ = [
    "create_initial_state",
    "card_needs_target",
    "card_needs_guess",
    "must_discard_minister",
    "get_discardable_cards",
    "get_valid_targets",
    "play_card",
    "card_count",
    "CARD_NAMES",
    "Phase",
    "DiscardEntry",
    "GameState",
    "Player",
    "PriestReveal",
]
