"""Game state types for Cursed Gifts."""

from dataclasses import dataclass, field
from typing import Optional

from games.gifts.rules import Phase


@dataclass
class GameState:
    """Full game state. One card is face up with a pot of chips on it."""

    deck: list[int]  # top of deck is the last element
    current_card: Optional[int]
    player_chips: list[int]
    player_cards: list[list[int]]
    phase: Phase = Phase.PLAYING
    pot_chips: int = 0
    current_player_index: int = 0
    removed_cards: list[int] = field(default_factory=list)  # set aside at setup, never seen
