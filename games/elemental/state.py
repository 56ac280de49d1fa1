"""Game state types for Elemental Paths."""

from dataclasses import dataclass, field
from typing import Optional, Union

from games.elemental.rules import Color, Phase, WAGER


@dataclass(frozen=True)
class Card:
    """One card; value is 2-10 or WAGER."""

    id: str
    color: Color
    value: Union[int, str]

    @property
    def is_wager(self) -> bool:
        return self.value == WAGER


def _empty_columns() -> dict[Color, list[Card]]:
    return {c: [] for c in Color}


@dataclass
class GameState:
    """Full two-player game state. Index 0 moves first."""

    deck: list[Card] = field(default_factory=list)  # top of deck is the last element
    hands: list[list[Card]] = field(default_factory=lambda: [[], []])
    expeditions: list[dict[Color, list[Card]]] = field(
        default_factory=lambda: [_empty_columns(), _empty_columns()]
    )
    discard_piles: dict[Color, list[Card]] = field(default_factory=_empty_columns)
    current_player: int = 0
    phase: Phase = Phase.PLAY
    last_discarded_color: Optional[Color] = None  # may not be drawn back this turn
    logs: list[str] = field(default_factory=list)

    def find_in_hand(self, player: int, card_id: str) -> Optional[Card]:
        """Return the card with card_id in the player's hand, or None."""
        for c in self.hands[player]:
            if c.id == card_id:
                return c
        return None


@dataclass(frozen=True)
class ColorScore:
    """Score breakdown for one expedition column."""

    base: int
    wager_count: int
    multiplier: int
    bonus: int
    total: int


@dataclass(frozen=True)
class PlayerScore:
    """Per-colour breakdown plus the grand total."""

    per_color: dict[Color, ColorScore]
    total: int
