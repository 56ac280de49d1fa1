"""Game state types for Court Intrigue."""

from dataclasses import dataclass, field
from typing import Optional

from games.court.rules import Phase


@dataclass
class Player:
    """One seat at the table."""

    hand: list[int] = field(default_factory=list)
    is_eliminated: bool = False
    is_protected: bool = False
    score: int = 0


@dataclass(frozen=True)
class DiscardEntry:
    """One card in the public discard log."""

    player_index: int
    rank: int


@dataclass(frozen=True)
class PriestReveal:
    """What the priest showed; only the actor may see it."""

    actor_index: int
    target_index: int
    rank: int


@dataclass
class GameState:
    """Full game state."""

    deck: list[int]  # top of deck is the last element
    removed_card: Optional[int]
    players: list[Player]
    phase: Phase = Phase.PLAYING
    discard_pile: list[DiscardEntry] = field(default_factory=list)
    turn_index: int = 0
    winner: Optional[int] = None
    logs: list[str] = field(default_factory=list)
    # Set only by the transition that played a priest; every other transition clears it
    last_priest_reveal: Optional[PriestReveal] = None

    def alive_indices(self) -> list[int]:
        """Indices of players not eliminated."""
        return [i for i, p in enumerate(self.players) if not p.is_eliminated]
