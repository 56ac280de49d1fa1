"""Game state types for Hit and Blow."""

from dataclasses import dataclass, field
from typing import Optional

from games.hitblow.rules import Phase


@dataclass(frozen=True)
class GuessEntry:
    """One guess and its judgement."""

    guess: str
    hit: int
    blow: int


@dataclass(frozen=True)
class HistoryEntry:
    """A guess tagged with who made it, for the combined timeline."""

    player: int
    guess: str
    hit: int
    blow: int


@dataclass
class GameState:
    """Full game state. secrets[i] is player i's number; histories[i] are player i's guesses."""

    phase: Phase = Phase.SETUP
    secrets: list[str] = field(default_factory=lambda: ["", ""])
    current_turn: int = 0
    histories: list[list[GuessEntry]] = field(default_factory=lambda: [[], []])
    winner: Optional[int] = None

    def is_set(self, player: int) -> bool:
        return bool(self.secrets[player])
