"""Game state types for Abyss Salvage."""

from dataclasses import dataclass, field
from typing import Optional

from games.abyss.rules import OXYGEN_MAX, SUBMARINE, CellKind, Direction, Phase


@dataclass(frozen=True)
class Loot:
    """One salvaged item."""

    level: int
    score: int


@dataclass
class PathCell:
    """
    One cell of the dive path. A ruin holds one loot; a blank is a spent ruin;
    a stack holds up to three forfeited loot, shown with its highest level and summed score.
    """

    kind: CellKind
    level: int = 0
    score: int = 0
    loot: list[Loot] = field(default_factory=list)

    @property
    def stack_count(self) -> int:
        return len(self.loot)


@dataclass
class Diver:
    """One player's dive state."""

    position: int = SUBMARINE
    direction: Direction = Direction.DESCENDING
    holding_loot: list[Loot] = field(default_factory=list)
    total_score: int = 0
    is_returned: bool = False
    banked_loot: list[Loot] = field(default_factory=list)  # loot already converted to score


@dataclass
class GameState:
    """Full game state shared by all divers."""

    path: list[PathCell]
    players: list[Diver]
    phase: Phase = Phase.PLAYING
    oxygen: int = OXYGEN_MAX
    round: int = 1
    current_player_index: int = 0
    oxygen_consumed_this_turn: bool = False
    moved_this_turn: bool = False
    acted_this_turn: bool = False  # one pick-up or drop per turn
    round_forfeited: bool = False
    last_dice: Optional[tuple[int, int]] = None

    def players_at(self, position: int, exclude: Optional[int] = None) -> list[int]:
        """Indices of players standing on a path cell (submarine excluded)."""
        if position < 0:
            return []
        return [i for i, p in enumerate(self.players) if i != exclude and p.position == position]
