"""Game state types for Value Talk."""

from dataclasses import dataclass, field
from typing import Optional

from games.valuetalk.rules import INITIAL_LIFE, Difficulty, Phase


@dataclass
class PlayerHand:
    """A player's cards and the phrase attached to each one."""

    hand: list[int] = field(default_factory=list)
    descriptions: dict[int, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PlayedCard:
    card: int
    description: str
    player_index: int


@dataclass(frozen=True)
class BurnedCard:
    player_index: int
    card: int


@dataclass
class LastFailure:
    """What went wrong on the most recent misplay."""

    message: str
    played_card: int
    player_index: int
    smaller_cards: list[BurnedCard] = field(default_factory=list)


@dataclass
class GameState:
    """Shared cooperative state: one theme, one life pool, one played sequence."""

    theme: str
    deck: list[int]
    players: list[PlayerHand]
    phase: Phase = Phase.PLAYING
    life: int = INITIAL_LIFE
    level: int = 1
    played_cards: list[PlayedCard] = field(default_factory=list)
    last_failure: Optional[LastFailure] = None
    theme_change_used: bool = False
    difficulty: Difficulty = Difficulty.MIXED
