"""Game state types for Midnight Party."""

from dataclasses import dataclass, field
from typing import Optional, Union

from games.midnight.rules import NO_BID, Phase

Card = Union[int, str]


@dataclass
class GameState:
    """
    Full game state. Every hand is stored here; hiding a player's own hand
    from that player is the client's job.
    """

    deck: list[Card]  # left over after the deal; "?" resolution draws from the front
    hands: list[list[Card]]
    lives: list[int]
    phase: Phase = Phase.BIDDING
    current_bid: int = NO_BID
    current_bidder_index: int = NO_BID
    current_player_index: int = 0
    round: int = 1
    last_total: Optional[int] = None
    last_loser_index: Optional[int] = None
    revealed_hands: Optional[list[list[Card]]] = None
    winner: Optional[int] = None

    def alive_indices(self) -> list[int]:
        return [i for i, l in enumerate(self.lives) if l > 0]
