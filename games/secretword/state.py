"""Game state types for Secret Word."""

from dataclasses import dataclass, field
from typing import Optional

from games.secretword.rules import DEFAULT_DISCUSSION_SECONDS, Phase, Role


@dataclass(frozen=True)
class Message:
    author: str
    text: str
    timestamp: float


@dataclass(frozen=True)
class VoteResult:
    exiled_index: int
    was_wolf: bool
    citizens_win: bool


@dataclass
class GameState:
    """
    Full game state. assignments[i] is player i's role; votes[i] is who player i
    voted for (NO_VOTE until they vote). Times are Unix seconds.
    """

    majority_word: str
    minority_word: str
    assignments: list[Role]
    votes: list[int]
    discussion_ends_at: float
    discussion_duration_seconds: int = DEFAULT_DISCUSSION_SECONDS
    phase: Phase = Phase.DISCUSSION
    messages: list[Message] = field(default_factory=list)
    result: Optional[VoteResult] = None

    @property
    def wolf_index(self) -> int:
        return self.assignments.index(Role.WOLF)
