"""Secret Word engine: find the one player holding a different word. Pure state transitions."""

import copy
import random
import time
from typing import Optional

from games.secretword.rules import (
    DEFAULT_DISCUSSION_SECONDS,
    MAX_PLAYERS,
    MIN_PLAYERS,
    NO_VOTE,
    WORD_PAIRS,
    Phase,
    Role,
)
from games.secretword.state import GameState, Message, VoteResult


def create_initial_state(
    player_count: int,
    discussion_seconds: int = DEFAULT_DISCUSSION_SECONDS,
    now: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Pick a word pair, make one random player the wolf and start the discussion clock."""
    if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
        raise ValueError(f"Secret Word needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {player_count}")
    if discussion_seconds <= 0:
        raise ValueError(f"discussion_seconds must be positive, got {discussion_seconds}")
    rng = rng or random.Random()
    now = time.time() if now is None else now
    majority, minority = rng.choice(WORD_PAIRS)
    assignments = [Role.CITIZEN] * player_count
    assignments[rng.randrange(player_count)] = Role.WOLF
    return GameState(
        majority_word=majority,
        minority_word=minority,
        assignments=assignments,
        votes=[NO_VOTE] * player_count,
        discussion_ends_at=now + discussion_seconds,
        discussion_duration_seconds=discussion_seconds,
    )


def get_player_word(state: GameState, player: int) -> str:
    """The word shown to one player."""
    if state.assignments[player] == Role.WOLF:
        return state.minority_word
    return state.majority_word


def add_message(
    state: GameState,
    author: str,
    text: str,
    now: Optional[float] = None,
) -> Optional[GameState]:
    """Post a chat line during discussion. Blank lines are rejected."""
    if state.phase != Phase.DISCUSSION:
        return None
    text = text.strip()
    if not text:
        return None
    state = copy.deepcopy(state)
    timestamp = time.time() if now is None else now
    state.messages.append(Message(author=author, text=text, timestamp=timestamp))
    return state


def end_discussion(state: GameState) -> Optional[GameState]:
    """Cut the discussion short and open voting."""
    if state.phase != Phase.DISCUSSION:
        return None
    state = copy.deepcopy(state)
    state.phase = Phase.VOTING
    return state


def get_remaining_discussion_seconds(state: GameState, now: Optional[float] = None) -> int:
    """Whole seconds left on the clock, rounded up; 0 outside discussion."""
    if state.phase != Phase.DISCUSSION:
        return 0
    now = time.time() if now is None else now
    remaining = state.discussion_ends_at - now
    if remaining <= 0:
        return 0
    return int(-(-remaining // 1))


def tick_discussion(state: GameState, now: Optional[float] = None) -> Optional[GameState]:
    """Open voting if the discussion deadline has passed; None while time remains."""
    if state.phase != Phase.DISCUSSION:
        return None
    if get_remaining_discussion_seconds(state, now) > 0:
        return None
    return end_discussion(state)


def most_voted_index(votes: list[int]) -> int:
    """Index with the most votes; ties go to the lowest index."""
    counts = [0] * len(votes)
    for target in votes:
        if target != NO_VOTE:
            counts[target] += 1
    return counts.index(max(counts))


def _resolve(state: GameState) -> None:
    """Exile the most-voted player and decide the winner (mutates state)."""
    exiled = most_voted_index(state.votes)
    was_wolf = exiled == state.wolf_index
    state.result = VoteResult(exiled_index=exiled, was_wolf=was_wolf, citizens_win=was_wolf)
    state.phase = Phase.RESULT


def vote(state: GameState, voter: int, target: int) -> Optional[GameState]:
    """
    Cast a vote for another player. Each player votes once; the result is
    computed as soon as the last vote is in.
    """
    if state.phase != Phase.VOTING:
        return None
    count = len(state.votes)
    if not 0 <= voter < count or not 0 <= target < count or voter == target:
        return None
    if state.votes[voter] != NO_VOTE:
        return None
    state = copy.deepcopy(state)
    state.votes[voter] = target
    if all(v != NO_VOTE for v in state.votes):
        _resolve(state)
    return state


def finish_voting(state: GameState) -> Optional[GameState]:
    """Close the vote early with whatever has been cast."""
    if state.phase != Phase.VOTING:
        return None
    state = copy.deepcopy(state)
    _resolve(state)
    return state
