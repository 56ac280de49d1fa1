"""Secret Word: spot the one player with a different word."""

from games.secretword.engine import (
    create_initial_state,
    get_player_word,
    add_message,
    end_discussion,
    get_remaining_discussion_seconds,
    tick_discussion,
    vote,
    finish_voting,
)
from games.secretword.rules import Phase, Role
from games.secretword.state import GameState, Message, VoteResult

__all__ = [
    "create_initial_state",
    "get_player_word",
    "add_message",
    "end_discussion",
    "get_remaining_discussion_seconds",
    "tick_discussion",
    "vote",
    "finish_voting",
    "Phase",
    "Role",
    "GameState",
    "Message",
    "VoteResult",
]
