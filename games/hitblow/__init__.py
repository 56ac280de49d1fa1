"""Hit and Blow: two-player number deduction."""

from games.hitblow.engine import (
    create_initial_state,
    is_valid_guess,
    check_hit_blow,
    set_secret,
    submit_guess,
    get_merged_history,
)
from games.hitblow.rules import Phase
from games.hitblow.state import GameState, GuessEntry, HistoryEntry

__all__ = [
    "create_initial_state",
    "is_valid_guess",
    "check_hit_blow",
    "set_secret",
    "submit_guess",
    "get_merged_history",
    "Phase",
    "GameState",
    "GuessEntry",
    "HistoryEntry",
]
