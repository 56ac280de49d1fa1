"""Abyss Salvage: shared-oxygen push-your-luck dive."""

from games.abyss.engine import (
    create_initial_path,
    create_initial_state,
    roll_dice,
    consume_oxygen,
    apply_oxygen_and_maybe_finish_round,
    switch_to_returning,
    move_player,
    pick_up_loot,
    put_down_loot,
    end_turn,
    end_turn_and_maybe_finish_round,
    check_all_returned_and_finish_round,
    finish_round,
    start_next_round,
    total_loot_count,
    get_scores,
    get_winners,
)
from games.abyss.rules import CellKind, Direction, Phase
from games.abyss.state import Diver, GameState, Loot, PathCell

__all__ = [
    "create_initial_path",
    "create_initial_state",
    "roll_dice",
    "consume_oxygen",
    "apply_oxygen_and_maybe_finish_round",
    "switch_to_returning",
    "move_player",
    "pick_up_loot",
    "put_down_loot",
    "end_turn",
    "end_turn_and_maybe_finish_round",
    "check_all_returned_and_finish_round",
    "finish_round",
    "start_next_round",
    "total_loot_count",
    "get_scores",
    "get_winners",
    "CellKind",
    "Direction",
    "Phase",
    "Diver",
    "GameState",
    "Loot",
    "PathCell",
]
