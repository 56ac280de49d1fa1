"""Elemental Paths: two-player expedition card game."""

from games.elemental.engine import (
    create_deck,
    create_initial_state,
    can_play_on_expedition,
    can_play_card,
    play_card,
    get_draw_options,
    draw_card,
    is_game_over,
    calculate_color_score,
    calculate_player_score,
    get_winner,
)
from games.elemental.rules import Color, Phase, Target
from games.elemental.state import Card, ColorScore, GameState, PlayerScore

__all__ = [
    "create_deck",
    "create_initial_state",
    "can_play_on_expedition",
    "can_play_card",
    "play_card",
    "get_draw_options",
    "draw_card",
    "is_game_over",
    "calculate_color_score",
    "calculate_player_score",
    "get_winner",
    "Color",
    "Phase",
    "Target",
    "Card",
    "ColorScore",
    "GameState",
    "PlayerScore",
]
