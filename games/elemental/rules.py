"""Rules and constants for Elemental Paths."""

from enum import Enum


class Color(str, Enum):
    """Expedition colours."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"
    YELLOW = "yellow"


class Phase(str, Enum):
    """Turn phase: play a card, then draw one."""

    PLAY = "play"
    DRAW = "draw"
    FINISHED = "finished"


class Target(str, Enum):
    """Where a played card goes."""

    EXPEDITION = "expedition"
    DISCARD = "discard"


COLORS = tuple(Color)

# Card value used for wager (handshake) cards
WAGER = "wager"

MIN_VALUE = 2
MAX_VALUE = 10
WAGERS_PER_COLOR = 3

PLAYER_COUNT = 2
HAND_SIZE = 8

# Source name for drawing from the face-down deck
DECK_SOURCE = "deck"

# Scoring: expedition cost, bonus threshold and bonus
EXPEDITION_COST = 20
BONUS_MIN_CARDS = 8
BONUS_POINTS = 20

MAX_LOGS = 5
