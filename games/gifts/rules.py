"""Rules and constants for Cursed Gifts."""

from enum import Enum


class Phase(str, Enum):
    """Game phase."""

    PLAYING = "playing"
    FINISHED = "finished"


CARD_MIN = 3
CARD_MAX = 35
TOTAL_CARDS = CARD_MAX - CARD_MIN + 1  # 33
REMOVE_COUNT = 9
DECK_SIZE = TOTAL_CARDS - REMOVE_COUNT  # 24

CHIPS_PER_PLAYER = 11

MIN_PLAYERS = 3
MAX_PLAYERS = 5
