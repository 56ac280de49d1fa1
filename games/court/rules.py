"""Rules and constants for Court Intrigue."""

from enum import Enum


class Phase(str, Enum):
    """Game phase."""

    PLAYING = "playing"
    FINISHED = "finished"


GUARD = 1
PRIEST = 2
BARON = 3
MONK = 4
PRINCE = 5
KING = 6
MINISTER = 7
PRINCESS = 8

CARD_NAMES = {
    GUARD: "Guard",
    PRIEST: "Priest",
    BARON: "Baron",
    MONK: "Monk",
    PRINCE: "Prince",
    KING: "King",
    MINISTER: "Minister",
    PRINCESS: "Princess",
}

# 16 cards: five guards, two each of 2-5, one each of 6-8
DECK_TEMPLATE = (1, 1, 1, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 7, 8)

# Cards whose effect is aimed at a player
TARGETED_RANKS = (GUARD, PRIEST, BARON, PRINCE, KING)

# A guard names a value 2-8 (naming a guard is not allowed)
GUARD_GUESS_OPTIONS = (2, 3, 4, 5, 6, 7, 8)

# Holding the minister with one of these forces the minister to be discarded
MINISTER_FORCING_RANKS = (PRINCE, KING)

MIN_PLAYERS = 2
MAX_PLAYERS = 4
