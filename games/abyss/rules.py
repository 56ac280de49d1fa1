"""Rules and constants for Abyss Salvage."""

from enum import Enum


class Phase(str, Enum):
    """Game phase."""

    PLAYING = "playing"
    ROUND_RESULT = "round_result"
    GAMEOVER = "gameover"


class Direction(str, Enum):
    """Diving direction. Only DESCENDING -> RETURNING is allowed."""

    DESCENDING = "descending"
    RETURNING = "returning"


class CellKind(str, Enum):
    """A path cell: a loot ruin, a spent (blank) ruin, or a stack of forfeited loot."""

    RUIN = "ruin"
    BLANK = "blank"
    STACK = "stack"


OXYGEN_MAX = 25
TOTAL_ROUNDS = 3
PATH_LENGTH = 32
LEVELS = (1, 2, 3, 4)

MIN_PLAYERS = 2
MAX_PLAYERS = 6

# Position of the submarine; path cells are 0..len(path)-1
SUBMARINE = -1

# Forfeited loot is regrouped into stacks of at most this many items
STACK_SIZE = 3

# Each die is uniform in 1..DIE_FACES
DIE_FACES = 3

# Inclusive loot score range per level
SCORE_RANGES = {
    1: (1, 3),
    2: (2, 5),
    3: (3, 7),
    4: (5, 10),
}
