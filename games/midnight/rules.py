"""Rules and constants for Midnight Party."""

from enum import Enum


class Phase(str, Enum):
    """Game phase."""

    BIDDING = "bidding"
    CHALLENGE_RESULT = "challenge_result"
    GAMEOVER = "gameover"


# Special cards
DOUBLE = "x2"
MAX_ZERO = "MAX=0"
MYSTERY = "?"

SPECIAL_CARDS = (DOUBLE, MAX_ZERO, MYSTERY)

# Large, well-spaced numbers keep bluffing interesting
NUMBERS = (10, 20, 30, 40, 50, 60, 70, 80)

FULL_DECK = (
    *NUMBERS,
    *NUMBERS,
    *NUMBERS,
    -10, -10, -20, -20,
    0, 0, 0,
    DOUBLE, DOUBLE, MAX_ZERO, MAX_ZERO, MYSTERY, MYSTERY,
)

# Cards kept back from the deal so "?" can be resolved
RESERVE = 5

INITIAL_LIVES = 3
MIN_PLAYERS = 2
MAX_PLAYERS = 10

# currentBid / currentBidderIndex before anyone has bid
NO_BID = -1
