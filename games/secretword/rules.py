"""Rules, constants and word pool for Secret Word."""

from enum import Enum


class Phase(str, Enum):
    """Game phase: talk, vote, reveal."""

    DISCUSSION = "discussion"
    VOTING = "voting"
    RESULT = "result"


class Role(int, Enum):
    CITIZEN = 0
    WOLF = 1


MIN_PLAYERS = 3
MAX_PLAYERS = 8
DEFAULT_DISCUSSION_SECONDS = 180
NO_VOTE = -1

# (majority word, minority word): close enough that the wolf does not notice at once.
WORD_PAIRS: tuple[tuple[str, str], ...] = (
    ("udon", "soba"),
    ("rice ball", "sandwich"),
    ("barbecue", "sukiyaki"),
    ("curry", "stew"),
    ("coffee", "tea"),
    ("McDonald's", "KFC"),
    ("math", "science"),
    ("field trip", "school trip"),
    ("cleaning", "laundry"),
    ("YouTube", "TikTok"),
    ("dog", "cat"),
    ("first date", "proposal"),
    ("partner", "best friend"),
    ("holding hands", "hugging"),
    ("ghost", "alien"),
    ("time machine", "teleporter"),
    ("hero", "demon lord"),
)
