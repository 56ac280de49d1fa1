"""Rules and constants for Hit and Blow."""

from enum import Enum


class Phase(str, Enum):
    """Game phase: both players pick a secret, then take turns guessing."""

    SETUP = "setup"
    PLAY = "play"
    FINISHED = "finished"


DIGITS = 4
PLAYER_COUNT = 2
