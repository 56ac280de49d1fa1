"""Hit and Blow engine: two-player number deduction. Pure state transitions."""

import copy
from typing import Optional

from games.hitblow.rules import DIGITS, PLAYER_COUNT, Phase
from games.hitblow.state import GameState, GuessEntry, HistoryEntry


def create_initial_state(player_count: int = PLAYER_COUNT) -> GameState:
    """Empty setup state; both players still have to pick a secret."""
    if player_count != PLAYER_COUNT:
        raise ValueError(f"Hit and Blow is played by exactly {PLAYER_COUNT} players, got {player_count}")
    return GameState()


def is_valid_guess(guess: str) -> bool:
    """Exactly four decimal digits, none repeated."""
    if not isinstance(guess, str) or len(guess) != DIGITS:
        return False
    return all(c in "0123456789" for c in guess) and len(set(guess)) == DIGITS


def check_hit_blow(secret: str, guess: str) -> tuple[int, int]:
    """
    hit: same digit in the same position.
    blow: digits in common regardless of position, minus hits.
    """
    hit = sum(1 for s, g in zip(secret, guess) if s == g)
    common = sum(min(secret.count(d), guess.count(d)) for d in "0123456789")
    return hit, common - hit


def set_secret(state: GameState, player: int, secret: str) -> Optional[GameState]:
    """Pick (or replace) a secret during setup. Play starts with player 0 once both are set."""
    if state.phase != Phase.SETUP or player not in (0, 1):
        return None
    if not is_valid_guess(secret):
        return None
    state = copy.deepcopy(state)
    state.secrets[player] = secret
    if state.is_set(0) and state.is_set(1):
        state.phase = Phase.PLAY
        state.current_turn = 0
    return state


def submit_guess(state: GameState, player: int, guess: str) -> Optional[GameState]:
    """Guess the opponent's secret. Four hits win on the spot."""
    if state.phase != Phase.PLAY or state.current_turn != player:
        return None
    if not is_valid_guess(guess):
        return None
    state = copy.deepcopy(state)
    opponent = 1 - player
    hit, blow = check_hit_blow(state.secrets[opponent], guess)
    state.histories[player].append(GuessEntry(guess=guess, hit=hit, blow=blow))
    if hit == DIGITS:
        state.winner = player
        state.phase = Phase.FINISHED
    else:
        state.current_turn = opponent
    return state


def get_merged_history(state: GameState) -> list[HistoryEntry]:
    """Both players' guesses interleaved in turn order, player 0 first."""
    merged: list[HistoryEntry] = []
    first, second = state.histories
    for i in range(max(len(first), len(second))):
        for player, history in ((0, first), (1, second)):
            if i < len(history):
                e = history[i]
                merged.append(HistoryEntry(player=player, guess=e.guess, hit=e.hit, blow=e.blow))
    return merged
