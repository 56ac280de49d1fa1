"""Cursed Gifts engine: take the card or pay a chip. Pure state transitions."""

import copy
import random
from typing import Optional

from games.gifts.rules import (
    CARD_MAX,
    CARD_MIN,
    CHIPS_PER_PLAYER,
    DECK_SIZE,
    MAX_PLAYERS,
    MIN_PLAYERS,
    Phase,
)
from games.gifts.state import GameState


def create_initial_state(player_count: int, rng: Optional[random.Random] = None) -> GameState:
    """Remove nine of the 33 cards at random, give everyone 11 chips and turn up the first card."""
    if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
        raise ValueError(f"Cursed Gifts needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {player_count}")
    rng = rng or random.Random()
    cards = list(range(CARD_MIN, CARD_MAX + 1))
    rng.shuffle(cards)
    deck, removed = cards[:DECK_SIZE], cards[DECK_SIZE:]
    top = deck.pop()
    return GameState(
        deck=deck,
        current_card=top,
        player_chips=[CHIPS_PER_PLAYER] * player_count,
        player_cards=[[] for _ in range(player_count)],
        removed_cards=sorted(removed),
    )


def _can_act(state: GameState, player: int) -> bool:
    return (
        state.phase == Phase.PLAYING
        and state.current_card is not None
        and state.current_player_index == player
    )


def pay_chip(state: GameState, player: int) -> Optional[GameState]:
    """Say "no thanks": put one chip on the card and pass the turn."""
    if not _can_act(state, player) or state.player_chips[player] < 1:
        return None
    state = copy.deepcopy(state)
    state.player_chips[player] -= 1
    state.pot_chips += 1
    state.current_player_index = (player + 1) % len(state.player_chips)
    return state


def take_card(state: GameState, player: int) -> Optional[GameState]:
    """Take the card and its chips, then turn up the next card. The same player acts again."""
    if not _can_act(state, player):
        return None
    state = copy.deepcopy(state)
    state.player_cards[player].append(state.current_card)
    state.player_chips[player] += state.pot_chips
    state.pot_chips = 0
    if not state.deck:
        state.current_card = None
        state.phase = Phase.FINISHED
        return state
    state.current_card = state.deck.pop()
    return state


def score_for_cards(cards: list[int]) -> int:
    """Penalty for a pile: each run of consecutive numbers counts only its lowest card."""
    penalty = 0
    previous: Optional[int] = None
    for card in sorted(cards):
        if previous is None or card != previous + 1:
            penalty += card
        previous = card
    return penalty


def calculate_scores(state: GameState) -> list[int]:
    """Chips minus card penalty, per player."""
    return [
        chips - score_for_cards(cards)
        for chips, cards in zip(state.player_chips, state.player_cards)
    ]


def get_winner(state: GameState) -> Optional[int]:
    """Highest score wins; ties go to the lowest index. None until the game is over."""
    if state.phase != Phase.FINISHED:
        return None
    scores = calculate_scores(state)
    return scores.index(max(scores))


def restart_game(state: GameState, rng: Optional[random.Random] = None) -> Optional[GameState]:
    """Rematch with the same seats once the game is over."""
    if state.phase != Phase.FINISHED:
        return None
    return create_initial_state(len(state.player_chips), rng)
