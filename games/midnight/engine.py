"""Midnight Party engine: bid on the table total you can only partly see. Pure state transitions."""

import copy
import random
from typing import Optional

from games.midnight.rules import (
    DOUBLE,
    FULL_DECK,
    INITIAL_LIVES,
    MAX_PLAYERS,
    MAX_ZERO,
    MIN_PLAYERS,
    MYSTERY,
    NO_BID,
    RESERVE,
    Phase,
)
from games.midnight.state import Card, GameState


def is_numeric_card(card: Card) -> bool:
    return isinstance(card, int) and not isinstance(card, bool)


def cards_per_player(player_count: int) -> int:
    """Deal size that leaves RESERVE cards in the deck for "?" resolution."""
    return (len(FULL_DECK) - RESERVE) // player_count


def _deal(player_count: int, lives: list[int], rng: random.Random) -> tuple[list[list[Card]], list[Card]]:
    """Shuffle a full deck and deal to every player who still has lives."""
    deck: list[Card] = list(FULL_DECK)
    rng.shuffle(deck)
    alive = [i for i in range(player_count) if lives[i] > 0]
    per = cards_per_player(len(alive))
    hands: list[list[Card]] = [[] for _ in range(player_count)]
    for i in alive:
        hands[i] = deck[:per]
        deck = deck[per:]
    return hands, deck


def create_initial_state(player_count: int, rng: Optional[random.Random] = None) -> GameState:
    """Everyone starts with three lives; player 0 bids first."""
    if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
        raise ValueError(f"Midnight Party needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {player_count}")
    lives = [INITIAL_LIVES] * player_count
    hands, deck = _deal(player_count, lives, rng or random.Random())
    return GameState(deck=deck, hands=hands, lives=lives)


def calculate_total(hands: list[list[Card]], deck: list[Card]) -> tuple[int, list[Card]]:
    """
    Table total, in this exact order:
    1. each "?" draws one card from the deck (a special card drawn counts as 0)
    2. any "MAX=0" zeroes the single largest number
    3. sum the numbers
    4. double the sum once per "x2"
    Returns (total, deck left after the "?" draws).
    """
    remaining = list(deck)
    cards = [c for hand in hands for c in hand]

    numbers = [c for c in cards if is_numeric_card(c)]
    for c in cards:
        if c != MYSTERY:
            continue
        drawn = remaining.pop(0) if remaining else None
        numbers.append(drawn if drawn is not None and is_numeric_card(drawn) else 0)

    if MAX_ZERO in cards and numbers:
        numbers[numbers.index(max(numbers))] = 0

    total = sum(numbers)
    for _ in range(cards.count(DOUBLE)):
        total *= 2
    return total, remaining


def _next_alive(lives: list[int], current: int) -> int:
    n = len(lives)
    for i in range(1, n + 1):
        idx = (current + i) % n
        if lives[idx] > 0:
            return idx
    return current


def bid(state: GameState, player: int, value: int) -> Optional[GameState]:
    """Raise the bid; the turn passes to the next living player."""
    if state.phase != Phase.BIDDING or state.current_player_index != player:
        return None
    if state.lives[player] <= 0:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    minimum = 0 if state.current_bid == NO_BID else state.current_bid + 1
    if value < minimum:
        return None
    state = copy.deepcopy(state)
    state.current_bid = value
    state.current_bidder_index = player
    state.current_player_index = _next_alive(state.lives, player)
    return state


def call_midnight(state: GameState, player: int) -> Optional[GameState]:
    """
    Challenge the current bid. If the table total reaches the bid, the bidder
    overreached and loses a life; otherwise the challenger does.
    """
    if state.phase != Phase.BIDDING or state.current_player_index != player:
        return None
    if state.lives[player] <= 0 or state.current_bid == NO_BID:
        return None

    total, remaining = calculate_total(state.hands, state.deck)
    loser = state.current_bidder_index if total >= state.current_bid else player

    state = copy.deepcopy(state)
    state.lives[loser] = max(0, state.lives[loser] - 1)
    state.deck = remaining
    state.last_total = total
    state.last_loser_index = loser
    state.revealed_hands = [list(h) for h in state.hands]

    alive = state.alive_indices()
    if len(alive) <= 1:
        state.phase = Phase.GAMEOVER
        state.winner = alive[0] if alive else None
    else:
        state.phase = Phase.CHALLENGE_RESULT
    return state


def start_next_round(state: GameState, rng: Optional[random.Random] = None) -> Optional[GameState]:
    """Redeal; the loser starts if still alive, else the first living player."""
    if state.phase != Phase.CHALLENGE_RESULT:
        return None
    state = copy.deepcopy(state)
    alive = state.alive_indices()
    loser = state.last_loser_index
    starter = loser if loser is not None and state.lives[loser] > 0 else alive[0]
    state.hands, state.deck = _deal(len(state.hands), state.lives, rng or random.Random())
    state.phase = Phase.BIDDING
    state.current_bid = NO_BID
    state.current_bidder_index = NO_BID
    state.current_player_index = starter
    state.round += 1
    state.last_total = None
    state.last_loser_index = None
    state.revealed_hands = None
    return state


def restart_game(state: GameState, rng: Optional[random.Random] = None) -> Optional[GameState]:
    """Rematch with the same seats once the game is over."""
    if state.phase != Phase.GAMEOVER:
        return None
    return create_initial_state(len(state.hands), rng)


def active_players(state: GameState) -> list[int]:
    """Players who still have lives."""
    return state.alive_indices()
