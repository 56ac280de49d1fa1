"""Elemental Paths engine: pure state transitions for the two-player expedition game."""

import copy
import random
from typing import Optional, Union

from games.elemental.rules import (
    BONUS_MIN_CARDS,
    BONUS_POINTS,
    COLORS,
    DECK_SOURCE,
    EXPEDITION_COST,
    HAND_SIZE,
    MAX_LOGS,
    MAX_VALUE,
    MIN_VALUE,
    PLAYER_COUNT,
    WAGER,
    WAGERS_PER_COLOR,
    Color,
    Phase,
    Target,
)
from games.elemental.state import Card, ColorScore, GameState, PlayerScore

DrawSource = Union[str, Color]


def _append_log(state: GameState, message: str) -> None:
    """Append a log line, keeping only the most recent MAX_LOGS (mutates state)."""
    state.logs = (state.logs + [message])[-MAX_LOGS:]


def _card_label(card: Card) -> str:
    return f"{card.color.value} {'wager' if card.is_wager else card.value}"


def create_deck(rng: Optional[random.Random] = None) -> list[Card]:
    """Build the 60-card deck and shuffle it. Ids are stable across games."""
    rng = rng or random.Random()
    deck: list[Card] = []
    for color in COLORS:
        for n in range(MIN_VALUE, MAX_VALUE + 1):
            deck.append(Card(id=f"{color.value}-{n}", color=color, value=n))
        for i in range(WAGERS_PER_COLOR):
            deck.append(Card(id=f"{color.value}-w{i + 1}", color=color, value=WAGER))
    rng.shuffle(deck)
    return deck


def create_initial_state(
    player_count: int = PLAYER_COUNT,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Deal eight cards to each of the two players."""
    if player_count != PLAYER_COUNT:
        raise ValueError(f"Elemental Paths is played by exactly {PLAYER_COUNT} players, got {player_count}")
    deck = create_deck(rng)
    hands: list[list[Card]] = [[], []]
    for _ in range(HAND_SIZE):
        hands[0].append(deck.pop())
        hands[1].append(deck.pop())
    return GameState(deck=deck, hands=hands)


def can_play_on_expedition(column: list[Card], card: Card) -> bool:
    """Wagers only before any number; numbers strictly ascending (gaps allowed)."""
    if card.is_wager:
        return all(c.is_wager for c in column)
    numbers = [c.value for c in column if not c.is_wager]
    highest = max(numbers) if numbers else 0
    return card.value > highest


def can_play_card(
    state: GameState,
    player: int,
    card_id: str,
    target: Target,
    color: Optional[Color] = None,
) -> bool:
    """True if play_card would accept this action."""
    if state.phase != Phase.PLAY or state.current_player != player:
        return False
    card = state.find_in_hand(player, card_id)
    if card is None:
        return False
    if color is not None and color != card.color:
        return False
    if target == Target.DISCARD:
        return True
    if target == Target.EXPEDITION:
        return can_play_on_expedition(state.expeditions[player][card.color], card)
    return False


def play_card(
    state: GameState,
    player: int,
    card_id: str,
    target: Target,
    color: Optional[Color] = None,
) -> Optional[GameState]:
    """
    Play a card from hand onto the player's expedition or the matching discard pile.
    Returns new state with phase DRAW, or None if illegal.
    """
    if not can_play_card(state, player, card_id, target, color):
        return None
    state = copy.deepcopy(state)
    card = state.find_in_hand(player, card_id)
    state.hands[player] = [c for c in state.hands[player] if c.id != card_id]

    if target == Target.DISCARD:
        state.discard_piles[card.color].append(card)
        state.last_discarded_color = card.color
        _append_log(state, f"Player {player + 1} discarded {_card_label(card)}")
    else:
        state.expeditions[player][card.color].append(card)
        state.last_discarded_color = None
        _append_log(state, f"Player {player + 1} played {_card_label(card)} to board")

    state.phase = Phase.DRAW
    return state


def get_draw_options(state: GameState) -> list[DrawSource]:
    """Every legal draw source: the deck if nonempty, then each allowed discard pile."""
    options: list[DrawSource] = []
    if state.deck:
        options.append(DECK_SOURCE)
    for color in COLORS:
        if state.discard_piles[color] and color != state.last_discarded_color:
            options.append(color)
    return options


def draw_card(state: GameState, player: int, source: DrawSource) -> Optional[GameState]:
    """
    Draw from the deck or the top of a discard pile, then pass the turn.
    The game finishes when the last deck card is drawn.
    """
    if state.phase != Phase.DRAW or state.current_player != player:
        return None
    if source != DECK_SOURCE:
        try:
            source = Color(source)
        except ValueError:
            return None
    if source not in get_draw_options(state):
        return None

    state = copy.deepcopy(state)
    if source == DECK_SOURCE:
        drawn = state.deck.pop()
        _append_log(state, f"Player {player + 1} drew from deck")
    else:
        drawn = state.discard_piles[source].pop()
        _append_log(state, f"Player {player + 1} drew from {source.value} discard")
    state.hands[player].append(drawn)

    state.current_player = 1 - player
    state.last_discarded_color = None
    state.phase = Phase.FINISHED if not state.deck else Phase.PLAY
    return state


def is_game_over(state: GameState) -> bool:
    """True once the deck has run out."""
    return state.phase == Phase.FINISHED or not state.deck


def calculate_color_score(column: list[Card]) -> ColorScore:
    """Score one column: (sum - 20) * (wagers + 1), plus 20 for eight or more cards."""
    if not column:
        return ColorScore(base=0, wager_count=0, multiplier=1, bonus=0, total=0)
    number_sum = sum(c.value for c in column if not c.is_wager)
    wager_count = sum(1 for c in column if c.is_wager)
    base = number_sum - EXPEDITION_COST
    multiplier = wager_count + 1
    bonus = BONUS_POINTS if len(column) >= BONUS_MIN_CARDS else 0
    return ColorScore(
        base=base,
        wager_count=wager_count,
        multiplier=multiplier,
        bonus=bonus,
        total=base * multiplier + bonus,
    )


def calculate_player_score(expeditions: dict[Color, list[Card]]) -> PlayerScore:
    """Per-colour breakdown and total for one player's expeditions."""
    per_color = {color: calculate_color_score(expeditions.get(color, [])) for color in COLORS}
    return PlayerScore(per_color=per_color, total=sum(s.total for s in per_color.values()))


def get_winner(state: GameState) -> Optional[int]:
    """Index of the higher scorer once the game is over; None on a tie or mid-game."""
    if not is_game_over(state):
        return None
    totals = [calculate_player_score(e).total for e in state.expeditions]
    if totals[0] == totals[1]:
        return None
    return 0 if totals[0] > totals[1] else 1
