"""Value Talk engine: cooperative play-in-ascending-order game. Pure state transitions."""

import copy
import random
from typing import Optional, Union

from games.valuetalk.rules import (
    ALL_THEMES,
    CARD_MAX,
    CARD_MIN,
    GRADUAL_EASY_UNTIL,
    GRADUAL_NORMAL_UNTIL,
    MIN_PLAYERS,
    THEME_SETS,
    Difficulty,
    Phase,
)
from games.valuetalk.state import BurnedCard, GameState, LastFailure, PlayedCard, PlayerHand


def _fresh_deck(rng: random.Random) -> list[int]:
    deck = list(range(CARD_MIN, CARD_MAX + 1))
    rng.shuffle(deck)
    return deck


def get_hand_counts(player_count: int, rng: Optional[random.Random] = None) -> list[int]:
    """
    Cards per player: 2 players get 3 each, 3 players 2 each,
    4 players 2/2/1/1 with the pairs chosen at random, otherwise 1 each.
    """
    if player_count <= 0:
        return []
    if player_count == 2:
        return [3, 3]
    if player_count == 3:
        return [2, 2, 2]
    if player_count == 4:
        rng = rng or random.Random()
        seats = [0, 1, 2, 3]
        rng.shuffle(seats)
        doubles = set(seats[:2])
        return [2 if i in doubles else 1 for i in range(4)]
    return [1] * player_count


def theme_pool(difficulty: Difficulty, level: int) -> tuple[str, ...]:
    """Themes eligible for a difficulty at a given level."""
    if difficulty == Difficulty.GRADUAL:
        if level <= GRADUAL_EASY_UNTIL:
            return THEME_SETS[Difficulty.EASY]
        if level <= GRADUAL_NORMAL_UNTIL:
            return THEME_SETS[Difficulty.NORMAL]
        return THEME_SETS[Difficulty.HARD]
    if difficulty in THEME_SETS:
        return THEME_SETS[difficulty]
    return ALL_THEMES


def get_new_theme(
    difficulty: Difficulty,
    level: int,
    rng: Optional[random.Random] = None,
) -> str:
    rng = rng or random.Random()
    return rng.choice(theme_pool(difficulty, level))


def _deal(
    player_count: int,
    deck: list[int],
    rng: random.Random,
) -> tuple[list[PlayerHand], list[int]]:
    """Deal from the front of the deck; start over with a full deck if it cannot cover the deal."""
    counts = get_hand_counts(player_count, rng)
    if len(deck) < sum(counts):
        deck = _fresh_deck(rng)
    deck = list(deck)
    players = []
    for count in counts:
        players.append(PlayerHand(hand=deck[:count]))
        deck = deck[count:]
    return players, deck


def create_initial_state(
    player_count: int,
    difficulty: Union[Difficulty, str] = Difficulty.MIXED,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Shuffle 1-100, deal by player count and pick a level-1 theme."""
    if player_count < MIN_PLAYERS:
        raise ValueError(f"Value Talk needs at least {MIN_PLAYERS} player, got {player_count}")
    difficulty = Difficulty(difficulty)
    rng = rng or random.Random()
    players, deck = _deal(player_count, _fresh_deck(rng), rng)
    return GameState(
        theme=get_new_theme(difficulty, 1, rng),
        deck=deck,
        players=players,
        difficulty=difficulty,
    )


def update_description(state: GameState, player: int, card: int, text: str) -> Optional[GameState]:
    """Attach a phrase to a card in hand so teammates can read it before it is played."""
    if state.phase != Phase.PLAYING or not 0 <= player < len(state.players):
        return None
    if card not in state.players[player].hand:
        return None
    state = copy.deepcopy(state)
    state.players[player].descriptions[card] = text
    return state


def play_card(
    state: GameState,
    player: int,
    card: int,
    description: str = "",
    rng: Optional[random.Random] = None,
) -> Optional[GameState]:
    """
    Play a card from hand. It succeeds only if no card left in any hand is smaller.
    On a miss the team loses a life, every smaller card is burned from every hand,
    and the played card stays with its owner.
    Emptying every hand clears the level and deals the next one.
    """
    if state.phase != Phase.PLAYING or not 0 <= player < len(state.players):
        return None
    if card not in state.players[player].hand:
        return None

    smaller = [
        BurnedCard(player_index=i, card=c)
        for i, p in enumerate(state.players)
        for c in p.hand
        if c < card
    ]

    state = copy.deepcopy(state)
    if smaller:
        lowest = min(smaller, key=lambda b: b.card)
        state.life -= 1
        if state.life <= 0:
            state.phase = Phase.GAMEOVER
        for p in state.players:
            p.hand = [c for c in p.hand if c >= card]
            p.descriptions = {c: d for c, d in p.descriptions.items() if c in p.hand}
        state.last_failure = LastFailure(
            message=f"Miss! Player {lowest.player_index + 1} held {lowest.card}, which is lower.",
            played_card=card,
            player_index=player,
            smaller_cards=smaller,
        )
        return state

    hand = state.players[player]
    hand.hand.remove(card)
    hand.descriptions.pop(card, None)
    state.played_cards.append(PlayedCard(card=card, description=description, player_index=player))
    state.last_failure = None

    if all(not p.hand for p in state.players):
        return _next_level(state, rng or random.Random())
    return state


def _next_level(state: GameState, rng: random.Random) -> GameState:
    """Deal the next level (mutates state). Only GRADUAL games get a new theme."""
    state.level += 1
    state.players, state.deck = _deal(len(state.players), state.deck, rng)
    if state.difficulty == Difficulty.GRADUAL:
        state.theme = get_new_theme(state.difficulty, state.level, rng)
    state.played_cards = []
    state.last_failure = None
    state.phase = Phase.PLAYING
    return state


def change_theme(state: GameState, rng: Optional[random.Random] = None) -> Optional[GameState]:
    """Swap the theme for a different one from the same pool. Once per game."""
    if state.phase != Phase.PLAYING or state.theme_change_used:
        return None
    rng = rng or random.Random()
    pool = theme_pool(state.difficulty, state.level)
    others = [t for t in pool if t != state.theme]
    state = copy.deepcopy(state)
    state.theme = rng.choice(others or list(pool))
    state.theme_change_used = True
    return state


def restart_game(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Start over with the same seats and difficulty."""
    return create_initial_state(len(state.players), state.difficulty, rng)


def remaining_cards(state: GameState) -> list[int]:
    """Every card still in a hand, sorted."""
    return sorted(c for p in state.players for c in p.hand)
