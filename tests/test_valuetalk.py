"""Unit tests for the Value Talk engine."""

import copy
import random

import pytest
from games.valuetalk.engine import (
    change_theme,
    create_initial_state,
    get_hand_counts,
    get_new_theme,
    play_card,
    remaining_cards,
    restart_game,
    update_description,
)
from games.valuetalk.rules import THEME_SETS, Difficulty, Phase
from games.valuetalk.state import BurnedCard, GameState, PlayerHand


def _make_state(hands: list[list[int]], deck: list[int] | None = None, **kwargs) -> GameState:
    return GameState(
        theme="Size of animals",
        deck=list(deck if deck is not None else range(80, 101)),
        players=[PlayerHand(hand=list(h)) for h in hands],
        **kwargs,
    )


def test_hand_counts_by_player_count():
    assert get_hand_counts(1) == [1]
    assert get_hand_counts(2) == [3, 3]
    assert get_hand_counts(3) == [2, 2, 2]
    assert get_hand_counts(6) == [1] * 6
    four = get_hand_counts(4, random.Random(3))
    assert sorted(four) == [1, 1, 2, 2]


def test_initial_state():
    state = create_initial_state(2, rng=random.Random(1))
    assert [len(p.hand) for p in state.players] == [3, 3]
    assert len(state.deck) == 94
    assert state.life == 3
    assert state.level == 1
    assert state.difficulty == Difficulty.MIXED
    all_cards = state.deck + remaining_cards(state)
    assert sorted(all_cards) == list(range(1, 101))


def test_initial_state_validation():
    with pytest.raises(ValueError):
        create_initial_state(0)
    with pytest.raises(ValueError):
        create_initial_state(2, "IMPOSSIBLE")


def test_theme_follows_difficulty():
    state = create_initial_state(3, "HARD", random.Random(2))
    assert state.difficulty == Difficulty.HARD
    assert state.theme in THEME_SETS[Difficulty.HARD]


def test_gradual_theme_tiers():
    rng = random.Random(4)
    assert get_new_theme(Difficulty.GRADUAL, 2, rng) in THEME_SETS[Difficulty.EASY]
    assert get_new_theme(Difficulty.GRADUAL, 3, rng) in THEME_SETS[Difficulty.NORMAL]
    assert get_new_theme(Difficulty.GRADUAL, 5, rng) in THEME_SETS[Difficulty.NORMAL]
    assert get_new_theme(Difficulty.GRADUAL, 6, rng) in THEME_SETS[Difficulty.HARD]


def test_lowest_card_plays_successfully():
    state = _make_state([[10, 70], [30]])
    s2 = play_card(state, 0, 10, "a mouse")
    assert s2.players[0].hand == [70]
    assert s2.played_cards[-1].card == 10
    assert s2.played_cards[-1].description == "a mouse"
    assert s2.life == 3
    assert s2.last_failure is None


def test_cascade_burn_on_misplay():
    state = _make_state([[50, 70], [10, 30], [60]])
    s2 = play_card(state, 0, 50, "a horse")
    assert s2.life == 2
    assert s2.players[0].hand == [50, 70]
    assert s2.players[1].hand == []
    assert s2.players[2].hand == [60]
    assert s2.played_cards == []
    failure = s2.last_failure
    assert failure.played_card == 50
    assert failure.player_index == 0
    assert failure.smaller_cards == [BurnedCard(player_index=1, card=10), BurnedCard(player_index=1, card=30)]
    assert "Player 2" in failure.message and "10" in failure.message


def test_last_life_lost_ends_game():
    state = _make_state([[50], [10]], life=1)
    s2 = play_card(state, 0, 50)
    assert s2.phase == Phase.GAMEOVER
    assert s2.life == 0
    assert play_card(s2, 0, 50) is None


def test_playing_card_not_held_returns_none():
    state = _make_state([[10], [30]])
    assert play_card(state, 0, 30) is None
    assert play_card(state, 5, 10) is None


def test_clearing_level_deals_from_remaining_deck():
    state = _make_state([[10], [30]], deck=list(range(40, 60)))
    state = play_card(state, 0, 10)
    s2 = play_card(state, 1, 30)
    assert s2.level == 2
    assert [p.hand for p in s2.players] == [[40, 41, 42], [43, 44, 45]]
    assert s2.deck == list(range(46, 60))
    assert s2.played_cards == []
    assert s2.theme == "Size of animals"


def test_clearing_level_reshuffles_when_deck_runs_short():
    state = _make_state([[10], [30]], deck=[1, 2])
    state = play_card(state, 0, 10)
    s2 = play_card(state, 1, 30, rng=random.Random(5))
    assert len(s2.deck) == 94
    assert sorted(s2.deck + remaining_cards(s2)) == list(range(1, 101))


def test_gradual_game_changes_theme_on_new_level():
    state = _make_state([[10]], level=2, difficulty=Difficulty.GRADUAL)
    s2 = play_card(state, 0, 10, rng=random.Random(1))
    assert s2.level == 3
    assert s2.theme in THEME_SETS[Difficulty.NORMAL]


def test_descriptions_follow_the_cards():
    state = _make_state([[20, 40], [30]])
    assert update_description(state, 0, 30, "a cat") is None
    s2 = update_description(state, 0, 40, "a wolf")
    s2 = update_description(s2, 0, 20, "a fox")
    assert s2.players[0].descriptions == {40: "a wolf", 20: "a fox"}
    s3 = play_card(s2, 0, 20, "a fox")
    assert s3.players[0].descriptions == {40: "a wolf"}
    s4 = play_card(s3, 0, 40)  # misplay: 30 is burned, 40 stays
    assert s4.players[0].descriptions == {40: "a wolf"}


def test_change_theme_once_per_game():
    state = _make_state([[10]], difficulty=Difficulty.EASY)
    s2 = change_theme(state, random.Random(2))
    assert s2.theme != state.theme
    assert s2.theme in THEME_SETS[Difficulty.EASY]
    assert s2.theme_change_used
    assert change_theme(s2) is None


def test_restart_resets_progress():
    state = _make_state([[50], [10]], life=1, level=4, difficulty=Difficulty.NORMAL, theme_change_used=True)
    state = play_card(state, 0, 50)
    s2 = restart_game(state, random.Random(7))
    assert s2.phase == Phase.PLAYING
    assert s2.life == 3
    assert s2.level == 1
    assert not s2.theme_change_used
    assert s2.difficulty == Difficulty.NORMAL
    assert len(s2.players) == 2


def test_transitions_leave_input_untouched():
    state = _make_state([[10, 20], [15]])
    before = copy.deepcopy(state)
    update_description(state, 0, 10, "a cat")
    play_card(state, 0, 20)
    change_theme(state, random.Random(1))
    assert state == before

    state = play_card(_make_state([[10], [30]], deck=list(range(40, 60))), 0, 10)
    before = copy.deepcopy(state)
    assert play_card(state, 1, 30).level == 2
    assert state == before
