"""Unit tests for the Midnight Party engine."""

import copy
import random

import pytest
from games.midnight.engine import (
    active_players,
    bid,
    calculate_total,
    call_midnight,
    cards_per_player,
    create_initial_state,
    restart_game,
    start_next_round,
)
from games.midnight.rules import DOUBLE, FULL_DECK, MAX_ZERO, MYSTERY, NO_BID, Phase
from games.midnight.state import GameState


def _make_state(hands: list[list], lives: list[int] | None = None, deck: list | None = None) -> GameState:
    return GameState(
        deck=list(deck or []),
        hands=[list(h) for h in hands],
        lives=list(lives or [3] * len(hands)),
    )


def test_full_deck_composition():
    assert len(FULL_DECK) == 37
    assert FULL_DECK.count(DOUBLE) == 2
    assert FULL_DECK.count(MYSTERY) == 2
    assert FULL_DECK.count(80) == 3


def test_cards_per_player_leaves_reserve():
    assert cards_per_player(2) == 16
    assert cards_per_player(3) == 10
    assert cards_per_player(10) == 3


def test_initial_state():
    state = create_initial_state(3, random.Random(2))
    assert [len(h) for h in state.hands] == [10, 10, 10]
    assert len(state.deck) == 7
    assert state.lives == [3, 3, 3]
    assert state.current_bid == NO_BID
    assert state.phase == Phase.BIDDING


@pytest.mark.parametrize("count", [1, 11])
def test_initial_state_bad_player_count(count):
    with pytest.raises(ValueError):
        create_initial_state(count)


def test_total_plain_and_negative():
    assert calculate_total([[10, 20], [-10, 0]], [])[0] == 20


def test_total_doubles_once_per_x2():
    assert calculate_total([[10, 20], [DOUBLE]], [])[0] == 60
    assert calculate_total([[10, DOUBLE], [DOUBLE]], [])[0] == 40


def test_total_max_zero_removes_single_largest():
    assert calculate_total([[10, 80, MAX_ZERO], [80]], [])[0] == 90


def test_total_mystery_draws_from_front_of_deck():
    total, remaining = calculate_total([[MYSTERY, 30]], [40, 50])
    assert total == 70
    assert remaining == [50]


def test_total_mystery_special_or_empty_counts_zero():
    assert calculate_total([[MYSTERY, 30]], [DOUBLE, 50])[0] == 30
    assert calculate_total([[MYSTERY, 30]], [])[0] == 30


def test_total_mystery_resolves_before_max_zero():
    assert calculate_total([[MYSTERY, MAX_ZERO, 10]], [70])[0] == 10


def test_bidding_must_rise():
    state = _make_state([[10], [20]])
    assert bid(state, 1, 5) is None
    assert bid(state, 0, -1) is None
    s2 = bid(state, 0, 0)
    assert s2.current_bid == 0
    assert s2.current_bidder_index == 0
    assert s2.current_player_index == 1
    assert bid(s2, 1, 0) is None
    assert bid(s2, 1, True) is None
    assert bid(s2, 1, 1).current_bid == 1


def test_call_without_bid_rejected():
    state = _make_state([[10], [20]])
    assert call_midnight(state, 0) is None


def test_call_when_total_reaches_bid_costs_bidder():
    state = bid(_make_state([[10, 20], [30]]), 0, 60)
    s2 = call_midnight(state, 1)
    assert s2.last_total == 60
    assert s2.last_loser_index == 0
    assert s2.lives == [2, 3]
    assert s2.phase == Phase.CHALLENGE_RESULT
    assert s2.revealed_hands == [[10, 20], [30]]


def test_call_when_bid_overreaches_costs_caller():
    state = bid(_make_state([[10, 20], [30]]), 0, 70)
    s2 = call_midnight(state, 1)
    assert s2.last_loser_index == 1
    assert s2.lives == [3, 2]


def test_losing_last_life_ends_game():
    state = bid(_make_state([[10, 20], [30]], lives=[1, 1]), 0, 100)
    s2 = call_midnight(state, 1)
    assert s2.phase == Phase.GAMEOVER
    assert s2.winner == 0
    assert start_next_round(s2) is None

    s3 = restart_game(s2, random.Random(1))
    assert s3.lives == [3, 3]
    assert s3.phase == Phase.BIDDING


def test_turn_skips_players_without_lives():
    state = _make_state([[10], [], [20]], lives=[3, 0, 3])
    s2 = bid(state, 0, 10)
    assert s2.current_player_index == 2
    assert active_players(s2) == [0, 2]


def test_next_round_starts_with_loser():
    state = _make_state([[10], [], [20]], lives=[3, 0, 3])
    state = bid(state, 0, 10)
    state = call_midnight(state, 2)
    assert state.last_loser_index == 0
    s2 = start_next_round(state, random.Random(8))
    assert s2.current_player_index == 0
    assert s2.round == 2
    assert s2.hands[1] == []
    assert [len(h) for h in s2.hands] == [16, 0, 16]
    assert len(s2.deck) == 5
    assert s2.current_bid == NO_BID
    assert s2.revealed_hands is None


def test_next_round_skips_eliminated_loser():
    state = _make_state([[10], [20], [30]], lives=[3, 1, 3])
    state = bid(state, 0, 10)
    state = bid(state, 1, 20)
    state = call_midnight(state, 2)
    assert state.lives == [3, 0, 3]
    s2 = start_next_round(state, random.Random(8))
    assert s2.current_player_index == 0


def test_random_games_only_give_turns_to_living_players():
    rng = random.Random(17)
    state = create_initial_state(5, rng)
    while state.phase != Phase.GAMEOVER:
        if state.phase == Phase.CHALLENGE_RESULT:
            state = start_next_round(state, rng)
            continue
        actor = state.current_player_index
        assert state.lives[actor] > 0
        if state.current_bid != NO_BID and rng.random() < 0.5:
            state = call_midnight(state, actor)
        else:
            low = 0 if state.current_bid == NO_BID else state.current_bid + 1
            state = bid(state, actor, low + rng.randint(0, 40))
    assert len(active_players(state)) == 1
    assert state.winner == active_players(state)[0]


def test_transitions_leave_input_untouched():
    state = _make_state([[10, 20], [30]])
    before = copy.deepcopy(state)
    state_with_bid = bid(state, 0, 60)
    assert state == before

    before = copy.deepcopy(state_with_bid)
    called = call_midnight(state_with_bid, 1)
    assert state_with_bid == before

    before = copy.deepcopy(called)
    assert start_next_round(called, random.Random(2)).round == 2
    assert called == before
