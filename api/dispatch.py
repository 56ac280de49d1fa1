"""Route (kind, action_type, payload) to the matching engine transition."""

import logging
import random
from typing import Any, Callable, Optional

from games import abyss, court, elemental, gifts, hitblow, midnight, secretword, valuetalk
from games import ENGINES
from games.secretword.rules import DEFAULT_DISCUSSION_SECONDS

logger = logging.getLogger(__name__)


class UnknownGameKindError(Exception):
    pass


class UnknownActionError(Exception):
    pass


class InvalidPayloadError(ValueError):
    """Payload is missing a field or has one of the wrong type."""


def _field(payload: dict, key: str, cast: Callable[[Any], Any] = lambda v: v) -> Any:
    if key not in payload or payload[key] is None:
        raise InvalidPayloadError(f"payload.{key} is required")
    try:
        return cast(payload[key])
    except (TypeError, ValueError) as e:
        raise InvalidPayloadError(f"payload.{key} is invalid: {e}")


def _optional(payload: dict, key: str, cast: Callable[[Any], Any] = lambda v: v) -> Any:
    if payload.get(key) is None:
        return None
    return _field(payload, key, cast)


def _int(v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"expected an integer, got {v!r}")
    return v


def _str(v: Any) -> str:
    if not isinstance(v, str):
        raise TypeError(f"expected a string, got {v!r}")
    return v


def _dice(v: Any) -> tuple[int, int]:
    if not isinstance(v, (list, tuple)) or len(v) != 2:
        raise TypeError(f"expected two dice, got {v!r}")
    return _int(v[0]), _int(v[1])


# Handlers take (state, player, payload, rng, now) and return the new state or None.
Handler = Callable[[Any, int, dict, random.Random, Optional[float]], Any]


def _abyss_move(state, player, payload, rng, now):
    dice = _optional(payload, "dice", _dice) or abyss.roll_dice(rng)
    return abyss.move_player(state, player, dice)


ACTIONS: dict[str, dict[str, Handler]] = {
    "elemental_paths": {
        "play_card": lambda s, p, pl, rng, now: elemental.play_card(
            s,
            p,
            _field(pl, "card_id", _str),
            _field(pl, "target", elemental.Target),
            _optional(pl, "color", elemental.Color),
        ),
        "draw_card": lambda s, p, pl, rng, now: elemental.draw_card(s, p, _field(pl, "source", _str)),
    },
    "abyss_salvage": {
        "consume_oxygen": lambda s, p, pl, rng, now: abyss.apply_oxygen_and_maybe_finish_round(s, p),
        "switch_direction": lambda s, p, pl, rng, now: abyss.switch_to_returning(s, p),
        "move": _abyss_move,
        "pick_up": lambda s, p, pl, rng, now: abyss.pick_up_loot(s, p),
        "put_down": lambda s, p, pl, rng, now: abyss.put_down_loot(s, p),
        "end_turn": lambda s, p, pl, rng, now: abyss.end_turn_and_maybe_finish_round(s, p),
        "start_next_round": lambda s, p, pl, rng, now: abyss.start_next_round(s),
    },
    "court_intrigue": {
        "play_card": lambda s, p, pl, rng, now: court.play_card(
            s,
            p,
            _field(pl, "rank", _int),
            _optional(pl, "target", _int),
            _optional(pl, "guess", _int),
        ),
    },
    "midnight_party": {
        "bid": lambda s, p, pl, rng, now: midnight.bid(s, p, _field(pl, "value", _int)),
        "call_midnight": lambda s, p, pl, rng, now: midnight.call_midnight(s, p),
        "start_next_round": lambda s, p, pl, rng, now: midnight.start_next_round(s, rng),
        "restart_game": lambda s, p, pl, rng, now: midnight.restart_game(s, rng),
    },
    "cursed_gifts": {
        "pay_chip": lambda s, p, pl, rng, now: gifts.pay_chip(s, p),
        "take_card": lambda s, p, pl, rng, now: gifts.take_card(s, p),
        "restart_game": lambda s, p, pl, rng, now: gifts.restart_game(s, rng),
    },
    "hit_and_blow": {
        "set_secret": lambda s, p, pl, rng, now: hitblow.set_secret(s, p, _field(pl, "secret", _str)),
        "submit_guess": lambda s, p, pl, rng, now: hitblow.submit_guess(s, p, _field(pl, "guess", _str)),
    },
    "value_talk": {
        "update_description": lambda s, p, pl, rng, now: valuetalk.update_description(
            s, p, _field(pl, "card", _int), _field(pl, "text", _str)
        ),
        "play_card": lambda s, p, pl, rng, now: valuetalk.play_card(
            s, p, _field(pl, "card", _int), _optional(pl, "description", _str) or "", rng
        ),
        "change_theme": lambda s, p, pl, rng, now: valuetalk.change_theme(s, rng),
        "restart_game": lambda s, p, pl, rng, now: valuetalk.restart_game(s, rng),
    },
    "secret_word": {
        "add_message": lambda s, p, pl, rng, now: secretword.add_message(
            s, _optional(pl, "author", _str) or f"Player {p + 1}", _field(pl, "text", _str), now
        ),
        "end_discussion": lambda s, p, pl, rng, now: secretword.end_discussion(s),
        "tick": lambda s, p, pl, rng, now: secretword.tick_discussion(s, now),
        "vote": lambda s, p, pl, rng, now: secretword.vote(s, p, _field(pl, "target", _int)),
        "finish_voting": lambda s, p, pl, rng, now: secretword.finish_voting(s),
    },
}

# Phase value that means the game is over, per kind.
FINISHED_PHASES: dict[str, str] = {
    "elemental_paths": elemental.Phase.FINISHED.value,
    "abyss_salvage": abyss.Phase.GAMEOVER.value,
    "court_intrigue": court.Phase.FINISHED.value,
    "midnight_party": midnight.Phase.GAMEOVER.value,
    "cursed_gifts": gifts.Phase.FINISHED.value,
    "hit_and_blow": hitblow.Phase.FINISHED.value,
    "value_talk": valuetalk.Phase.GAMEOVER.value,
    "secret_word": secretword.Phase.RESULT.value,
}


def _engine(kind: str):
    engine = ENGINES.get(kind)
    if engine is None:
        raise UnknownGameKindError(kind)
    return engine


def create_state(
    kind: str,
    player_count: int,
    options: dict | None = None,
    rng: Optional[random.Random] = None,
    now: Optional[float] = None,
) -> Any:
    """Build a fresh state. Raises ValueError for an unsupported player count."""
    engine = _engine(kind)
    options = options or {}
    rng = rng or random.Random()
    if kind == "value_talk":
        difficulty = options.get("difficulty", valuetalk.Difficulty.MIXED)
        return engine.create_initial_state(player_count, difficulty, rng)
    if kind == "secret_word":
        seconds = _optional(options, "discussion_seconds", _int) or DEFAULT_DISCUSSION_SECONDS
        return engine.create_initial_state(player_count, seconds, now, rng)
    if kind == "hit_and_blow":
        return engine.create_initial_state(player_count)
    return engine.create_initial_state(player_count, rng)


def apply_action(
    kind: str,
    state: Any,
    player: int,
    action_type: str,
    payload: dict | None = None,
    rng: Optional[random.Random] = None,
    now: Optional[float] = None,
) -> Any:
    """
    Run one player action. Returns the engine's result untouched: a new state,
    or None when the action is illegal right now.
    """
    _engine(kind)
    handler = ACTIONS[kind].get(action_type)
    if handler is None:
        raise UnknownActionError(f"{kind} has no action {action_type!r}")
    new_state = handler(state, player, payload or {}, rng or random.Random(), now)
    if new_state is None:
        logger.info("Rejected %s/%s by player %s", kind, action_type, player)
    else:
        logger.info("Applied %s/%s by player %s", kind, action_type, player)
    return new_state


def is_finished(kind: str, state: Any) -> bool:
    return state.phase.value == FINISHED_PHASES[kind]


def action_types(kind: str) -> list[str]:
    _engine(kind)
    return list(ACTIONS[kind])
