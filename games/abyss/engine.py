"""Abyss Salvage engine: shared-oxygen push-your-luck dive. Pure state transitions."""

import copy
import random
from typing import Optional

from games.abyss.rules import (
    DIE_FACES,
    LEVELS,
    MAX_PLAYERS,
    MIN_PLAYERS,
    OXYGEN_MAX,
    PATH_LENGTH,
    SCORE_RANGES,
    STACK_SIZE,
    SUBMARINE,
    TOTAL_ROUNDS,
    CellKind,
    Direction,
    Phase,
)
from games.abyss.state import Diver, GameState, Loot, PathCell


def _ruin(loot: Loot) -> PathCell:
    return PathCell(kind=CellKind.RUIN, level=loot.level, score=loot.score, loot=[loot])


def _blank() -> PathCell:
    return PathCell(kind=CellKind.BLANK)


def _stack(chunk: list[Loot]) -> PathCell:
    return PathCell(
        kind=CellKind.STACK,
        level=max(l.level for l in chunk),
        score=sum(l.score for l in chunk),
        loot=list(chunk),
    )


def _is_turn_of(state: GameState, player: int) -> bool:
    return state.phase == Phase.PLAYING and state.current_player_index == player


def create_initial_path(rng: Optional[random.Random] = None) -> list[PathCell]:
    """32 ruins, eight of each level, in random order with a random score per ruin."""
    rng = rng or random.Random()
    levels = [LEVELS[i % len(LEVELS)] for i in range(PATH_LENGTH)]
    rng.shuffle(levels)
    path = []
    for level in levels:
        low, high = SCORE_RANGES[level]
        path.append(_ruin(Loot(level=level, score=rng.randint(low, high))))
    return path


def create_initial_state(player_count: int, rng: Optional[random.Random] = None) -> GameState:
    """All divers start in the submarine with full shared oxygen."""
    if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
        raise ValueError(f"Abyss Salvage needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {player_count}")
    return GameState(
        path=create_initial_path(rng),
        players=[Diver() for _ in range(player_count)],
    )


def roll_dice(rng: Optional[random.Random] = None) -> tuple[int, int]:
    """Two independent dice, each uniform in 1..3."""
    rng = rng or random.Random()
    return rng.randint(1, DIE_FACES), rng.randint(1, DIE_FACES)


# ---------- turn steps ----------


def consume_oxygen(state: GameState, player: int) -> Optional[tuple[GameState, bool]]:
    """
    Step 1 of a turn: the shared oxygen drops by the number of loot the diver holds,
    floored at 0. Returns (new_state, depleted) or None if illegal.
    """
    if not _is_turn_of(state, player) or state.oxygen_consumed_this_turn:
        return None
    state = copy.deepcopy(state)
    consumption = len(state.players[player].holding_loot)
    state.oxygen = max(0, state.oxygen - consumption)
    state.oxygen_consumed_this_turn = True
    return state, state.oxygen <= 0


def apply_oxygen_and_maybe_finish_round(state: GameState, player: int) -> Optional[GameState]:
    """Consume oxygen; if it ran out, the round ends at once with forfeiture."""
    result = consume_oxygen(state, player)
    if result is None:
        return None
    new_state, depleted = result
    if depleted:
        return finish_round(new_state, oxygen_depleted=True)
    return new_state


def switch_to_returning(state: GameState, player: int) -> Optional[GameState]:
    """Turn back toward the submarine. One-way; only after oxygen and before moving."""
    if not _is_turn_of(state, player):
        return None
    if not state.oxygen_consumed_this_turn or state.moved_this_turn:
        return None
    diver = state.players[player]
    if diver.direction != Direction.DESCENDING or diver.position == SUBMARINE:
        return None
    state = copy.deepcopy(state)
    state.players[player].direction = Direction.RETURNING
    return state


def move_player(state: GameState, player: int, dice: tuple[int, int]) -> Optional[GameState]:
    """
    Step 2: move by max(0, dice total - loot held). Cells occupied by other divers are
    jumped over without spending a step. Stops at either end of the path.
    """
    if not _is_turn_of(state, player):
        return None
    if not state.oxygen_consumed_this_turn or state.moved_this_turn:
        return None
    if len(dice) != 2 or any(d < 1 or d > DIE_FACES for d in dice):
        return None

    state = copy.deepcopy(state)
    diver = state.players[player]
    steps_left = max(0, sum(dice) - len(diver.holding_loot))
    step = 1 if diver.direction == Direction.DESCENDING else -1
    pos = diver.position
    while steps_left > 0:
        next_pos = pos + step
        if next_pos < SUBMARINE or next_pos >= len(state.path):
            break
        occupied = bool(state.players_at(next_pos, exclude=player))
        pos = next_pos
        if not occupied:
            steps_left -= 1

    diver.position = pos
    # An empty path leaves a descending diver nowhere to go, so they are back too.
    diver.is_returned = pos == SUBMARINE and (diver.direction == Direction.RETURNING or not state.path)
    state.last_dice = (dice[0], dice[1])
    state.moved_this_turn = True
    return state


def pick_up_loot(state: GameState, player: int) -> Optional[GameState]:
    """Step 3 (optional): take the ruin or the whole stack under the diver; the cell goes blank."""
    if not _is_turn_of(state, player) or not state.moved_this_turn or state.acted_this_turn:
        return None
    diver = state.players[player]
    if diver.position == SUBMARINE:
        return None
    cell = state.path[diver.position]
    if cell.kind == CellKind.BLANK or not cell.loot:
        return None
    state = copy.deepcopy(state)
    diver = state.players[player]
    diver.holding_loot.extend(state.path[diver.position].loot)
    state.path[diver.position] = _blank()
    state.acted_this_turn = True
    return state


def put_down_loot(state: GameState, player: int) -> Optional[GameState]:
    """Step 3 (optional): drop the most recently taken loot onto the blank cell under the diver."""
    if not _is_turn_of(state, player) or not state.moved_this_turn or state.acted_this_turn:
        return None
    diver = state.players[player]
    if diver.position == SUBMARINE or not diver.holding_loot:
        return None
    if state.path[diver.position].kind != CellKind.BLANK:
        return None
    state = copy.deepcopy(state)
    diver = state.players[player]
    loot = diver.holding_loot.pop()
    state.path[diver.position] = _ruin(loot)
    state.acted_this_turn = True
    return state


def _next_diver(state: GameState) -> int:
    """Next index after the current one that is still out; current index if none is."""
    n = len(state.players)
    for i in range(1, n + 1):
        idx = (state.current_player_index + i) % n
        if not state.players[idx].is_returned:
            return idx
    return state.current_player_index


def end_turn(state: GameState, player: int) -> Optional[GameState]:
    """Pass the turn to the next diver still out and reset the turn flags."""
    if not _is_turn_of(state, player) or not state.moved_this_turn:
        return None
    state = copy.deepcopy(state)
    state.current_player_index = _next_diver(state)
    state.oxygen_consumed_this_turn = False
    state.moved_this_turn = False
    state.acted_this_turn = False
    return state


def all_returned(state: GameState) -> bool:
    """True when every diver is back in the submarine."""
    return all(p.is_returned for p in state.players)


def end_turn_and_maybe_finish_round(state: GameState, player: int) -> Optional[GameState]:
    """End the turn; if everyone is home the round is settled immediately."""
    new_state = end_turn(state, player)
    if new_state is None:
        return None
    if all_returned(new_state):
        return finish_round(new_state, oxygen_depleted=False)
    return new_state


def check_all_returned_and_finish_round(state: GameState) -> Optional[GameState]:
    """Settle the round if every diver is home; None otherwise."""
    if state.phase != Phase.PLAYING or not all_returned(state):
        return None
    return finish_round(state, oxygen_depleted=False)


# ---------- round settlement ----------


def finish_round(state: GameState, oxygen_depleted: bool) -> GameState:
    """
    Settle the round:
    1. Returned divers bank their loot; everyone else forfeits. On oxygen
       depletion every diver forfeits, wherever they are.
    2. Blank cells are removed from the path.
    3. Forfeited loot is regrouped into stacks of up to three, appended in order.
    4. Oxygen and divers are reset; the round advances or the game ends.
    """
    state = copy.deepcopy(state)
    forfeited: list[Loot] = []
    for diver in state.players:
        if diver.is_returned and not oxygen_depleted:
            diver.total_score += sum(l.score for l in diver.holding_loot)
            diver.banked_loot.extend(diver.holding_loot)
        else:
            forfeited.extend(diver.holding_loot)

    path = [cell for cell in state.path if cell.kind != CellKind.BLANK]
    for i in range(0, len(forfeited), STACK_SIZE):
        path.append(_stack(forfeited[i : i + STACK_SIZE]))

    is_final = state.round >= TOTAL_ROUNDS
    state.path = path
    state.players = [
        Diver(total_score=d.total_score, banked_loot=d.banked_loot) for d in state.players
    ]
    state.oxygen = OXYGEN_MAX
    state.round = min(state.round + 1, TOTAL_ROUNDS)
    state.phase = Phase.GAMEOVER if is_final else Phase.ROUND_RESULT
    state.current_player_index = 0
    state.oxygen_consumed_this_turn = False
    state.moved_this_turn = False
    state.acted_this_turn = False
    state.round_forfeited = oxygen_depleted
    return state


def start_next_round(state: GameState) -> Optional[GameState]:
    """Leave the round result screen and resume play."""
    if state.phase != Phase.ROUND_RESULT:
        return None
    state = copy.deepcopy(state)
    state.phase = Phase.PLAYING
    state.round_forfeited = False
    state.last_dice = None
    return state


# ---------- queries ----------


def total_loot_count(state: GameState) -> int:
    """Loot on the path, in hands and banked. Constant for a whole game."""
    on_path = sum(len(cell.loot) for cell in state.path)
    held = sum(len(d.holding_loot) for d in state.players)
    banked = sum(len(d.banked_loot) for d in state.players)
    return on_path + held + banked


def get_scores(state: GameState) -> list[int]:
    return [d.total_score for d in state.players]


def get_winners(state: GameState) -> list[int]:
    """Indices sharing the top score once the game is over; empty before that."""
    if state.phase != Phase.GAMEOVER:
        return []
    scores = get_scores(state)
    best = max(scores)
    return [i for i, s in enumerate(scores) if s == best]
