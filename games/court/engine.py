"""Court Intrigue engine: elimination deduction card game. Pure state transitions."""

import copy
import random
from typing import Optional

from games.court.rules import (
    BARON,
    CARD_NAMES,
    DECK_TEMPLATE,
    GUARD,
    GUARD_GUESS_OPTIONS,
    KING,
    MAX_PLAYERS,
    MIN_PLAYERS,
    MINISTER,
    MINISTER_FORCING_RANKS,
    MONK,
    PRIEST,
    PRINCE,
    PRINCESS,
    TARGETED_RANKS,
    Phase,
)
from games.court.state import DiscardEntry, GameState, Player, PriestReveal


def _name(i: int) -> str:
    return f"Player {i + 1}"


def create_initial_state(player_count: int, rng: Optional[random.Random] = None) -> GameState:
    """
    Shuffle the 16 cards, set one aside face down, deal one card each,
    and let the first player draw their second card.
    """
    if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
        raise ValueError(f"Court Intrigue needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {player_count}")
    rng = rng or random.Random()
    deck = list(DECK_TEMPLATE)
    rng.shuffle(deck)
    removed_card = deck.pop()
    players = [Player(hand=[deck.pop()]) for _ in range(player_count)]
    players[0].hand.append(deck.pop())
    return GameState(
        deck=deck,
        removed_card=removed_card,
        players=players,
        logs=["Game started."],
    )


def card_needs_target(rank: int) -> bool:
    return rank in TARGETED_RANKS


def card_needs_guess(rank: int) -> bool:
    return rank == GUARD


def must_discard_minister(hand: list[int]) -> bool:
    """Holding the minister together with the prince or king forces the minister out."""
    return MINISTER in hand and any(r in hand for r in MINISTER_FORCING_RANKS)


def get_discardable_cards(state: GameState, player: int) -> list[int]:
    """Ranks the player may legally discard right now."""
    hand = state.players[player].hand
    if not hand:
        return []
    if must_discard_minister(hand):
        return [MINISTER]
    return sorted(set(hand))


def get_valid_targets(state: GameState, actor: int, rank: Optional[int] = None) -> list[int]:
    """
    Opponents still in play and not protected. A prince may also name its own player;
    protection shields a player from the prince like from every other card.
    """
    targets = [
        i
        for i, p in enumerate(state.players)
        if i != actor and not p.is_eliminated and not p.is_protected
    ]
    if rank == PRINCE:
        targets.append(actor)
        targets.sort()
    return targets


def _highest_card_winner(state: GameState) -> Optional[int]:
    """Survivor holding the highest card; ties go to the lowest index."""
    winner: Optional[int] = None
    best = -1
    for i in state.alive_indices():
        hand = state.players[i].hand
        value = max(hand) if hand else -1
        if value > best:
            best = value
            winner = i
    return winner


def _finish(state: GameState, winner: Optional[int]) -> None:
    """Close the round (mutates state)."""
    state.phase = Phase.FINISHED
    state.winner = winner
    if winner is not None:
        state.players[winner].score += 1


def _next_turn_index(state: GameState) -> int:
    n = len(state.players)
    for i in range(1, n + 1):
        idx = (state.turn_index + i) % n
        if not state.players[idx].is_eliminated:
            return idx
    return state.turn_index


def _finish_or_advance(state: GameState) -> None:
    """
    After an effect: end the round if one player is left; otherwise pass the turn,
    clear the next player's protection and let them draw. An empty deck after that
    draw ends the round on highest card. Mutates state.
    """
    alive = state.alive_indices()
    if len(alive) <= 1:
        _finish(state, alive[0] if alive else None)
        return
    state.turn_index = _next_turn_index(state)
    nxt = state.players[state.turn_index]
    nxt.is_protected = False
    if state.deck:
        nxt.hand.append(state.deck.pop())
    if not state.deck:
        winner = _highest_card_winner(state)
        state.logs.append("The deck is empty; the highest card wins.")
        _finish(state, winner)


def play_card(
    state: GameState,
    player: int,
    rank: int,
    target: Optional[int] = None,
    guess: Optional[int] = None,
) -> Optional[GameState]:
    """
    Discard a card and resolve its effect.
    Targeted cards (1, 2, 3, 5, 6) need a target from get_valid_targets; when no
    opponent can be targeted, 1, 2, 3 and 6 are played without effect and the prince
    falls back to its own player. A guard also needs a guess of 2-8.
    Returns new state or None if the play is illegal.
    """
    if state.phase != Phase.PLAYING or state.turn_index != player:
        return None
    actor = state.players[player]
    if actor.is_eliminated or rank not in actor.hand:
        return None
    if must_discard_minister(actor.hand) and rank != MINISTER:
        return None

    if card_needs_target(rank):
        valid = get_valid_targets(state, player, rank)
        if target is None:
            if rank == PRINCE:
                target = player
            elif any(i != player for i in valid):
                return None
        elif target not in valid:
            return None
        if rank == GUARD and target is not None and guess not in GUARD_GUESS_OPTIONS:
            return None
    else:
        target = None

    state = copy.deepcopy(state)
    state.last_priest_reveal = None
    actor = state.players[player]
    actor.hand.remove(rank)
    state.discard_pile.append(DiscardEntry(player_index=player, rank=rank))
    card = CARD_NAMES[rank]
    reveal: Optional[PriestReveal] = None

    if target is None and card_needs_target(rank):
        state.logs.append(f"{_name(player)} played the {card} with no one to target.")
    elif rank == PRINCESS:
        actor.is_eliminated = True
        state.logs.append(f"{_name(player)} discarded the Princess and is out.")
    elif rank == MINISTER:
        state.logs.append(f"{_name(player)} discarded the Minister.")
    elif rank == MONK:
        actor.is_protected = True
        state.logs.append(f"{_name(player)} is protected until their next turn.")
    elif rank == GUARD:
        victim = state.players[target]
        if victim.hand and victim.hand[0] == guess:
            victim.is_eliminated = True
            state.logs.append(f"{_name(player)} named {guess} for {_name(target)}: correct, {_name(target)} is out.")
        else:
            state.logs.append(f"{_name(player)} named {guess} for {_name(target)}: wrong.")
    elif rank == PRIEST:
        seen = state.players[target].hand[0]
        reveal = PriestReveal(actor_index=player, target_index=target, rank=seen)
        state.logs.append(f"{_name(player)} looked at {_name(target)}'s hand.")
    elif rank == BARON:
        other = state.players[target]
        mine = actor.hand[0] if actor.hand else 0
        theirs = other.hand[0] if other.hand else 0
        if mine < theirs:
            actor.is_eliminated = True
            state.logs.append(f"{_name(player)} compared with {_name(target)} and is out.")
        elif theirs < mine:
            other.is_eliminated = True
            state.logs.append(f"{_name(player)} compared with {_name(target)}; {_name(target)} is out.")
        else:
            state.logs.append(f"{_name(player)} compared with {_name(target)}: a tie.")
    elif rank == PRINCE:
        victim = state.players[target]
        for r in victim.hand:
            state.discard_pile.append(DiscardEntry(player_index=target, rank=r))
        if state.deck:
            drawn = state.deck.pop()
        else:
            drawn = state.removed_card
            state.removed_card = None
        victim.hand = [drawn] if drawn is not None else []
        state.logs.append(f"{_name(player)} made {_name(target)} discard and draw a new card.")
    elif rank == KING:
        other = state.players[target]
        actor.hand, other.hand = other.hand, actor.hand
        state.logs.append(f"{_name(player)} swapped hands with {_name(target)}.")

    _finish_or_advance(state)
    state.last_priest_reveal = reveal
    return state


def card_count(state: GameState) -> int:
    """Cards in deck, set aside, in hands and discarded. Always 16."""
    in_hands = sum(len(p.hand) for p in state.players)
    removed = 1 if state.removed_card is not None else 0
    return len(state.deck) + removed + in_hands + len(state.discard_pile)
