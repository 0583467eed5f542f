"""Rule engine entry points."""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from . import actions, rules, state
from .exceptions import GameAlreadyTerminalError, InvalidPlayerError, NonTerminalStateError


def legal_actions(game_state: state.State, player: int) -> Iterable[actions.Move]:
    """Return the legal placements for a player in the given state."""

    _validate_player_index(player)
    if player != game_state.active_player or is_terminal(game_state):
        return ()
    return state.empty_cells(game_state)


def step(game_state: state.State, move: actions.Move) -> state.State:
    """Place the active player's mark and pass the turn."""

    if is_terminal(game_state):
        raise GameAlreadyTerminalError()

    player = game_state.active_player
    game_state = state.place(game_state, move.row, move.col, player)
    return state.set_active_player(game_state, state.other_player(player))


def winner(game_state: state.State) -> Optional[int]:
    """Return the index of the player owning a complete line, if any."""

    cells = game_state.cells
    for line in rules.winning_lines(game_state.size):
        first = cells[line[0]]
        if first == rules.EMPTY:
            continue
        if all(cells[index] == first for index in line[1:]):
            return rules.PLAYER_MARKS.index(first)
    return None


def is_terminal(game_state: state.State) -> bool:
    """Return True if a line is complete or no empty cell remains."""

    if winner(game_state) is not None:
        return True
    return rules.EMPTY not in game_state.cells


def utility(game_state: state.State, perspective: int) -> int:
    """Return the win/loss/draw value of a finished game for ``perspective``.

    Wins are positive, losses negative and draws zero. Each empty cell left
    on the board widens the margin by one, so an earlier win outscores a later
    one and a later loss outscores an earlier one.
    """

    _validate_player_index(perspective)
    if not is_terminal(game_state):
        raise NonTerminalStateError()

    champion = winner(game_state)
    if champion is None:
        return rules.DRAW_VALUE
    remaining = game_state.cells.count(rules.EMPTY)
    if champion == perspective:
        return rules.WIN_VALUE + remaining
    return rules.LOSS_VALUE - remaining


def score(game_state: state.State) -> Tuple[int, ...]:
    """Return final utilities for each player."""

    return tuple(utility(game_state, player) for player in range(rules.PLAYER_COUNT))


def _validate_player_index(player: int) -> None:
    if not (0 <= player < rules.PLAYER_COUNT):
        raise InvalidPlayerError(player, rules.PLAYER_COUNT)


__all__ = [
    "is_terminal",
    "legal_actions",
    "score",
    "step",
    "utility",
    "winner",
]
