"""Fixed-size move encodings and numpy views of the board."""
from __future__ import annotations

from typing import Mapping

import numpy as np

from . import actions, engine, rules, state


def action_dim(size: int) -> int:
    """Return the number of cells, i.e. the size of the move catalog."""

    if not rules.is_supported_size(size):
        raise ValueError(f"Unsupported board size {size}")
    return size * size


def action_index(move: actions.Move, size: int) -> int:
    """Return the row-major catalog index for a move."""

    if not (0 <= move.row < size and 0 <= move.col < size):
        raise ValueError(f"Move not on a {size}x{size} board: {move}")
    return move.row * size + move.col


def index_to_action(index: int, size: int) -> actions.Move:
    """Reverse lookup of :func:`action_index`."""

    if not (0 <= index < action_dim(size)):
        raise IndexError(f"Action index {index} out of range for a {size}x{size} board")
    return actions.Move(index // size, index % size)


def legal_action_mask(game_state: state.State) -> np.ndarray:
    """Return a boolean vector flagging the legal moves of the player to move."""

    mask = np.zeros(action_dim(game_state.size), dtype=bool)
    for move in engine.legal_actions(game_state, game_state.active_player):
        mask[action_index(move, game_state.size)] = True
    return mask


def board_tensor(game_state: state.State, perspective: int) -> np.ndarray:
    """Encode the board as a ``size x size`` int8 grid from one player's view.

    Cells hold +1 for ``perspective``'s marks, -1 for the opponent's and 0
    when empty.
    """

    own = state.mark_for(perspective)
    grid = np.zeros((game_state.size, game_state.size), dtype=np.int8)
    for index, symbol in enumerate(game_state.cells):
        if symbol == rules.EMPTY:
            continue
        grid[index // game_state.size, index % game_state.size] = 1 if symbol == own else -1
    return grid


def score_grid(move_scores: Mapping[actions.Move, float], size: int) -> np.ndarray:
    """Lay out per-move scores on the board; unscored cells are ``nan``."""

    grid = np.full((size, size), np.nan, dtype=float)
    for move, value in move_scores.items():
        action_index(move, size)
        grid[move.row, move.col] = value
    return grid


__all__ = [
    "action_dim",
    "action_index",
    "board_tensor",
    "index_to_action",
    "legal_action_mask",
    "score_grid",
]
