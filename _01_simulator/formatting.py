"""Shared formatting utilities for board display."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import engine, rules

if TYPE_CHECKING:
    from . import actions, state


def render_board(game_state: state.State) -> str:
    """
    Return a labelled text grid of the board.

    Args:
        game_state: The state to draw

    Returns:
        A string like::

              0 1 2
            0 X . O
            1 . X .
            2 . . O
    """
    header = "  " + " ".join(str(col) for col in range(game_state.size))
    lines = [header]
    for index, row in enumerate(game_state.rows):
        lines.append(f"{index} " + " ".join(row))
    return "\n".join(lines)


def move_label(move: actions.Move) -> str:
    """
    Return a human-readable label for a move.

    Args:
        move: The move to format

    Returns:
        A string like "(1, 2)"
    """
    return f"({move.row}, {move.col})"


def outcome_label(game_state: state.State) -> str:
    """Describe the result of the game so far."""
    if not engine.is_terminal(game_state):
        return "In progress"
    champion = engine.winner(game_state)
    if champion is None:
        return "Draw"
    return f"{rules.PLAYER_MARKS[champion]} wins"


__all__ = ["move_label", "outcome_label", "render_board"]
