"""Core rule constants for the tic-tac-toe simulator."""

from __future__ import annotations

from functools import lru_cache

DEFAULT_BOARD_SIZE = 3
MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 3

PLAYER_COUNT = 2
PLAYER_MARKS: tuple[str, ...] = ("X", "O")
EMPTY = "."

# Terminal utilities from one player's point of view on a full board.
# Wins and losses with empty cells left are widened by one per empty cell.
WIN_VALUE = 1
LOSS_VALUE = -1
DRAW_VALUE = 0

# Largest number of empty cells the exhaustive search will expand.
MAX_SEARCH_CELLS = 9

if len(PLAYER_MARKS) != PLAYER_COUNT:
    raise ValueError("Each player needs exactly one mark")
if EMPTY in PLAYER_MARKS:
    raise ValueError("Empty cell symbol must differ from player marks")


def is_supported_size(size: int) -> bool:
    return MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE


@lru_cache(maxsize=None)
def winning_lines(size: int) -> tuple[tuple[int, ...], ...]:
    """Return every winning line as row-major flat cell indices.

    A line is a full row, a full column or one of the two main diagonals.
    """

    if not is_supported_size(size):
        raise ValueError(f"Unsupported board size {size}")

    lines: list[tuple[int, ...]] = []
    for row in range(size):
        lines.append(tuple(row * size + col for col in range(size)))
    for col in range(size):
        lines.append(tuple(row * size + col for row in range(size)))
    lines.append(tuple(i * size + i for i in range(size)))
    lines.append(tuple(i * size + (size - 1 - i) for i in range(size)))
    # A 1x1 board yields the same single-cell line four times.
    return tuple(dict.fromkeys(lines))


__all__ = [
    "DEFAULT_BOARD_SIZE",
    "DRAW_VALUE",
    "EMPTY",
    "LOSS_VALUE",
    "MAX_BOARD_SIZE",
    "MAX_SEARCH_CELLS",
    "MIN_BOARD_SIZE",
    "PLAYER_COUNT",
    "PLAYER_MARKS",
    "WIN_VALUE",
    "is_supported_size",
    "winning_lines",
]
