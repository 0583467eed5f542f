"""Immutable board state representation and helpers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from . import actions, rules
from .exceptions import InvalidBoardError, InvalidMoveError, InvalidPlayerError, OccupiedCellError

CellTuple = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class State:
    """Full immutable snapshot of the board and the player to move.

    ``cells`` holds ``size * size`` symbols in row-major order, each either
    :data:`rules.EMPTY` or one of :data:`rules.PLAYER_MARKS`.
    """

    size: int
    cells: CellTuple
    active_player: int = 0

    def __post_init__(self) -> None:
        if not rules.is_supported_size(self.size):
            raise InvalidBoardError(
                f"Board size {self.size} outside [{rules.MIN_BOARD_SIZE}, {rules.MAX_BOARD_SIZE}]"
            )
        if len(self.cells) != self.size * self.size:
            raise InvalidBoardError(f"Expected {self.size * self.size} cells, got {len(self.cells)}")
        for symbol in self.cells:
            if symbol != rules.EMPTY and symbol not in rules.PLAYER_MARKS:
                raise InvalidBoardError(f"Unknown cell symbol: {symbol!r}")
        _validate_player_index(self.active_player)

    def cell(self, row: int, col: int) -> str:
        return self.cells[row * self.size + col]

    @property
    def rows(self) -> Tuple[CellTuple, ...]:
        return tuple(self.cells[r * self.size : (r + 1) * self.size] for r in range(self.size))

    @property
    def mark(self) -> str:
        """Mark of the player to move."""
        return rules.PLAYER_MARKS[self.active_player]

    def next_player(self) -> int:
        return (self.active_player + 1) % rules.PLAYER_COUNT


def initial_state(size: int = rules.DEFAULT_BOARD_SIZE, starting_player: int = 0) -> State:
    """Create an empty board with ``starting_player`` to move."""

    return State(size=size, cells=(rules.EMPTY,) * (size * size), active_player=starting_player)


def from_rows(rows: Sequence[str], active_player: Optional[int] = None) -> State:
    """Build a state from row strings such as ``("XO.", "...", "..X")``.

    When ``active_player`` is omitted it is inferred from the mark counts,
    assuming player 0 moved first.
    """

    size = len(rows)
    for row in rows:
        if len(row) != size:
            raise InvalidBoardError("Board rows must form a square")
    cells = tuple(symbol for row in rows for symbol in row)

    if active_player is None:
        first = cells.count(rules.PLAYER_MARKS[0])
        second = cells.count(rules.PLAYER_MARKS[1])
        if first == second:
            active_player = 0
        elif first == second + 1:
            active_player = 1
        else:
            raise InvalidBoardError(
                f"Cannot infer player to move from {first} {rules.PLAYER_MARKS[0]} "
                f"and {second} {rules.PLAYER_MARKS[1]} marks"
            )

    return State(size=size, cells=cells, active_player=active_player)


def mark_for(player: int) -> str:
    """Return the board symbol used by ``player``."""

    _validate_player_index(player)
    return rules.PLAYER_MARKS[player]


def other_player(player: int) -> int:
    """Return the opponent of ``player``."""

    _validate_player_index(player)
    return (player + 1) % rules.PLAYER_COUNT


def empty_cells(game_state: State) -> Tuple[actions.Move, ...]:
    """Return every unoccupied cell in row-major order."""

    size = game_state.size
    return tuple(
        actions.Move(index // size, index % size)
        for index, symbol in enumerate(game_state.cells)
        if symbol == rules.EMPTY
    )


def place(game_state: State, row: int, col: int, player: int) -> State:
    """Return a copy of the state with ``player``'s mark on ``(row, col)``.

    The player to move is left unchanged; pair with :func:`set_active_player`
    to pass the turn.
    """

    size = game_state.size
    if not (0 <= row < size and 0 <= col < size):
        raise InvalidMoveError(f"Position ({row}, {col}) is off a {size}x{size} board")

    index = row * size + col
    current = game_state.cells[index]
    if current != rules.EMPTY:
        raise OccupiedCellError(row, col, current)

    mark = mark_for(player)
    cells = game_state.cells[:index] + (mark,) + game_state.cells[index + 1 :]
    return replace(game_state, cells=cells)


def set_active_player(game_state: State, player: int) -> State:
    """Return a copy of the state with ``player`` to move."""

    if player == game_state.active_player:
        return game_state
    return replace(game_state, active_player=player)


def _validate_player_index(player: int) -> None:
    if not (0 <= player < rules.PLAYER_COUNT):
        raise InvalidPlayerError(player, rules.PLAYER_COUNT)


__all__ = [
    "CellTuple",
    "State",
    "empty_cells",
    "from_rows",
    "initial_state",
    "mark_for",
    "other_player",
    "place",
    "set_active_player",
]
