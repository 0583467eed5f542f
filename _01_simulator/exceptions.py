"""Custom exception classes for the tic-tac-toe simulator."""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base exception for all simulator and search errors."""


class InvalidPlayerError(TicTacToeError):
    """Raised when an invalid player index is provided."""

    def __init__(self, player: int, max_players: int) -> None:
        self.player = player
        self.max_players = max_players
        super().__init__(f"Invalid player index {player}. Must be in range [0, {max_players}).")


class InvalidBoardError(TicTacToeError):
    """Raised when a board description cannot form a valid state."""


class InvalidMoveError(TicTacToeError):
    """Raised when a move cannot be applied to the board."""


class OccupiedCellError(InvalidMoveError):
    """Raised when a mark is placed on a cell that already holds one."""

    def __init__(self, row: int, col: int, mark: str) -> None:
        self.row = row
        self.col = col
        self.mark = mark
        super().__init__(f"Cell ({row}, {col}) is already occupied by {mark}")


class GameAlreadyTerminalError(TicTacToeError):
    """Raised when trying to move on a game that has already ended."""

    def __init__(self) -> None:
        super().__init__("Cannot move; game already finished")


class NonTerminalStateError(TicTacToeError):
    """Raised when a terminal utility is requested for an unfinished game."""

    def __init__(self) -> None:
        super().__init__("Utility is only defined for terminal states")


class SearchSpaceTooLargeError(TicTacToeError):
    """Raised when a position has too many empty cells for exhaustive search."""

    def __init__(self, empty_cells: int, limit: int) -> None:
        self.empty_cells = empty_cells
        self.limit = limit
        super().__init__(f"Exhaustive search supports at most {limit} empty cells, got {empty_cells}")


__all__ = [
    "GameAlreadyTerminalError",
    "InvalidBoardError",
    "InvalidMoveError",
    "InvalidPlayerError",
    "NonTerminalStateError",
    "OccupiedCellError",
    "SearchSpaceTooLargeError",
    "TicTacToeError",
]
