"""Move definitions for the tic-tac-toe engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Move:
    """A mark placement on the cell at ``(row, col)``.

    Moves compare and hash by coordinate value. The dataclass ordering is
    row-major, which is also the order the engine enumerates empty cells in.
    """

    row: int
    col: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


__all__ = ["Move"]
