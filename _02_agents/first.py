"""Row-major baseline: mark the top-left-most empty cell."""
from __future__ import annotations

from typing import Sequence

from _01_simulator import actions, state
from _01_simulator.exceptions import GameAlreadyTerminalError

from .base import Agent


class FirstLegalAgent(Agent):
    """Always marks the first empty cell in row-major order, whatever order it is offered in."""

    @property
    def name(self) -> str:
        return "FirstLegal"

    def select_action(self, game_state: state.State, legal: Sequence[actions.Move]) -> actions.Move:
        if not legal:
            raise GameAlreadyTerminalError()
        # Move orders by (row, col).
        return min(legal)


__all__ = ["FirstLegalAgent"]
