"""Agent protocol shared by the minimax player, the baselines and humans."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from _01_simulator import actions, state
from _01_simulator.exceptions import InvalidMoveError

# Anything that maps (position, empty cells) to one of those cells can play.
AgentFn = Callable[[state.State, Sequence[actions.Move]], actions.Move]


class Agent(ABC):
    """Tic-tac-toe player.

    Subclasses implement :meth:`select_action`. Calling the agent runs it and
    checks the answer is one of the offered cells, so a buggy agent fails at
    the point it picks a bad cell instead of later in the game loop.
    """

    @abstractmethod
    def select_action(self, game_state: state.State, legal_actions: Sequence[actions.Move]) -> actions.Move:
        """Pick the cell to mark for ``game_state.active_player``.

        ``legal_actions`` lists the empty cells in row-major order and is
        never empty while the game is running.
        """

    def __call__(self, game_state: state.State, legal_actions: Sequence[actions.Move]) -> actions.Move:
        return ensure_legal(self.select_action(game_state, legal_actions), legal_actions)

    @property
    def name(self) -> str:
        return self.__class__.__name__


def ensure_legal(move: actions.Move, legal: Sequence[actions.Move]) -> actions.Move:
    """Return ``move`` unchanged, or raise if it is not among ``legal``."""

    if move not in legal:
        raise InvalidMoveError(f"Move {move} is not legal here")
    return move


__all__ = ["Agent", "AgentFn", "ensure_legal"]
