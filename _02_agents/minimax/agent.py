"""Agent wrapper around the exhaustive minimax move selector."""

from __future__ import annotations

from typing import TYPE_CHECKING

from _01_simulator import actions, state
from _02_agents.base import Agent, ensure_legal

from .selector import SearchResult, search

if TYPE_CHECKING:
    from collections.abc import Sequence


class MinimaxAgent(Agent):
    """Perfect-play agent that searches the full game tree every turn.

    Nothing is cached between turns: each decision builds, evaluates and
    discards its own tree.
    """

    def __init__(self) -> None:
        self._last_result: SearchResult | None = None

    @property
    def name(self) -> str:
        return "Minimax"

    def select_action(
        self,
        game_state: state.State,
        legal_actions: Sequence[actions.Move],
    ) -> actions.Move:
        """Select the move with the best backed-up score for the player to move.

        Args:
            game_state: Current, non-terminal game state.
            legal_actions: Empty cells available to the player to move.

        Returns:
            The chosen move.
        """
        result = search(game_state, game_state.active_player)
        self._last_result = result
        return ensure_legal(result.move, legal_actions)

    def get_last_result(self) -> SearchResult | None:
        """Return the search result behind the most recent move."""
        return self._last_result


__all__ = ["MinimaxAgent"]
