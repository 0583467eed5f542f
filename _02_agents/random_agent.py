"""Uniform random baseline agent."""
from __future__ import annotations

import random
from typing import Optional, Sequence

from _01_simulator import actions, state
from .base import Agent, ensure_legal


class RandomAgent(Agent):
    """Agent that picks uniformly among the empty cells."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def select_action(self, game_state: state.State, legal: Sequence[actions.Move]) -> actions.Move:
        del game_state  # unused
        if not legal:
            raise RuntimeError("RandomAgent received no legal moves")
        return ensure_legal(self._rng.choice(list(legal)), legal)


__all__ = ["RandomAgent"]
