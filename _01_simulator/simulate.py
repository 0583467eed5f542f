"""Game loop entry points."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence, Tuple

from . import actions, engine, rules, state
from .exceptions import InvalidMoveError

AgentFn = Callable[[state.State, Sequence[actions.Move]], actions.Move]

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    games: int = 1
    board_size: int = rules.DEFAULT_BOARD_SIZE
    starting_player: int = 0
    alternate_starting: bool = False
    agent_a: Optional[AgentFn] = None
    agent_b: Optional[AgentFn] = None


def new_game(size: int = rules.DEFAULT_BOARD_SIZE, *, starting_player: int = 0) -> state.State:
    """Create an empty board."""

    return state.initial_state(size=size, starting_player=starting_player)


def legal_actions(game_state: state.State, player: int) -> Tuple[actions.Move, ...]:
    """Expose the engine legal actions as a tuple for agent consumption."""

    return tuple(engine.legal_actions(game_state, player))


def apply(game_state: state.State, move: actions.Move) -> state.State:
    """Apply a move using the engine step function."""

    return engine.step(game_state, move)


def is_terminal(game_state: state.State) -> bool:
    """Proxy to the engine terminal check."""

    return engine.is_terminal(game_state)


def score(game_state: state.State) -> Tuple[int, ...]:
    """Return per-player utilities for the finished game."""

    return engine.score(game_state)


def run(config: SimulationConfig) -> Iterator[state.State]:
    """Run one or more games according to the provided configuration.

    ``agent_a`` always plays player 0 (X) and ``agent_b`` player 1 (O).
    Agents default to the first legal move when not supplied. With
    ``alternate_starting`` the opening player switches every game.
    """

    if config.games < 1:
        raise ValueError("Number of games must be at least 1")

    agents: Tuple[AgentFn, AgentFn] = (
        config.agent_a or _default_agent,
        config.agent_b or _default_agent,
    )

    for offset in range(config.games):
        starting = config.starting_player
        if config.alternate_starting and offset % 2 == 1:
            starting = state.other_player(starting)
        game = new_game(config.board_size, starting_player=starting)
        yield play_game(game, agents)


def play_game(game: state.State, agents: Tuple[AgentFn, AgentFn]) -> state.State:
    """Play a game to the end and return the final state."""

    current = game
    while not engine.is_terminal(current):
        player = current.active_player
        legal = legal_actions(current, player)
        move = agents[player](current, legal)
        if move not in legal:
            raise InvalidMoveError(f"Agent for player {player} chose illegal move {move}")
        logger.debug("Player %d plays %s", player, move)
        current = apply(current, move)
    return current


def _default_agent(game_state: state.State, legal: Sequence[actions.Move]) -> actions.Move:
    return legal[0]


__all__ = [
    "AgentFn",
    "SimulationConfig",
    "apply",
    "is_terminal",
    "legal_actions",
    "new_game",
    "play_game",
    "run",
    "score",
]
