"""Match runner for pitting agents against each other."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from _01_simulator import actions, engine, formatting, rules, simulate, state
from _02_agents.base import Agent

from .config import MatchConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Result of a single game."""

    starting_player: int
    moves: list[actions.Move]
    final_state: state.State
    winner: int | None = None

    @property
    def outcome(self) -> str:
        return formatting.outcome_label(self.final_state)


@dataclass
class MatchSummary:
    """Tally of a series of games."""

    player_x: str
    player_o: str
    games: list[GameRecord] = field(default_factory=list)

    @property
    def x_wins(self) -> int:
        return sum(1 for game in self.games if game.winner == 0)

    @property
    def o_wins(self) -> int:
        return sum(1 for game in self.games if game.winner == 1)

    @property
    def draws(self) -> int:
        return sum(1 for game in self.games if game.winner is None)


class _RecordingAgent:
    """Forward to an agent and remember every move it makes."""

    def __init__(self, agent: simulate.AgentFn, moves: list[actions.Move]) -> None:
        self._agent = agent
        self._moves = moves

    def __call__(self, game_state: state.State, legal: Sequence[actions.Move]) -> actions.Move:
        move = self._agent(game_state, legal)
        self._moves.append(move)
        return move


def create_agent(name: str, seed: int | None = None) -> Agent:
    """Create an agent by name.

    Supported names:
    - "minimax": exhaustive minimax (perfect play)
    - "first": first empty cell in row-major order
    - "random": uniform random empty cell, seeded with ``seed``

    Raises:
        ValueError: If the name is not recognized.
    """
    from _02_agents.first import FirstLegalAgent
    from _02_agents.minimax import MinimaxAgent
    from _02_agents.random_agent import RandomAgent

    name_lower = name.lower().strip()
    if name_lower == "minimax":
        return MinimaxAgent()
    elif name_lower == "first":
        return FirstLegalAgent()
    elif name_lower == "random":
        return RandomAgent(seed=seed)
    raise ValueError(f"Unknown agent: {name}. Supported: minimax, first, random")


def play_match(
    config: MatchConfig,
    agents: tuple[simulate.AgentFn, simulate.AgentFn] | None = None,
) -> MatchSummary:
    """Play ``config.games`` games and tally the results.

    Args:
        config: Match settings; validated before any game starts.
        agents: Agents for X and O. Created from ``config.player_x`` and
            ``config.player_o`` when omitted.
            A "human" player cannot be created here and must be passed in.

    Returns:
        MatchSummary with one GameRecord per game.

    Raises:
        ValueError: If the config is invalid, or names a human player while
            ``agents`` is omitted.
    """
    config.validate()
    if agents is None:
        if "human" in (config.player_x, config.player_o):
            raise ValueError("Human players need interactive agents; pass them with agents=")
        agents = (
            create_agent(config.player_x, config.seed),
            create_agent(config.player_o, config.seed),
        )

    summary = MatchSummary(player_x=config.player_x, player_o=config.player_o)
    starting = config.starting_player
    for game_number in range(1, config.games + 1):
        moves: list[actions.Move] = []
        recorders = (_RecordingAgent(agents[0], moves), _RecordingAgent(agents[1], moves))
        game = simulate.new_game(config.board_size, starting_player=starting)
        final = simulate.play_game(game, recorders)

        record = GameRecord(
            starting_player=starting,
            moves=moves,
            final_state=final,
            winner=engine.winner(final),
        )
        summary.games.append(record)
        logger.info(
            "Game %d/%d (%s opens): %s after %d moves",
            game_number,
            config.games,
            rules.PLAYER_MARKS[starting],
            record.outcome,
            len(moves),
        )

        if config.alternate_starting:
            starting = state.other_player(starting)

    logger.info(
        "Match %s vs %s: X %d, O %d, draws %d",
        summary.player_x,
        summary.player_o,
        summary.x_wins,
        summary.o_wins,
        summary.draws,
    )
    return summary


__all__ = ["GameRecord", "MatchSummary", "create_agent", "play_match"]
