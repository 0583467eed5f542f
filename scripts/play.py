#!/usr/bin/env python
"""Play tic-tac-toe against the minimax agent, or watch agents play.

Usage:
    python scripts/play.py
    python scripts/play.py --human o
    python scripts/play.py --player-x minimax --player-o random --games 10

Moves are typed as "row col" (zero-based), e.g. "1 1" for the centre.

Examples:
    # You are X, minimax is O (default config)
    python scripts/play.py --config configs/default.yaml

    # Let minimax open as X against you
    python scripts/play.py --human o

    # Watch two perfect players draw
    python scripts/play.py --player-x minimax --player-o minimax
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from typing import TYPE_CHECKING, Any

from _01_simulator import actions, formatting, rules
from _01_simulator.logging_config import setup_logging
from _02_agents.base import Agent
from _03_arena import MatchConfig, create_agent, load_config_from_yaml, merge_overrides, play_match

if TYPE_CHECKING:
    from collections.abc import Sequence

    from _01_simulator.state import State

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent.parent / "configs" / "default.yaml"


class HumanAgent(Agent):
    """Interactive human player agent."""

    @property
    def name(self) -> str:
        return "Human"

    def select_action(self, game_state: State, legal_actions: Sequence[actions.Move]) -> actions.Move:
        """Prompt the human player for a move.

        Args:
            game_state: Current game state.
            legal_actions: Empty cells.

        Returns:
            Selected move.
        """
        print()
        print(formatting.render_board(game_state))
        print(f"\n{game_state.mark} to move")

        while True:
            try:
                choice = input("Enter row and column: ").replace(",", " ").split()
                if len(choice) != 2:
                    print("Please enter two numbers, e.g. '1 1'")
                    continue
                move = actions.Move(int(choice[0]), int(choice[1]))
                if move in legal_actions:
                    return move
                print(f"{formatting.move_label(move)} is not an empty cell")
            except ValueError:
                print("Invalid input. Please enter two numbers.")
            except (EOFError, KeyboardInterrupt):
                print("\nGame interrupted by user.")
                sys.exit(0)


def build_agent(name: str, seed: int | None) -> Agent:
    if name == "human":
        return HumanAgent()
    return create_agent(name, seed)


def parse_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect explicitly set command-line values as config overrides."""
    overrides: dict[str, Any] = {
        "board_size": args.size,
        "games": args.games,
        "player_x": args.player_x,
        "player_o": args.player_o,
        "seed": args.seed,
    }
    if args.human == "x":
        overrides.update(player_x="human", player_o=args.player_o or "minimax")
    elif args.human == "o":
        overrides.update(player_x=args.player_x or "minimax", player_o="human")
    if args.alternate:
        overrides["alternate_starting"] = True
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


def main() -> int:
    """Interactive play CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against an exhaustive minimax agent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", type=str, default=None, help="Path to YAML match config")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=f"Board size ({rules.MIN_BOARD_SIZE}-{rules.MAX_BOARD_SIZE})",
    )
    parser.add_argument("--human", choices=["x", "o"], default=None, help="Play as X or O yourself")
    parser.add_argument("--player-x", type=str, default=None, help="Agent for X (minimax, first, random, human)")
    parser.add_argument("--player-o", type=str, default=None, help="Agent for O (minimax, first, random, human)")
    parser.add_argument("--games", type=int, default=None, help="Number of games to play")
    parser.add_argument("--alternate", action="store_true", help="Swap the opening player every game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random agent")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    try:
        config_path = args.config or DEFAULT_CONFIG
        config_dict = load_config_from_yaml(config_path) if Path(config_path).exists() else {}
        config = MatchConfig.from_dict(merge_overrides(config_dict, parse_overrides(args)))
        config.validate()

        setup_logging(config.log_level, format_json=config.log_format == "json")
        logger.info(f"Loaded configuration from {config_path}")

        agents = (build_agent(config.player_x, config.seed), build_agent(config.player_o, config.seed))
        summary = play_match(config, agents)

        for number, record in enumerate(summary.games, start=1):
            print("\n" + "=" * 40)
            print(f"Game {number}: {record.outcome}")
            print(formatting.render_board(record.final_state))
        print("\n" + "=" * 40)
        print(f"{agents[0].name} (X) wins: {summary.x_wins}")
        print(f"{agents[1].name} (O) wins: {summary.o_wins}")
        print(f"Draws: {summary.draws}")
        return 0

    except KeyboardInterrupt:
        logger.info("Play interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Play failed with error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
