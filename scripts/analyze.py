#!/usr/bin/env python
"""Show the minimax score of every legal move in a position.

Usage:
    python scripts/analyze.py XX. OO. ...
    python scripts/analyze.py X.. .O. ... --player x

Rows are given top to bottom using X, O and "." for empty cells. Scores are
from the acting player's point of view: positive forced win (larger is
faster), 0 draw, negative forced loss (more negative is sooner).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

from _01_simulator import action_space, engine, formatting, rules, state
from _01_simulator.exceptions import TicTacToeError
from _01_simulator.logging_config import setup_logging
from _02_agents.minimax import search

logger = logging.getLogger(__name__)


def format_scores(scores: np.ndarray) -> str:
    """Render a score grid, marking unavailable cells with '#'."""
    size = scores.shape[0]
    lines = ["     " + " ".join(f"{col:>3}" for col in range(size))]
    for row in range(size):
        cells = ["  #" if np.isnan(value) else f"{int(value):>3}" for value in scores[row]]
        lines.append(f"{row:>3}  " + " ".join(cells))
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Score every legal move with exhaustive minimax",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("rows", nargs="+", help="Board rows, top to bottom")
    parser.add_argument(
        "--player",
        choices=["x", "o"],
        default=None,
        help="Acting player (default: inferred from mark counts)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    setup_logging("DEBUG" if args.verbose else "WARNING")

    try:
        player = None if args.player is None else rules.PLAYER_MARKS.index(args.player.upper())
        position = state.from_rows([row.upper() for row in args.rows], active_player=player)
        print(formatting.render_board(position))
        print()

        if engine.is_terminal(position):
            print(f"Game over: {formatting.outcome_label(position)}")
            return 0

        result = search(position, position.active_player)
        grid = action_space.score_grid(result.child_scores, position.size)
        print(f"Scores for {position.mark} ({result.nodes_built} nodes, {result.time_ms:.1f} ms):")
        print(format_scores(grid))
        print(f"\nBest move: {formatting.move_label(result.move)}")
        return 0

    except TicTacToeError as e:
        logger.error(f"Cannot analyze position: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
