"""Move selection on top of the exhaustive minimax tree."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from _01_simulator import actions, state
from _01_simulator.exceptions import GameAlreadyTerminalError

from .builder import build_tree
from .evaluator import evaluate_tree

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of one move decision."""
    move: actions.Move
    score: int
    nodes_built: int
    child_scores: dict[actions.Move, int] = field(default_factory=dict)
    time_ms: float = 0.0


def search(game_state: state.State, player: int | None = None) -> SearchResult:
    """Build, evaluate and pick the best root move for ``player``.

    Args:
        game_state: Current board. Must not be terminal.
        player: Acting player; defaults to the player to move in ``game_state``.

    Returns:
        SearchResult with the chosen move and the scores of every root move.

    Raises:
        GameAlreadyTerminalError: If the board admits no move.
    """
    start = time.perf_counter()
    tree = build_tree(game_state, player)
    root_score = evaluate_tree(tree)

    root = tree.root
    if not root.children:
        raise GameAlreadyTerminalError()

    # Strict comparison keeps the first child in row-major order on ties.
    best = root.children[0]
    for child in root.children[1:]:
        if child.score > best.score:
            best = child

    result = SearchResult(
        move=best.move,
        score=best.score,
        nodes_built=root.count_nodes(),
        child_scores={child.move: child.score for child in root.children},
        time_ms=(time.perf_counter() - start) * 1000.0,
    )
    if best.score != root_score:
        raise RuntimeError(f"Root score {root_score} disagrees with best child score {best.score}")

    logger.debug(
        "Player %d: best move %s (score %d) from %d nodes in %.1f ms",
        tree.perspective,
        result.move,
        result.score,
        result.nodes_built,
        result.time_ms,
    )
    return result


def select_move(game_state: state.State, player: int | None = None) -> actions.Move:
    """Return the move with the best guaranteed outcome for ``player``."""
    return search(game_state, player).move


def choose_move(board: state.State, player: int) -> tuple[int, int]:
    """Entry point for turn controllers: the ``(row, col)`` to play."""
    return select_move(board, player).as_tuple()


def analyze_position(game_state: state.State, player: int | None = None) -> dict[actions.Move, int]:
    """Return the backed-up score of every legal move, in row-major order.

    A finished game has no moves to analyze and yields an empty mapping.
    """
    tree = build_tree(game_state, player)
    evaluate_tree(tree)
    return {child.move: child.score for child in tree.root.children}


__all__ = [
    "SearchResult",
    "analyze_position",
    "choose_move",
    "search",
    "select_move",
]
