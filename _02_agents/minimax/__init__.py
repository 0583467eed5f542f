"""Exhaustive minimax search for tic-tac-toe.

The tree builder enumerates every continuation, the evaluator backs up
terminal utilities, and the selector reads the root's children to pick a move.
"""

from .agent import MinimaxAgent
from .builder import build, build_tree
from .evaluator import evaluate, evaluate_tree
from .node import GameTree, GameTreeNode, Role
from .selector import SearchResult, analyze_position, choose_move, search, select_move

__all__ = [
    "GameTree",
    "GameTreeNode",
    "MinimaxAgent",
    "Role",
    "SearchResult",
    "analyze_position",
    "build",
    "build_tree",
    "choose_move",
    "evaluate",
    "evaluate_tree",
    "search",
    "select_move",
]
