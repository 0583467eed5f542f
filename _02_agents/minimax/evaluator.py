"""Minimax evaluation of a fully built game tree.

Leaves take the terminal utility of their state for the top-level player;
interior nodes back up the maximum (MAXIMIZER) or minimum (MINIMIZER) of
their children. Every node is visited and annotated: there is no pruning,
no transposition cache and no depth limit.
"""

from __future__ import annotations

from _01_simulator import engine

from .node import GameTree, GameTreeNode, Role


def evaluate(node: GameTreeNode, perspective: int) -> int:
    """Score every node below ``node`` and return the backed-up root score.

    Args:
        node: Root of the (sub)tree to evaluate.
        perspective: Player whose win/loss/draw utilities score the leaves.
            This is the top-level acting player, not the role of any node.

    Returns:
        The minimax value of ``node``.
    """
    # Post-order walk: a node is scored the second time it is popped,
    # after all of its children have been scored.
    stack: list[tuple[GameTreeNode, bool]] = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        if current.is_leaf:
            current.score = engine.utility(current.state, perspective)
            continue
        if not children_done:
            stack.append((current, True))
            stack.extend((child, False) for child in current.children)
            continue

        scores = [child.score for child in current.children]
        current.score = max(scores) if current.role is Role.MAXIMIZER else min(scores)

    return node.score


def evaluate_tree(tree: GameTree) -> int:
    """Evaluate a tree from the perspective stored on it."""
    return evaluate(tree.root, tree.perspective)


__all__ = ["evaluate", "evaluate_tree"]
