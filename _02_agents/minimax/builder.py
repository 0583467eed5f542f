"""Game tree construction.

The builder enumerates every legal continuation of a position, alternating
the acting player and the node role at each ply, until each branch reaches a
terminal state. Expansion uses an explicit stack of pending nodes so the
Python call stack stays flat however many cells remain.
"""

from __future__ import annotations

import logging

from _01_simulator import engine, rules, state
from _01_simulator.exceptions import SearchSpaceTooLargeError

from .node import GameTree, GameTreeNode, Role

logger = logging.getLogger(__name__)


def build(game_state: state.State, role: Role = Role.MAXIMIZER) -> GameTreeNode:
    """Materialize the full game tree rooted at ``game_state``.

    Args:
        game_state: Position to expand; the player to move places the next mark.
        role: Objective of the root node. Children alternate from there.

    Returns:
        Root node of the tree. Children appear in row-major move order.

    Raises:
        SearchSpaceTooLargeError: If more empty cells remain than
            ``rules.MAX_SEARCH_CELLS``.
    """
    remaining = game_state.cells.count(rules.EMPTY)
    if remaining > rules.MAX_SEARCH_CELLS:
        raise SearchSpaceTooLargeError(remaining, rules.MAX_SEARCH_CELLS)

    root = GameTreeNode(state=game_state, role=role)
    pending = [root]
    while pending:
        node = pending.pop()
        if engine.is_terminal(node.state):
            continue

        player = node.state.active_player
        opponent = state.other_player(player)
        child_role = node.role.flip()
        for move in state.empty_cells(node.state):
            placed = state.place(node.state, move.row, move.col, player)
            child = GameTreeNode(
                state=state.set_active_player(placed, opponent),
                role=child_role,
                move=move,
            )
            node.children.append(child)
            pending.append(child)

    return root


def build_tree(game_state: state.State, perspective: int | None = None) -> GameTree:
    """Build a tree whose root maximizes for ``perspective``.

    ``perspective`` defaults to the player to move. When it names the other
    player the position is re-stamped so that ``perspective`` moves first.
    """
    if perspective is None:
        perspective = game_state.active_player
    root_state = state.set_active_player(game_state, perspective)

    root = build(root_state, Role.MAXIMIZER)
    logger.debug("Built game tree for player %d with %d root children", perspective, len(root.children))
    return GameTree(root=root, perspective=perspective)


__all__ = ["build", "build_tree"]
