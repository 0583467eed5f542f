"""Game tree data model for exhaustive minimax search.

A tree is a strict ownership hierarchy: every node owns its children and no
node points back at its parent. Trees are built fresh for each decision and
dropped once the move is chosen.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from _01_simulator import actions, state


class Role(Enum):
    """Objective a node optimizes when backing up its children's scores."""

    MAXIMIZER = "max"
    MINIMIZER = "min"

    def flip(self) -> Role:
        return Role.MINIMIZER if self is Role.MAXIMIZER else Role.MAXIMIZER


@dataclass(slots=True)
class GameTreeNode:
    """One reachable state in the game tree.

    Attributes:
        state: Board snapshot at this node; never mutated after creation.
        role: Whether this node takes the max or the min of its children.
        children: One child per legal move, in row-major move order.
        score: Backed-up minimax value, ``None`` until the tree is evaluated.
        move: Placement that produced this node from its parent (``None`` at the root).
    """

    state: state.State
    role: Role
    children: list[GameTreeNode] = field(default_factory=list)
    score: int | None = None
    move: actions.Move | None = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self) -> Iterator[GameTreeNode]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count_nodes(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def depth(self) -> int:
        """Length of the longest path from this node down to a leaf."""
        deepest = 0
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest


@dataclass(slots=True)
class GameTree:
    """Root node plus the player whose outcomes the leaves are scored for."""

    root: GameTreeNode
    perspective: int

    @property
    def evaluated(self) -> bool:
        return self.root.score is not None


__all__ = ["GameTree", "GameTreeNode", "Role"]
