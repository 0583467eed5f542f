"""Tests for game tree construction and minimax evaluation."""

import pytest

from _01_simulator import actions, engine, rules, state
from _01_simulator.exceptions import NonTerminalStateError, SearchSpaceTooLargeError
from _02_agents.minimax import GameTreeNode, Role, build, build_tree, evaluate, evaluate_tree


def leaves(node: GameTreeNode) -> list[GameTreeNode]:
    return [n for n in node.iter_nodes() if n.is_leaf]


class TestRole:
    def test_flip_alternates(self):
        assert Role.MAXIMIZER.flip() is Role.MINIMIZER
        assert Role.MINIMIZER.flip() is Role.MAXIMIZER


class TestBuilder:
    def test_terminal_state_builds_single_leaf(self):
        won = state.from_rows(["XXX", "OO.", "..."])
        root = build(won, Role.MAXIMIZER)

        assert root.is_leaf
        assert root.move is None
        assert root.count_nodes() == 1

    def test_two_empty_cells_without_win(self):
        game_state = state.from_rows(["XXO", "OOX", "X.."])
        root = build(game_state, Role.MAXIMIZER)

        assert [child.move for child in root.children] == [actions.Move(2, 1), actions.Move(2, 2)]
        for child in root.children:
            assert len(child.children) <= 1
        assert root.count_nodes() == 5
        assert root.depth() == 2

    def test_children_alternate_role_and_player(self):
        root = build(state.from_rows(["XO.", "...", "..."]), Role.MAXIMIZER)

        for node in root.iter_nodes():
            for child in node.children:
                assert child.role is node.role.flip()
                assert child.state.active_player == state.other_player(node.state.active_player)

    def test_each_child_adds_exactly_one_mark(self):
        root = build(state.from_rows(["X..", ".O.", "..."]), Role.MAXIMIZER)

        for node in root.iter_nodes():
            for child in node.children:
                changed = [
                    index
                    for index, (before, after) in enumerate(zip(node.state.cells, child.state.cells))
                    if before != after
                ]
                assert len(changed) == 1
                index = changed[0]
                assert node.state.cells[index] == rules.EMPTY
                assert child.state.cells[index] == node.state.mark
                assert child.move == actions.Move(index // 3, index % 3)

    def test_input_state_untouched(self):
        game_state = state.from_rows(["X..", ".O.", "..."])
        before = game_state.cells
        build(game_state, Role.MAXIMIZER)
        assert game_state.cells == before

    def test_single_cell_board(self):
        root = build(state.initial_state(size=1), Role.MAXIMIZER)

        assert root.count_nodes() == 2
        assert engine.winner(root.children[0].state) == 0

    def test_full_two_by_two_tree(self):
        # X always completes a line with its second mark on a 2x2 board.
        root = build(state.initial_state(size=2), Role.MAXIMIZER)

        assert root.count_nodes() == 1 + 4 + 4 * 3 + 4 * 3 * 2
        assert len(leaves(root)) == 24
        assert root.depth() == 3

    def test_every_leaf_is_terminal(self):
        root = build(state.from_rows(["X..", "...", "..."]), Role.MINIMIZER)
        assert all(engine.is_terminal(leaf.state) for leaf in leaves(root))

    def test_oversized_search_rejected(self, monkeypatch):
        monkeypatch.setattr(rules, "MAX_SEARCH_CELLS", 4)
        with pytest.raises(SearchSpaceTooLargeError, match="at most 4 empty cells"):
            build(state.initial_state(), Role.MAXIMIZER)

    def test_build_tree_stores_perspective(self):
        game_state = state.from_rows(["XO.", "...", "..."])
        tree = build_tree(game_state, perspective=1)

        assert tree.perspective == 1
        assert tree.root.role is Role.MAXIMIZER
        assert tree.root.state.active_player == 1
        assert not tree.evaluated


class TestEvaluator:
    def test_single_winning_cell_propagates_to_root(self):
        game_state = state.from_rows(["XOX", "OXO", "OX."])
        root = build(game_state, Role.MAXIMIZER)
        score = evaluate(root, perspective=0)

        assert len(root.children) == 1
        leaf = root.children[0]
        assert leaf.move == actions.Move(2, 2)
        assert leaf.score == engine.utility(leaf.state, 0) == rules.WIN_VALUE
        assert root.score == leaf.score == score

    def test_every_node_scored(self):
        root = build(state.from_rows(["X..", ".O.", "..."]), Role.MAXIMIZER)
        evaluate(root, perspective=0)
        assert all(node.score is not None for node in root.iter_nodes())

    def test_max_and_min_backup(self):
        root = build(state.from_rows(["X..", ".O.", "..X"]), Role.MAXIMIZER)
        evaluate(root, perspective=1)

        for node in root.iter_nodes():
            if node.is_leaf:
                assert node.score == engine.utility(node.state, 1)
                continue
            child_scores = [child.score for child in node.children]
            if node.role is Role.MAXIMIZER:
                assert node.score == max(child_scores)
            else:
                assert node.score == min(child_scores)

    def test_leaves_scored_for_top_level_player_not_node_role(self):
        # O's only move completes the anti-diagonal, a loss from X's side.
        game_state = state.from_rows(["XX.", "OOX", "OXX"], active_player=1)
        root = build(game_state, Role.MINIMIZER)
        evaluate(root, perspective=0)

        (child,) = root.children
        assert child.move == actions.Move(0, 2)
        assert child.role is Role.MAXIMIZER
        assert child.score == engine.utility(child.state, 0) == rules.LOSS_VALUE
        assert root.score == child.score

    def test_two_by_two_is_first_player_win(self):
        tree = build_tree(state.initial_state(size=2))
        assert evaluate_tree(tree) == rules.WIN_VALUE + 1

    def test_childless_non_terminal_node_rejected(self):
        node = GameTreeNode(state=state.initial_state(), role=Role.MAXIMIZER)
        with pytest.raises(NonTerminalStateError):
            evaluate(node, perspective=0)
