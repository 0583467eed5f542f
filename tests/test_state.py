import pytest

from _01_simulator import actions, rules, state
from _01_simulator.exceptions import InvalidBoardError, InvalidPlayerError


def test_initial_state_setup():
    game_state = state.initial_state()

    assert game_state.size == rules.DEFAULT_BOARD_SIZE
    assert game_state.active_player == 0
    assert game_state.mark == "X"
    assert game_state.cells == (rules.EMPTY,) * 9
    assert len(state.empty_cells(game_state)) == 9


def test_from_rows_infers_player_to_move():
    x_to_move = state.from_rows(["XO.", "...", "..."])
    o_to_move = state.from_rows(["X..", "...", "..."])

    assert x_to_move.active_player == 0
    assert o_to_move.active_player == 1
    assert o_to_move.cell(0, 0) == "X"
    assert o_to_move.rows[0] == ("X", ".", ".")


def test_from_rows_rejects_impossible_counts():
    with pytest.raises(InvalidBoardError, match="Cannot infer"):
        state.from_rows(["XXX", "...", "..."])


def test_from_rows_accepts_explicit_player():
    game_state = state.from_rows(["XXX", "...", "..."], active_player=1)
    assert game_state.active_player == 1


def test_empty_cells_are_row_major():
    game_state = state.from_rows(["X.O", ".X.", "O.."])
    cells = state.empty_cells(game_state)

    assert cells == (
        actions.Move(0, 1),
        actions.Move(1, 0),
        actions.Move(1, 2),
        actions.Move(2, 1),
        actions.Move(2, 2),
    )
    assert list(cells) == sorted(cells)


def test_place_returns_new_state_without_mutating_input():
    game_state = state.initial_state()
    placed = state.place(game_state, 1, 1, 0)

    assert placed.cell(1, 1) == "X"
    assert game_state.cell(1, 1) == rules.EMPTY
    assert placed.active_player == game_state.active_player


def test_other_player_alternates():
    assert state.other_player(0) == 1
    assert state.other_player(1) == 0
    with pytest.raises(InvalidPlayerError):
        state.other_player(2)


def test_mark_for_players():
    assert state.mark_for(0) == "X"
    assert state.mark_for(1) == "O"


def test_set_active_player_keeps_cells():
    game_state = state.from_rows(["X..", "...", "..."])
    switched = state.set_active_player(game_state, 0)

    assert switched.active_player == 0
    assert switched.cells == game_state.cells
    assert state.set_active_player(switched, 0) is switched


@pytest.mark.parametrize("size", [0, 4])
def test_unsupported_sizes_rejected(size):
    with pytest.raises(InvalidBoardError, match="Board size"):
        state.initial_state(size=size)


def test_unknown_symbol_rejected():
    with pytest.raises(InvalidBoardError, match="Unknown cell symbol"):
        state.State(size=1, cells=("Z",))


def test_states_compare_by_value():
    assert state.from_rows(["X.", ".."]) == state.from_rows(["X.", ".."])
    assert hash(state.initial_state(2)) == hash(state.initial_state(2))
