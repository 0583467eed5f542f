from _01_simulator import actions, engine, formatting, simulate, state
from _02_agents import FirstLegalAgent


def test_new_game_matches_state_initializer():
    assert simulate.new_game(3) == state.initial_state(3)
    assert simulate.new_game(2, starting_player=1).active_player == 1


def test_legal_actions_align_with_engine():
    game = simulate.new_game()
    expected = tuple(engine.legal_actions(game, game.active_player))
    assert simulate.legal_actions(game, game.active_player) == expected


def test_apply_advances_state():
    game = simulate.new_game()
    next_state = simulate.apply(game, actions.Move(0, 0))
    assert next_state != game
    assert next_state.active_player == 1


def test_default_agents_fill_row_major():
    (final,) = simulate.run(simulate.SimulationConfig())

    # X takes 0, 2, 4, 6 and completes the anti-diagonal on its fourth move.
    assert formatting.render_board(final).splitlines()[1:] == [
        "0 X O X",
        "1 O X O",
        "2 X . .",
    ]
    assert simulate.is_terminal(final)
    assert simulate.score(final) == (3, -3)


def test_alternate_starting_swaps_opener():
    config = simulate.SimulationConfig(games=2, board_size=1, alternate_starting=True)
    finals = list(simulate.run(config))

    assert [engine.winner(final) for final in finals] == [0, 1]


def test_run_with_scripted_agents():
    agent_a = _recording_agent([actions.Move(1, 1), actions.Move(0, 0)])
    agent_b = _recording_agent([actions.Move(0, 2), actions.Move(2, 0)])
    config = simulate.SimulationConfig(agent_a=agent_a, agent_b=agent_b)

    (final,) = list(simulate.run(config))

    assert agent_a.history[:2] == [actions.Move(1, 1), actions.Move(0, 0)]
    assert agent_b.history[:2] == [actions.Move(0, 2), actions.Move(2, 0)]
    assert simulate.is_terminal(final)


def test_outcome_labels():
    assert formatting.outcome_label(state.initial_state()) == "In progress"
    assert formatting.outcome_label(state.from_rows(["XOX", "XOO", "OXX"])) == "Draw"
    assert formatting.outcome_label(state.from_rows(["OOO", "XX.", "X.."], active_player=0)) == "O wins"
    assert formatting.move_label(actions.Move(2, 1)) == "(2, 1)"


class _recording_agent:
    def __init__(self, script):
        self._script = list(script)
        self._fallback = FirstLegalAgent()
        self.history: list[actions.Move] = []

    def __call__(self, game_state: state.State, legal: tuple[actions.Move, ...]) -> actions.Move:
        if self._script:
            move = self._script.pop(0)
            if move not in legal:
                raise AssertionError(f"Scripted move {move} is not legal")
        else:
            move = self._fallback(game_state, legal)
        self.history.append(move)
        return move
