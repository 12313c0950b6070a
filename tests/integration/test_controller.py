"""
Integration tests: engine driven through the controller-facing adapter.
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_minimax.arena.controller import EngineAgent, GameController, IllegalMoveError
from connect4_minimax.arena.heuristic_opponent import HeuristicAgent, RandomAgent
from connect4_minimax.arena.tournament import engine_vs, make_opponent, run_tournament
from connect4_minimax.config import EngineConfig
from connect4_minimax.engine.minimax import MinimaxEngine
from connect4_minimax.game.connect_four import ConnectFour


class ColumnAgent:
    """Always plays the same column."""

    def __init__(self, column):
        self.column = column
        self.seen = []

    def observe(self, row, column, player, turn):
        self.seen.append((row, column, player, turn))

    def choose_move(self, state, turn):
        return self.column


class TestEngineAgent:
    def test_engine_vs_engine_mirrors_stay_in_sync(self):
        first = MinimaxEngine(EngineConfig(player=1))
        second = MinimaxEngine(EngineConfig(player=-1))
        controller = GameController({1: EngineAgent(first, 2), -1: EngineAgent(second, 2)})

        record = controller.play()

        assert record.winner in (1, -1, 0)
        assert np.array_equal(first.board, record.final_state)
        assert np.array_equal(second.board, record.final_state)
        assert first.turn == second.turn == len(record.moves) + 1

    def test_opening_moves_are_center(self):
        first = MinimaxEngine(EngineConfig(player=1))
        second = MinimaxEngine(EngineConfig(player=-1))
        controller = GameController({1: EngineAgent(first, 2), -1: EngineAgent(second, 2)})

        controller.step()
        controller.step()

        assert controller.moves == [3, 3]
        assert first.last_result.skipped == "opening turn"
        assert second.last_result.skipped == "opening turn"

    def test_engine_stops_a_vertical_stack(self):
        """Player one stacks column 0; the engine must cap it before the fourth disc."""
        engine = MinimaxEngine(EngineConfig(player=-1))
        controller = GameController({1: ColumnAgent(0), -1: EngineAgent(engine, 2)})
        for _ in range(8):
            winner = controller.step()
            assert winner != 1
            if winner is not None:
                break
        assert -1 in controller.state[:, 0]

    def test_observers_get_every_move_with_next_turn(self):
        watcher = ColumnAgent(6)
        controller = GameController({1: ColumnAgent(0), -1: watcher})
        controller.step()
        controller.step()
        assert watcher.seen == [(5, 0, 1, 2), (5, 6, -1, 3)]


class TestGameController:
    def test_illegal_move_raises(self):
        controller = GameController({1: ColumnAgent(0), -1: ColumnAgent(0)})
        with pytest.raises(IllegalMoveError):
            controller.play()
        assert len(controller.moves) == 6

    def test_out_of_range_column_raises(self):
        controller = GameController({1: ColumnAgent(9), -1: ColumnAgent(0)})
        with pytest.raises(IllegalMoveError):
            controller.step()

    def test_vertical_win_ends_game(self):
        controller = GameController({1: ColumnAgent(0), -1: ColumnAgent(1)})
        record = controller.play()
        assert record.winner == 1
        assert record.moves == [0, 1, 0, 1, 0, 1, 0]

    def test_agents_must_cover_both_players(self):
        with pytest.raises(ValueError):
            GameController({1: ColumnAgent(0)})


class TestHeuristicAgent:
    def test_takes_win(self):
        game = ConnectFour()
        state = game.get_initial_state()
        state[5, 0:3] = 1
        state[4, 0:2] = -1
        assert HeuristicAgent(game, 1, seed=0).choose_move(state, 6) == 3

    def test_blocks(self):
        game = ConnectFour()
        state = game.get_initial_state()
        state[5, 4:7] = -1
        state[4, 5:7] = 1
        assert HeuristicAgent(game, 1, seed=0).choose_move(state, 6) == 3

    def test_random_agent_plays_legal_columns(self):
        game = ConnectFour()
        state = game.get_initial_state()
        state[:, 0:6] = 1
        assert RandomAgent(game, seed=1).choose_move(state, 37) == 6


class TestTournament:
    def test_counts_add_up(self):
        results = run_tournament(engine_vs('random', depth=2, seed=0), games=2, progress=False)
        assert results['wins'] + results['draws'] + results['losses'] == 2
        assert len(results['moves']) == 2
        assert all(7 <= n <= 42 for n in results['moves'])

    def test_unknown_opponent(self):
        with pytest.raises(ValueError):
            make_opponent('grandmaster', ConnectFour(), -1)
