"""
Unit tests for the window-scanning position evaluator.

Tests verify:
1. Empty and single-four boards score 0 / +-100
2. Open threes accumulate additively
3. Swapping players negates the score
4. Windows never reach outside the board
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_minimax.engine.heuristic import (
    FAMILIES, PositionEvaluator, evaluate, scan_windows, window_score
)


# (row step, column step) per family, in FAMILIES order
STEPS = [(1, 0), (0, 1), (1, -1), (1, 1)]

FOURS = {
    'vertical': [(2, 0), (3, 0), (4, 0), (5, 0)],
    'horizontal': [(5, 0), (5, 1), (5, 2), (5, 3)],
    'diagonal_up': [(2, 3), (3, 2), (4, 1), (5, 0)],
    'diagonal_down': [(2, 0), (3, 1), (4, 2), (5, 3)],
}


def empty_board():
    return np.zeros((6, 7), dtype=np.int8)


def random_board(seed):
    rng = np.random.default_rng(seed)
    return rng.choice(np.array([-1, 0, 1], dtype=np.int8), size=(6, 7))


class TestWindowScore:
    """Mapping from a window sum to its score."""

    @pytest.mark.parametrize("total,expected", [
        (4, 100), (-4, -100), (3, 1), (-3, -1), (2, 0), (-2, 0), (1, 0), (0, 0),
    ])
    def test_mapping(self, total, expected):
        assert window_score(total) == expected


class TestEvaluate:
    """Full-board evaluation."""

    def test_empty_board_is_neutral(self):
        assert evaluate(empty_board()) == 0

    @pytest.mark.parametrize("family", sorted(FOURS))
    def test_player_one_four(self, family):
        board = empty_board()
        for row, col in FOURS[family]:
            board[row, col] = 1
        assert evaluate(board) == 100

    @pytest.mark.parametrize("family", sorted(FOURS))
    def test_player_two_four(self, family):
        board = empty_board()
        for row, col in FOURS[family]:
            board[row, col] = -1
        assert evaluate(board) == -100

    def test_open_three_scores_one(self):
        """X X X _ on the bottom row counts once."""
        board = empty_board()
        board[5, 0:3] = 1
        assert evaluate(board) == 1

    def test_threes_accumulate(self):
        """Two separate threes add up instead of taking the best one."""
        board = empty_board()
        board[5, 0:3] = 1
        board[3:6, 6] = 1
        assert evaluate(board) == 2

    def test_opposing_threes_cancel(self):
        board = empty_board()
        board[5, 0:3] = 1
        board[3:6, 6] = -1
        assert evaluate(board) == 0

    def test_mixed_window_scores_nothing(self):
        """X X X O sums to 2 and is worth nothing."""
        board = empty_board()
        board[5, 0:3] = 1
        board[5, 3] = -1
        assert evaluate(board) == 0

    def test_first_four_in_scan_order_wins(self):
        """With fours for both sides the one scanned first is returned."""
        board = empty_board()
        board[2:6, 0] = -1      # vertical, starts at row 2
        board[0, 3:7] = 1       # horizontal, starts at row 0
        assert evaluate(board) == 100
        assert evaluate(-board) == -100

    @pytest.mark.parametrize("seed", range(20))
    def test_sign_flip_symmetry(self, seed):
        board = random_board(seed)
        assert evaluate(-board) == -evaluate(board)

    def test_evaluator_instance_is_callable(self):
        board = empty_board()
        board[5, 0:3] = -1
        evaluator = PositionEvaluator()
        assert evaluator(board) == evaluator.evaluate(board) == -1


class TestScanWindows:
    """Window geometry."""

    def test_window_counts(self):
        valid = scan_windows(empty_board()).valid
        assert valid.sum() == 69
        counts = dict(zip(FAMILIES, valid.sum(axis=(0, 1))))
        assert counts == {
            'vertical': 21, 'horizontal': 24, 'diagonal_up': 12, 'diagonal_down': 12,
        }

    def test_windows_stay_on_board(self):
        valid = scan_windows(empty_board()).valid
        for row, col, family in np.argwhere(valid):
            dr, dc = STEPS[family]
            end_row, end_col = row + 3 * dr, col + 3 * dc
            assert 0 <= end_row <= 5
            assert 0 <= end_col <= 6

    def test_invalid_starts_have_zero_sum(self):
        board = np.ones((6, 7), dtype=np.int8)
        scan = scan_windows(board)
        assert np.all(scan.sums[~scan.valid] == 0)
        assert np.all(scan.sums[scan.valid] == 4)

    @pytest.mark.parametrize("seed", range(5))
    def test_sums_match_cells(self, seed):
        board = random_board(seed)
        scan = scan_windows(board)
        for row, col, family in np.argwhere(scan.valid):
            dr, dc = STEPS[family]
            expected = sum(int(board[row + k * dr, col + k * dc]) for k in range(4))
            assert scan.sums[row, col, family] == expected
