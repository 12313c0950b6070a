"""
Static position evaluation by four-in-a-row window scanning.

Every run of four cells on the board (vertical, horizontal and both
diagonals) is summed. A sum of +-4 is a finished four and ends the scan with
+-100; a sum of +-3 adds +-1; anything else adds nothing. The final score is
the sum over all windows, positive favouring player one.
"""

from typing import NamedTuple

import numpy as np

from connect4_minimax.engine.scores import SCORE_THREE, SCORE_WIN


WINDOW_LENGTH = 4

# Scan order within a start cell
FAMILIES = ('vertical', 'horizontal', 'diagonal_up', 'diagonal_down')
VERTICAL, HORIZONTAL, DIAGONAL_UP, DIAGONAL_DOWN = range(len(FAMILIES))


class WindowScan(NamedTuple):
    """Window sums and validity, indexed [start_row, start_col, family]."""
    sums: np.ndarray
    valid: np.ndarray


def window_score(total: int) -> int:
    if total == WINDOW_LENGTH or total == -WINDOW_LENGTH:
        return SCORE_WIN if total > 0 else -SCORE_WIN
    if total == WINDOW_LENGTH - 1 or total == -(WINDOW_LENGTH - 1):
        return SCORE_THREE if total > 0 else -SCORE_THREE
    return 0


# window_score for every possible sum, offset by WINDOW_LENGTH
_SCORE_TABLE = np.array(
    [window_score(total) for total in range(-WINDOW_LENGTH, WINDOW_LENGTH + 1)],
    dtype=np.int16,
)


def scan_windows(board: np.ndarray) -> WindowScan:
    """
    Sum every four-cell window that fits on the board.

    Vertical windows grow down (row+1), horizontal ones right (col+1),
    diagonal_up windows go (row+1, col-1) and diagonal_down (row+1, col+1).
    Windows are only started where all four cells are on the board.
    """
    rows, cols = board.shape
    n = WINDOW_LENGTH
    vr = rows - n + 1   # number of valid start rows for windows growing down
    hc = cols - n + 1   # number of valid start columns for windows growing sideways

    b = board.astype(np.int16)
    sums = np.zeros((rows, cols, len(FAMILIES)), dtype=np.int16)
    valid = np.zeros((rows, cols, len(FAMILIES)), dtype=bool)

    for k in range(n):
        sums[:vr, :, VERTICAL] += b[k:k + vr, :]
        sums[:, :hc, HORIZONTAL] += b[:, k:k + hc]
        sums[:vr, n - 1:, DIAGONAL_UP] += b[k:k + vr, n - 1 - k:cols - k]
        sums[:vr, :hc, DIAGONAL_DOWN] += b[k:k + vr, k:k + hc]

    valid[:vr, :, VERTICAL] = True
    valid[:, :hc, HORIZONTAL] = True
    valid[:vr, n - 1:, DIAGONAL_UP] = True
    valid[:vr, :hc, DIAGONAL_DOWN] = True

    return WindowScan(sums, valid)


class PositionEvaluator:
    """
    Additive window heuristic with terminal short-circuit.

    Stateless; one instance can be shared by any number of engines.
    """

    def evaluate(self, board: np.ndarray) -> int:
        """
        Score a board from player one's point of view.

        Args:
            board: Board array (rows, cols) with cells in {-1, 0, 1}

        Returns:
            +-100 for a realized four (the first one in row-major scan order),
            otherwise the sum of all window scores
        """
        sums = scan_windows(board).sums
        scores = _SCORE_TABLE[sums + WINDOW_LENGTH]

        # C-order flattening matches a row-outer, column-inner, family-inner scan
        flat = scores.reshape(-1)
        terminal = np.flatnonzero(np.abs(flat) == SCORE_WIN)
        if terminal.size:
            return int(flat[terminal[0]])
        return int(flat.sum())

    __call__ = evaluate


_default_evaluator = PositionEvaluator()


def evaluate(board: np.ndarray) -> int:
    return _default_evaluator.evaluate(board)
