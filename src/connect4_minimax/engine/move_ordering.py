"""
Move ordering for the minimax search.

Two fixed orders are used, both built around the center column:

1. Search order: center first, then walking right and wrapping around
   (3, 4, 5, 6, 0, 1, 2 on seven columns). Candidate moves are tried in
   this order at every node.
2. Fallback order: center first, then alternating left/right outward
   (3, 2, 4, 1, 5, 0, 6). Used at the root when every column scored the same.

Legality is always read from the engine's real board, never from the
working board being searched.
"""

import numpy as np

from connect4_minimax.game.connect_four import EMPTY


def search_order(cols: int = 7) -> list[int]:
    """Center column, then rightwards with wrap-around."""
    center = cols // 2
    return [(center + i) % cols for i in range(cols)]


def fallback_order(cols: int = 7) -> list[int]:
    """Center column, then alternating left and right of it."""
    center = cols // 2
    order = [center]
    for offset in range(1, cols):
        for column in (center - offset, center + offset):
            if 0 <= column < cols and column not in order:
                order.append(column)
    return order


def is_column_open(board: np.ndarray, column: int) -> bool:
    return board[0, column] == EMPTY


def candidate_columns(board: np.ndarray, order: list[int]) -> list[int]:
    """
    Columns of `order` whose top cell is empty on `board`.

    Args:
        board: The real game board (never a search working board)
        order: Column order to filter

    Returns:
        Open columns, in the given order
    """
    return [column for column in order if is_column_open(board, column)]


def closest_middle_move(board: np.ndarray) -> int:
    """
    First open column of the fallback order.

    Falls through to the last column of the order when nothing before it is
    open; callers only use this when at least one column is open.
    """
    order = fallback_order(board.shape[1])
    for column in order[:-1]:
        if is_column_open(board, column):
            return column
    return order[-1]


def all_equal(values) -> bool:
    """True if every recorded per-column value equals the first one."""
    return all(value == values[0] for value in values)
