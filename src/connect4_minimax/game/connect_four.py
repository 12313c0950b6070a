import numpy as np


EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = -1


def lowest_row(board, column):
    """
    Find the lowest empty row of a column (gravity).

    Args:
        board: Board array (rows, cols), row 0 is the top
        column: Column index

    Returns:
        Row index of the lowest empty cell, or None if the column is full
    """
    for row in range(board.shape[0] - 1, -1, -1):
        if board[row, column] == EMPTY:
            return row
    return None


class ConnectFour:
    """
    Connect Four rules for the side of the table that owns the real game.

    Board: rows x columns (6 x 7 by default), row 0 is the TOP
    Cells: 0 = empty, 1 = player one, -1 = player two
    Actions: Column index - disc drops to the lowest empty row
    """

    def __init__(self, row_count=6, column_count=7, win_length=4):
        self.row_count = row_count
        self.column_count = column_count
        self.win_length = win_length
        self.action_size = column_count

    def __repr__(self):
        return f"ConnectFour({self.row_count}x{self.column_count}, win={self.win_length})"

    def get_initial_state(self):
        return np.zeros((self.row_count, self.column_count), dtype=np.int8)

    def get_next_state(self, state, action, player):
        """
        Apply a move and return the new state. The input state is not modified.

        Args:
            state: Current board state (rows, cols)
            action: Column index
            player: 1 or -1

        Returns:
            New state with the disc placed

        Raises:
            ValueError: column out of range or already full
        """
        if not 0 <= action < self.column_count:
            raise ValueError(f"Column {action} is outside 0..{self.column_count - 1}")
        row = lowest_row(state, action)
        if row is None:
            raise ValueError(f"Column {action} is full")
        state = state.copy()
        state[row, action] = player
        return state

    def get_valid_moves(self, state):
        """Binary mask of columns whose top cell is empty."""
        return (state[0, :] == EMPTY).astype(np.uint8)

    def is_full(self, state):
        return not np.any(state[0, :] == EMPTY)

    def landing_row(self, state, action):
        """Row of the top disc in a column, None if the column is empty."""
        occupied = np.flatnonzero(state[:, action] != EMPTY)
        if occupied.size == 0:
            return None
        return int(occupied[0])

    def check_win(self, state, action):
        """
        Check whether the top disc of a column is part of a four-in-a-row.

        Args:
            state: Board state after the move
            action: Column of the last move

        Returns:
            True if the last move won the game
        """
        if action is None or not 0 <= action < self.column_count:
            return False
        row = self.landing_row(state, action)
        if row is None:
            return False
        player = state[row, action]

        for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
            count = 1
            for sign in (1, -1):
                r, c = row + sign * dr, action + sign * dc
                while (0 <= r < self.row_count and 0 <= c < self.column_count
                       and state[r, c] == player):
                    count += 1
                    r += sign * dr
                    c += sign * dc
            if count >= self.win_length:
                return True
        return False

    def get_value_and_terminated(self, state, action):
        """
        Returns:
            (value, terminated): value is 1 if the last mover won, else 0
        """
        if self.check_win(state, action):
            return 1, True
        if self.is_full(state):
            return 0, True
        return 0, False

    def get_opponent(self, player):
        return -player

    def render(self, state):
        """Plain text grid, top row first, with column numbers underneath."""
        symbols = {PLAYER_ONE: "X", PLAYER_TWO: "O", EMPTY: "."}
        lines = ["|" + " ".join(symbols[int(cell)] for cell in row) + "|" for row in state]
        lines.append(" " + " ".join(str(c) for c in range(self.column_count)))
        return "\n".join(lines)
