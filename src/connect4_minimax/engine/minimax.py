"""
Fixed-depth minimax search with alpha-beta pruning for Connect Four.

The engine keeps its own copy of the real board (the mirror), fed one move
at a time by the game controller through update_information(). think()
searches from that mirror and stores the chosen column for get_move().

Algorithm overview:

    def find_max(depth, board, alpha, beta):
        evaluation = evaluate(board)
        if depth == max_depth or evaluation is a finished four:
            return evaluation

        for column in (3, 4, 5, 6, 0, 1, 2):
            if column is full on the MIRROR:
                continue
            place +1 in column on board
            value = find_min(depth + 1, board, alpha, beta)
            remove the disc again

            alpha = max(alpha, value)
            if alpha >= beta:
                return +1000        # cutoff sentinel
        return alpha

find_min is the mirror image: it places -1, lowers beta and answers a
cutoff with -1000. At the root the per-column values decide the move; if
all seven are equal the most central open column is played instead.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

from connect4_minimax.config import EngineConfig
from connect4_minimax.engine.heuristic import PositionEvaluator
from connect4_minimax.engine.move_ordering import (
    all_equal,
    candidate_columns,
    closest_middle_move,
    is_column_open,
    search_order,
)
from connect4_minimax.engine.scores import (
    SCORE_BOUND,
    SCORE_WIN,
    UNVISITED_MAX,
    UNVISITED_MIN,
    ScoreKind,
    SearchValue,
    in_search_window,
)
from connect4_minimax.game.connect_four import EMPTY, PLAYER_ONE, PLAYER_TWO, lowest_row


logger = logging.getLogger(__name__)


class OccupiedCellError(ValueError):
    """A move was reported for a cell the mirror already holds a disc in."""


@dataclass
class SearchResult:
    """Outcome of one think() call."""
    best_move: int
    score: Optional[int] = None
    kind: Optional[ScoreKind] = None
    depth: int = 0
    nodes_searched: int = 0
    time_ms: int = 0
    root_values: list[int] = field(default_factory=list)
    used_fallback: bool = False
    skipped: Optional[str] = None


class MinimaxEngine:
    """
    Minimax move selector with a persistent board mirror.

    The mirror changes only through update_information(). Searches run on a
    working copy and undo every simulated disc before trying the next column.
    Column legality during the whole search is read from the mirror, so a
    column that fills up inside the searched line is still tried deeper down.

    One think() at a time per instance.
    """

    def __init__(self, config: EngineConfig, evaluator: Optional[Callable] = None):
        """
        Args:
            config: Player sign and board dimensions
            evaluator: Callable board -> int, defaults to PositionEvaluator
        """
        self.config = config
        self.evaluator = evaluator or PositionEvaluator()

        self._board = np.zeros(config.shape, dtype=np.int8)
        self._turn = config.initial_turn
        self._move = config.opening_move
        self._max_depth = 0
        self._search_order = search_order(config.cols)

        # Search statistics and root bookkeeping
        self.nodes_searched = 0
        self.last_result: Optional[SearchResult] = None
        self._root_values: list[int] = []
        self._root_best = 0

    def __repr__(self):
        return f"MinimaxEngine(player={self.config.player}, turn={self._turn}, move={self._move})"

    @property
    def board(self) -> np.ndarray:
        """Copy of the mirror."""
        return self._board.copy()

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def get_computer_number(self) -> int:
        return self.config.player

    def get_move(self) -> int:
        return self._move

    def update_information(self, position, player: int, turn: int):
        """
        Record a move that was actually played.

        Args:
            position: (row, column) of the placed disc
            player: 1 or -1
            turn: Turn counter as kept by the controller

        Raises:
            OccupiedCellError: the mirror already has a disc there
            ValueError: position off the board or unknown player
        """
        row, column = position
        rows, cols = self._board.shape
        if not (0 <= row < rows and 0 <= column < cols):
            raise ValueError(f"Position {position} is outside the {rows}x{cols} board")
        if player not in (PLAYER_ONE, PLAYER_TWO):
            raise ValueError(f"player must be 1 or -1, got {player}")
        if self._board[row, column] != EMPTY:
            raise OccupiedCellError(
                f"Cell {position} already holds {int(self._board[row, column])}"
            )

        self._board[row, column] = player
        self._turn = turn

    def think(self, max_depth: int):
        """
        Search the mirror to `max_depth` plies and store the chosen column.

        No search is run, and the stored move is kept, on the opening turns,
        on a full board and on a board that already contains a four.
        """
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")

        if self._turn in self.config.opening_turns:
            return self._skip("opening turn")
        if not candidate_columns(self._board, self._search_order):
            return self._skip("board full")
        if abs(self.evaluator(self._board)) == SCORE_WIN:
            return self._skip("game already decided")

        self._max_depth = max_depth
        self.nodes_searched = 0
        self._root_values = []
        self._root_best = 0
        start_time = time.time()

        working = self._board.copy()
        if self.config.player == PLAYER_TWO:
            root = self._find_min(0, working, -SCORE_BOUND, SCORE_BOUND)
        else:
            root = self._find_max(0, working, -SCORE_BOUND, SCORE_BOUND)

        used_fallback = all_equal(self._root_values)
        if used_fallback:
            self._move = closest_middle_move(self._board)
        else:
            self._move = self._root_best

        self.last_result = SearchResult(
            best_move=self._move,
            score=root.numeric,
            kind=root.kind,
            depth=max_depth,
            nodes_searched=self.nodes_searched,
            time_ms=int((time.time() - start_time) * 1000),
            root_values=list(self._root_values),
            used_fallback=used_fallback,
        )
        logger.debug(
            "turn %d depth %d: move %d score %d (%s) values=%s nodes=%d fallback=%s",
            self._turn, max_depth, self._move, root.numeric, root.kind.value,
            self._root_values, self.nodes_searched, used_fallback,
        )

    def _skip(self, reason: str):
        logger.info("turn %d: no search (%s), keeping move %d", self._turn, reason, self._move)
        self.last_result = SearchResult(best_move=self._move, skipped=reason)

    def _play(self, board: np.ndarray, column: int, mark: int, child: Callable,
              depth: int, alpha: int, beta: int) -> SearchValue:
        """Place `mark` in `column`, search the reply, then take the disc back."""
        row = lowest_row(board, column)
        if row is None:
            # Open on the mirror, filled inside this line: nothing to place
            return child(depth + 1, board, alpha, beta)

        board[row, column] = mark
        try:
            return child(depth + 1, board, alpha, beta)
        finally:
            board[row, column] = EMPTY

    def _find_max(self, depth: int, board: np.ndarray, alpha: int, beta: int) -> SearchValue:
        """Player one's level: raise alpha, answer a cutoff with +1000."""
        self.nodes_searched += 1
        evaluation = self.evaluator(board)
        if depth == self._max_depth or abs(evaluation) == SCORE_WIN:
            return SearchValue.leaf(evaluation)

        values = [UNVISITED_MAX] * self.config.cols
        if depth == 0:
            self._root_values = values

        for column in self._search_order:
            if not is_column_open(self._board, column):
                continue
            value = self._play(board, column, PLAYER_ONE, self._find_min,
                               depth, alpha, beta).numeric
            values[column] = value

            # Cutoff sentinels are inside this window and count as scores
            if in_search_window(value):
                alpha = max(value, alpha)
                if value == alpha and depth == 0:
                    self._root_best = column
                if alpha >= beta:
                    return SearchValue.pruned(PLAYER_ONE)

        return SearchValue.bound(alpha)

    def _find_min(self, depth: int, board: np.ndarray, alpha: int, beta: int) -> SearchValue:
        """Player two's level: lower beta, answer a cutoff with -1000."""
        self.nodes_searched += 1
        evaluation = self.evaluator(board)
        if depth == self._max_depth or abs(evaluation) == SCORE_WIN:
            return SearchValue.leaf(evaluation)

        values = [UNVISITED_MIN] * self.config.cols
        if depth == 0:
            self._root_values = values

        for column in self._search_order:
            if not is_column_open(self._board, column):
                continue
            value = self._play(board, column, PLAYER_TWO, self._find_max,
                               depth, alpha, beta).numeric
            values[column] = value

            if in_search_window(value):
                beta = min(value, beta)
                if value == beta and depth == 0:
                    self._root_best = column
                if alpha >= beta:
                    return SearchValue.pruned(PLAYER_TWO)

        return SearchValue.bound(beta)
