"""
Minimax search engine for Connect Four.

This module contains the engine components:
- Window-scanning position evaluator
- Tagged search values and score constants
- Center-out move ordering and the center-preference fallback
- Fixed-depth minimax with alpha-beta pruning over a board mirror
"""

from connect4_minimax.engine.heuristic import PositionEvaluator, evaluate, scan_windows, window_score
from connect4_minimax.engine.scores import ScoreKind, SearchValue
from connect4_minimax.engine.move_ordering import (
    search_order, fallback_order, candidate_columns, closest_middle_move
)
from connect4_minimax.engine.minimax import MinimaxEngine, SearchResult, OccupiedCellError

__all__ = [
    'PositionEvaluator',
    'evaluate',
    'scan_windows',
    'window_score',
    'ScoreKind',
    'SearchValue',
    'search_order',
    'fallback_order',
    'candidate_columns',
    'closest_middle_move',
    'MinimaxEngine',
    'SearchResult',
    'OccupiedCellError',
]
