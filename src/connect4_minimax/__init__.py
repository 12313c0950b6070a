"""
connect4_minimax: a fixed-depth minimax move selector for Connect Four.

A game controller owns the real game. It reports every played move to a
MinimaxEngine with update_information(), asks it to think(depth) when it is
the engine's turn, and reads the answer with get_move().
"""

from connect4_minimax.config import EngineConfig, SEARCH_CONFIG, ARENA_CONFIG
from connect4_minimax.engine import MinimaxEngine, PositionEvaluator, SearchResult
from connect4_minimax.game import ConnectFour

__all__ = [
    'EngineConfig',
    'SEARCH_CONFIG',
    'ARENA_CONFIG',
    'MinimaxEngine',
    'PositionEvaluator',
    'SearchResult',
    'ConnectFour',
]

__version__ = "0.1.0"
