"""
Game controller, baseline opponents and match runner.
"""

from connect4_minimax.arena.controller import EngineAgent, GameController, GameRecord, IllegalMoveError
from connect4_minimax.arena.heuristic_opponent import HeuristicAgent, RandomAgent
from connect4_minimax.arena.tournament import engine_vs, run_tournament

__all__ = [
    'EngineAgent',
    'GameController',
    'GameRecord',
    'IllegalMoveError',
    'HeuristicAgent',
    'RandomAgent',
    'engine_vs',
    'run_tournament',
]
