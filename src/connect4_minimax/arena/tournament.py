"""
Multi-game matches between the minimax engine and a baseline opponent.
"""

from collections import Counter
from typing import Callable

from tqdm import tqdm

from connect4_minimax.arena.controller import EngineAgent, GameController
from connect4_minimax.arena.heuristic_opponent import HeuristicAgent, RandomAgent
from connect4_minimax.config import EngineConfig
from connect4_minimax.engine.minimax import MinimaxEngine
from connect4_minimax.game.connect_four import ConnectFour


def make_opponent(kind: str, game, player: int, seed=None):
    if kind == 'heuristic':
        return HeuristicAgent(game, player, seed=seed)
    if kind == 'random':
        return RandomAgent(game, seed=seed)
    raise ValueError(f"Unknown opponent '{kind}'")


def engine_vs(opponent: str, depth: int, seed=None) -> Callable:
    """
    Agent factory for run_tournament: a fresh engine against `opponent`.
    """
    def make_agents(engine_player: int, game_index: int, game) -> dict:
        engine = MinimaxEngine(EngineConfig(player=engine_player,
                                            rows=game.row_count, cols=game.column_count))
        game_seed = None if seed is None else seed + game_index
        return {
            engine_player: EngineAgent(engine, depth),
            -engine_player: make_opponent(opponent, game, -engine_player, seed=game_seed),
        }
    return make_agents


def run_tournament(make_agents: Callable, games: int, alternate_colours: bool = True,
                   game=None, progress: bool = True) -> dict:
    """
    Play a match and count results from the engine's side.

    Args:
        make_agents: (engine_player, game_index, game) -> {1: agent, -1: agent}
        games: Number of games
        alternate_colours: Engine moves second in every odd-numbered game
        game: Rules object, defaults to ConnectFour()
        progress: Show a tqdm progress bar

    Returns:
        {'wins': int, 'draws': int, 'losses': int, 'moves': [game lengths]}
    """
    game = game or ConnectFour()
    results = Counter()
    lengths = []

    for index in tqdm(range(games), desc="Games", disable=not progress):
        engine_player = -1 if alternate_colours and index % 2 else 1
        record = GameController(make_agents(engine_player, index, game), game).play()
        lengths.append(len(record.moves))

        if record.winner == 0:
            results['draws'] += 1
        elif record.winner == engine_player:
            results['wins'] += 1
        else:
            results['losses'] += 1

    return {
        'wins': results['wins'],
        'draws': results['draws'],
        'losses': results['losses'],
        'moves': lengths,
    }
