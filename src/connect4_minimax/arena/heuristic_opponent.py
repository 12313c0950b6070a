"""
Baseline opponents for matches against the minimax engine.
Uses basic 1-ply lookahead: win if possible, block if necessary, otherwise random.
"""
import numpy as np


class RandomAgent:
    """Uniformly random legal column."""

    def __init__(self, game, seed=None):
        self.game = game
        self.rng = np.random.default_rng(seed)

    def observe(self, row, column, player, turn):
        pass

    def choose_move(self, state, turn):
        valid_actions = np.flatnonzero(self.game.get_valid_moves(state))
        if len(valid_actions) == 0:
            raise ValueError("No valid moves available")
        return int(self.rng.choice(valid_actions))


class HeuristicAgent:
    """
    1-ply heuristic opponent.

    Strategy:
    1. If I can win (make 4-in-a-row), do it
    2. If opponent can win next turn, block it
    3. Otherwise, pick a random valid move with a preference for the center
    """

    def __init__(self, game, player, seed=None):
        self.game = game
        self.player = player
        self.rng = np.random.default_rng(seed)

    def observe(self, row, column, player, turn):
        pass

    def choose_move(self, state, turn):
        valid_actions = np.flatnonzero(self.game.get_valid_moves(state))
        if len(valid_actions) == 0:
            raise ValueError("No valid moves available")

        for mover in (self.player, -self.player):
            for action in valid_actions:
                next_state = self.game.get_next_state(state, action, mover)
                if self.game.check_win(next_state, action):
                    return int(action)

        center = self.game.column_count // 2
        weights = np.array([1.0 / (1.0 + abs(i - center)) for i in valid_actions])
        weights /= weights.sum()
        return int(self.rng.choice(valid_actions, p=weights))
