"""
Configuration for the Connect Four minimax engine.
"""

import os
from dataclasses import dataclass


# Search Configuration
SEARCH_CONFIG = {
    'max_depth': 6,                     # Plies searched by think() when no depth is given
    'opening_move': 3,                  # Column played while the opening skip applies
    'opening_turns': (1, 2),            # Turn numbers on which think() does not search
}

# Arena Configuration (console games and tournaments)
ARENA_CONFIG = {
    'games': 20,                        # Games per tournament
    'opponent': 'heuristic',            # 'heuristic' or 'random'
    'alternate_colours': True,          # Swap who moves first every game
    'seed': 42,
}

# Allow env override of depth for quick debugging
_override_depth = os.environ.get("CONNECT4_SEARCH_DEPTH")
if _override_depth:
    SEARCH_CONFIG['max_depth'] = int(_override_depth)


@dataclass(frozen=True)
class EngineConfig:
    """Per-instance configuration handed to the engine at construction."""
    player: int
    rows: int = 6
    cols: int = 7
    opening_move: int = SEARCH_CONFIG['opening_move']
    opening_turns: tuple = SEARCH_CONFIG['opening_turns']
    initial_turn: int = 1

    def __post_init__(self):
        if self.player not in (1, -1):
            raise ValueError(f"player must be 1 or -1, got {self.player}")
        if self.rows < 4 or self.cols < 4:
            raise ValueError(f"board must be at least 4x4, got {self.rows}x{self.cols}")
        if not 0 <= self.opening_move < self.cols:
            raise ValueError(f"opening_move {self.opening_move} outside 0..{self.cols - 1}")

    @property
    def shape(self):
        return (self.rows, self.cols)
