"""
Game controller and the engine adapter it talks to.

The controller owns the real board and the rules. Agents only ever see a
copy of the board when asked for a move, and are told about every move
(their own included) through observe().
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from connect4_minimax.game.connect_four import ConnectFour, PLAYER_ONE, PLAYER_TWO, lowest_row


logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """An agent picked a column that is full or off the board."""


class EngineAgent:
    """Adapter exposing a MinimaxEngine through the agent interface."""

    def __init__(self, engine, depth: int):
        self.engine = engine
        self.depth = depth

    def observe(self, row: int, column: int, player: int, turn: int):
        self.engine.update_information((row, column), player, turn)

    def choose_move(self, state: np.ndarray, turn: int) -> int:
        self.engine.think(self.depth)
        return self.engine.get_move()


@dataclass
class GameRecord:
    winner: int                                  # 1, -1, or 0 for a draw
    moves: list[int] = field(default_factory=list)
    final_state: Optional[np.ndarray] = None


class GameController:
    """
    Runs one game between two agents.

    Turn numbers start at 1; after every move each agent is told the number
    of the turn that comes next.
    """

    def __init__(self, agents: dict, game: Optional[ConnectFour] = None):
        """
        Args:
            agents: {1: agent, -1: agent}, player one moves first
            game: Rules object, defaults to a standard 6x7 ConnectFour
        """
        if set(agents) != {PLAYER_ONE, PLAYER_TWO}:
            raise ValueError("agents must map both 1 and -1")
        self.agents = agents
        self.game = game or ConnectFour()
        self.state = self.game.get_initial_state()
        self.turn = 1
        self.current_player = PLAYER_ONE
        self.moves: list[int] = []

    def step(self) -> Optional[int]:
        """
        Play a single move.

        Returns:
            None while the game goes on, otherwise the winner (0 for a draw)
        """
        agent = self.agents[self.current_player]
        column = agent.choose_move(self.state.copy(), self.turn)

        if not 0 <= column < self.game.column_count or lowest_row(self.state, column) is None:
            raise IllegalMoveError(
                f"Player {self.current_player} chose column {column} on turn {self.turn}"
            )
        row = lowest_row(self.state, column)
        self.state = self.game.get_next_state(self.state, column, self.current_player)
        self.moves.append(column)
        self.turn += 1

        for observer in self.agents.values():
            observer.observe(row, column, self.current_player, self.turn)

        value, terminated = self.game.get_value_and_terminated(self.state, column)
        if terminated:
            winner = self.current_player if value == 1 else 0
            logger.debug("game over after %d moves, winner %d", len(self.moves), winner)
            return winner

        self.current_player = self.game.get_opponent(self.current_player)
        return None

    def play(self) -> GameRecord:
        winner = None
        while winner is None:
            winner = self.step()
        return GameRecord(winner=winner, moves=list(self.moves), final_state=self.state.copy())
