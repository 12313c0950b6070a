from connect4_minimax.game.connect_four import (
    ConnectFour, lowest_row, EMPTY, PLAYER_ONE, PLAYER_TWO
)

__all__ = ['ConnectFour', 'lowest_row', 'EMPTY', 'PLAYER_ONE', 'PLAYER_TWO']
