#!/usr/bin/env python3
"""
Play Connect Four against the minimax engine.
You play as Red (🔴), the engine plays as Yellow (🟡) unless --engine-first is given.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from connect4_minimax.arena.controller import EngineAgent, GameController
from connect4_minimax.config import SEARCH_CONFIG, EngineConfig
from connect4_minimax.engine.minimax import MinimaxEngine
from connect4_minimax.game.connect_four import ConnectFour


def print_board(board, human):
    """Print the Connect Four board, the human always shown in red"""
    red, yellow = (1, -1) if human == 1 else (-1, 1)
    print("\n  " + " ".join(str(i) for i in range(board.shape[1])))
    print("  " + "-" * 13)
    for row in board:
        print("| " + " ".join("🔴" if cell == red else "🟡" if cell == yellow else "⚪" for cell in row) + " |")
    print("  " + "-" * 13)
    print()


class HumanAgent:
    """Reads columns from stdin"""

    def __init__(self, game, player):
        self.game = game
        self.player = player

    def observe(self, row, column, player, turn):
        pass

    def choose_move(self, state, turn):
        print_board(state, self.player)
        valid_moves = self.game.get_valid_moves(state)
        valid_cols = [i for i in range(self.game.column_count) if valid_moves[i]]
        print(f"🔴 Your turn! Valid columns: {valid_cols}")

        while True:
            col = input("Enter column (0-6) or 'q' to quit: ").strip()
            if col.lower() == 'q':
                print("👋 Thanks for playing!")
                sys.exit(0)
            try:
                col = int(col)
            except ValueError:
                print("❌ Invalid input! Enter a number 0-6")
                continue
            if col not in valid_cols:
                print(f"❌ Invalid column! Choose from: {valid_cols}")
                continue
            return col


class AnnouncingEngineAgent(EngineAgent):
    def choose_move(self, state, turn):
        print("🟡 Engine is thinking...")
        column = super().choose_move(state, turn)
        result = self.engine.last_result
        if result.skipped:
            print(f"🟡 Engine plays column {column} ({result.skipped})")
        else:
            print(f"🟡 Engine plays column {column} "
                  f"(score {result.score}, {result.nodes_searched} nodes, {result.time_ms} ms)")
        return column


def main():
    parser = argparse.ArgumentParser(description="Play Connect Four against the minimax engine")
    parser.add_argument('--depth', type=int, default=SEARCH_CONFIG['max_depth'],
                        help='Search depth in plies')
    parser.add_argument('--engine-first', action='store_true', help='Engine moves first')
    parser.add_argument('--log-level', type=str, default='WARNING')
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("🎮 Connect Four - Play vs Minimax")
    print("=" * 60)

    game = ConnectFour()
    engine_player = 1 if args.engine_first else -1
    human_player = -engine_player

    engine = MinimaxEngine(EngineConfig(player=engine_player))
    print(f"🧠 Engine searches {args.depth} plies per move")

    controller = GameController({
        engine_player: AnnouncingEngineAgent(engine, args.depth),
        human_player: HumanAgent(game, human_player),
    }, game)

    print("\n" + "=" * 60)
    print("🎯 Game Start!")
    print("   You are 🔴 (Red), engine is 🟡 (Yellow)")
    print("=" * 60)

    record = controller.play()
    print_board(record.final_state, human_player)

    if record.winner == human_player:
        print("🎉 YOU WIN! Congratulations! 🎉")
    elif record.winner == engine_player:
        print("🤖 Engine wins!")
    else:
        print("🤝 Game Over - Draw!")
    print(f"Moves played: {len(record.moves)}")


if __name__ == "__main__":
    main()
