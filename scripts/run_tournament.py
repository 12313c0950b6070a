#!/usr/bin/env python3
"""
Match the minimax engine against a baseline opponent and report the score.
"""
import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from connect4_minimax.arena.tournament import engine_vs, run_tournament
from connect4_minimax.config import ARENA_CONFIG, SEARCH_CONFIG


def main():
    parser = argparse.ArgumentParser(description="Minimax engine vs baseline opponent")
    parser.add_argument('--games', type=int, default=ARENA_CONFIG['games'])
    parser.add_argument('--depth', type=int, default=SEARCH_CONFIG['max_depth'])
    parser.add_argument('--opponent', type=str, default=ARENA_CONFIG['opponent'],
                        choices=['heuristic', 'random'])
    parser.add_argument('--seed', type=int, default=ARENA_CONFIG['seed'])
    parser.add_argument('--no-alternate', action='store_true',
                        help='Engine always moves first')
    parser.add_argument('--log-level', type=str, default='WARNING')
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print(f"🥊 Minimax (depth {args.depth}) vs {args.opponent} - {args.games} games")
    print("=" * 60)

    results = run_tournament(
        engine_vs(args.opponent, args.depth, seed=args.seed),
        games=args.games,
        alternate_colours=ARENA_CONFIG['alternate_colours'] and not args.no_alternate,
    )

    total = args.games
    print(f"\n🏆 Wins:   {results['wins']:3d} ({results['wins'] / total:.0%})")
    print(f"🤝 Draws:  {results['draws']:3d} ({results['draws'] / total:.0%})")
    print(f"❌ Losses: {results['losses']:3d} ({results['losses'] / total:.0%})")
    print(f"📏 Average game length: {np.mean(results['moves']):.1f} moves")


if __name__ == "__main__":
    main()
