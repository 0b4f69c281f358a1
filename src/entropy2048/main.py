#!/usr/bin/env python
"""
Plays games with the chosen player and reports the scores.

Usage: python -m entropy2048.main [--player features|random] [--games N]
"""

import logging
import random
import time

from tqdm import tqdm

from .agents import FeaturesPlayer, RandomPlayer
from .environment import GameManager
from .utils import GameStats
from .utils.cli import parse_args, setup_logging

logger = logging.getLogger(__name__)


def create_player(name, weights=None, leaf="plain", seed=None, verbose=False, trace=False):
    if name == "features":
        return FeaturesPlayer(weights=weights, leaf=leaf, verbose=verbose, trace=trace)
    if name == "random":
        return RandomPlayer(seed=seed)
    raise ValueError(f"Unknown player: {name}")


def play_game(player, rng):
    """Plays a new game and returns the score, the best tile and the number of moves."""
    game = GameManager(rng=rng)
    num_moves = 0
    while game.is_alive():
        action = player.get_action(game)
        game.move(action)
        num_moves += 1
    return game.get_score(), game.get_best_tile(), num_moves


def main(args=None):
    args = parse_args(args)
    level = logging.DEBUG if args.verbose or args.trace else logging.INFO
    setup_logging(args.log_file, level=level)

    seed = args.seed if args.seed is not None else int(time.time())
    logger.info(f"Random seed: {seed}")
    rng = random.Random(seed)

    player = create_player(args.player, weights=args.weights, leaf=args.leaf,
                           seed=seed, verbose=args.verbose, trace=args.trace)
    logger.info(f"Running {args.games} games with player '{args.player}'")

    stats = GameStats()
    for i in tqdm(range(args.games), desc="Games", disable=args.games < 2):
        score, best_tile, num_moves = play_game(player, rng)
        stats.update(score, best_tile, num_moves)
        logger.info(f"Game {i + 1}/{args.games}: score {score}, best tile {best_tile}, {num_moves} moves")

    stats.log_summary()
    if args.plot:
        stats.plot_scores(args.plot)
        logger.info(f"Saved score plot to {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
