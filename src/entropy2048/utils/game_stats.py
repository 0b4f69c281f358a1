import logging
import time
from collections import Counter

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


class GameStats:
    """Scores, best tiles and lengths of a series of games."""

    def __init__(self):
        self.scores = []
        self.best_tiles = []
        self.num_moves = []
        self.start_time = time.time()

    def update(self, score: int, best_tile: int, num_moves: int) -> None:
        self.scores.append(score)
        self.best_tiles.append(best_tile)
        self.num_moves.append(num_moves)

    def summary(self) -> dict:
        if not self.scores:
            raise ValueError("No game recorded")
        return {
            "games": len(self.scores),
            "average_score": float(np.mean(self.scores)),
            "max_score": max(self.scores),
            "best_tile": max(self.best_tiles),
            "worst_best_tile": min(self.best_tiles),
            "average_moves": float(np.mean(self.num_moves)),
            "tile_distribution": dict(sorted(Counter(self.best_tiles).items())),
        }

    def log_summary(self) -> None:
        summary = self.summary()
        elapsed = time.time() - self.start_time
        minutes, seconds = divmod(elapsed, 60)
        logger.info(f"Games played: {summary['games']} in {int(minutes)}m {int(seconds)}s")
        logger.info(f"Average score: {summary['average_score']:.1f}")
        logger.info(f"Max score: {summary['max_score']}")
        logger.info(f"Best tile: {summary['best_tile']}")
        logger.info(f"Worst Best tile: {summary['worst_best_tile']}")
        logger.info(f"Average moves: {summary['average_moves']:.1f}")
        for tile, count in summary["tile_distribution"].items():
            logger.info(f"  {tile}: {count} times")

    def plot_scores(self, path: str) -> None:
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
        ax1.hist(self.scores, bins=min(20, max(1, len(self.scores))), color='#EDC22E')
        ax1.axvline(np.mean(self.scores), color='#776E65', linestyle='--', label='Average')
        ax1.set_title('Score Distribution')
        ax1.set_xlabel('Score')
        ax1.set_ylabel('Games')
        ax1.legend()
        distribution = Counter(self.best_tiles)
        tiles = sorted(distribution)
        ax2.bar([str(tile) for tile in tiles], [distribution[tile] for tile in tiles], color='#F59563')
        ax2.set_title('Best Tile Reached')
        ax2.set_xlabel('Tile')
        ax2.set_ylabel('Games')
        plt.tight_layout()
        plt.savefig(path)
        plt.close(fig)
