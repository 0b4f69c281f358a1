import random
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import BOARD_COLUMNS, BOARD_ROWS, SPAWN_PROBABILITIES


class Move(IntEnum):
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


# Number of counter-clockwise quarter turns that bring each direction to a
# leftward slide.
_ROTATIONS = {
    Move.LEFT: 0,
    Move.UP: 1,
    Move.RIGHT: 2,
    Move.DOWN: 3,
}


def merge_row(row: Sequence[int]) -> Tuple[List[int], int, bool]:
    """
    Slide the tiles of one line towards index 0, each tile merging at most once.
    Returns the new line, score gained, and whether the line changed.
    """
    line = []
    score = 0
    pending = 0
    for tile in row:
        if not tile:
            continue
        if tile == pending:
            line.append(tile * 2)
            score += tile * 2
            pending = 0
        else:
            if pending:
                line.append(pending)
            pending = tile
    if pending:
        line.append(pending)
    line += [0] * (len(row) - len(line))
    return line, score, line != list(row)


def simulate_move(board: np.ndarray, direction: Move) -> Tuple[np.ndarray, int, bool]:
    """
    Apply a move to a copy of the grid.
    Returns the new grid, score gained, and whether the grid changed.
    """
    k = _ROTATIONS[Move(direction)]
    merged = [merge_row(line) for line in np.rot90(board, k=k).tolist()]
    slid = np.array([line for line, _score, _changed in merged], dtype=np.int64)
    new_board = np.rot90(slid, k=-k).copy()
    changed = any(line_changed for _line, _score, line_changed in merged)
    return new_board, sum(score for _line, score, _changed in merged), changed


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


class GameManager:
    """
    Board simulation for 2048: owns the grid, the score and the liveness flag.

    Cells are addressed row-major with 0-based indices; get_board() reports
    empty cells as None.
    """

    def __init__(self, rows: int = BOARD_ROWS, columns: int = BOARD_COLUMNS,
                 seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rows = rows
        self.columns = columns
        self.rng = rng if rng is not None else random.Random(seed)
        self.reset()

    def reset(self) -> None:
        """Start a new game: empty grid, score 0, two spawned tiles."""
        self.board = np.zeros((self.rows, self.columns), dtype=np.int64)
        self.score = 0
        self.alive = True
        self.add_random_tile()
        self.add_random_tile()
        self.alive = self._compute_alive()

    def add_random_tile(self) -> None:
        """Add a random tile (2 or 4) to a uniformly chosen empty cell"""
        empty_cells = list(zip(*np.where(self.board == 0)))
        if empty_cells:
            cell = self.rng.choice(empty_cells)
            self.board[cell] = 2 if self.rng.random() < SPAWN_PROBABILITIES[2] else 4

    # --- read access ---

    def get_board(self) -> List[Optional[int]]:
        return [int(tile) if tile else None for tile in self.board.flat]

    def get_num_cells(self) -> int:
        return self.rows * self.columns

    def get_num_columns(self) -> int:
        return self.columns

    def get_num_rows(self) -> int:
        return self.rows

    def get_score(self) -> int:
        return self.score

    def get_best_tile(self) -> int:
        return int(self.board.max())

    def get_free_cells(self) -> int:
        return int(np.sum(self.board == 0))

    def is_alive(self) -> bool:
        return self.alive

    def get_tile(self, index: int) -> Optional[int]:
        tile = int(self.board.flat[index])
        return tile if tile else None

    def get_legal_moves(self) -> List[Move]:
        return [direction for direction in Move
                if simulate_move(self.board, direction)[2]]

    # --- mutation ---

    def move(self, direction: Move, spawn: bool = True) -> bool:
        """
        Slide the tiles towards direction. Returns whether the board changed.
        A random tile is spawned after a changing move when spawn is true.
        """
        new_board, score_gain, changed = simulate_move(self.board, direction)
        if changed:
            self.board = new_board
            self.score += score_gain
            if spawn:
                self.add_random_tile()
            self.alive = self._compute_alive()
        return changed

    def set_tile(self, index: int, value: Optional[int]) -> None:
        self.board.flat[index] = value or 0
        self.alive = self._compute_alive()

    def load_from(self, other: "GameManager") -> None:
        """Overwrite board, score and liveness with a copy of other's."""
        self.rows = other.rows
        self.columns = other.columns
        self.board = other.board.copy()
        self.score = other.score
        self.alive = other.alive

    def clone(self) -> "GameManager":
        game = GameManager.__new__(GameManager)
        game.rng = self.rng
        game.load_from(self)
        return game

    def load(self, board: Sequence[Optional[int]], score: int = 0) -> None:
        """Set an explicit position, given as a row-major sequence (None or 0 = empty)."""
        if len(board) != self.get_num_cells():
            raise ValueError(
                f"Expected {self.get_num_cells()} cells, got {len(board)}")
        tiles = [tile or 0 for tile in board]
        for tile in tiles:
            if tile and not _is_power_of_two(tile):
                raise ValueError(f"Invalid tile value: {tile}")
        self.board = np.array(tiles, dtype=np.int64).reshape(self.rows, self.columns)
        self.score = score
        self.alive = self._compute_alive()

    def _compute_alive(self) -> bool:
        # An empty grid has nothing to slide.
        if not np.any(self.board):
            return False
        if np.any(self.board == 0):
            return True
        # Check for possible merges
        if np.any(self.board[:, :-1] == self.board[:, 1:]):
            return True
        return bool(np.any(self.board[:-1, :] == self.board[1:, :]))
