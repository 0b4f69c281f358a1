"""
Board features for the weighted evaluation.

Every feature takes a row-major board (a sequence of num_cells tile values,
None or 0 for an empty cell) and the number of columns, and returns a scalar.
Two of them are inspired from
http://stackoverflow.com/questions/22342854/what-is-the-optimal-algorithm-for-the-game-2048
"""

import math
from functools import lru_cache
from typing import Optional, Sequence

Board = Sequence[Optional[int]]


@lru_cache(maxsize=4096)
def log2(n: int) -> float:
    if n <= 0:
        raise ValueError(f"log2 of a non-positive number: {n}")
    return math.log2(n)


def monotonicity(board: Board, num_columns: int) -> float:
    """
    Measures how monotonic (increasing or decreasing) rows and columns are.
    0 for a board where every row and every column is ordered one way.
    """
    num_cells = len(board)
    left_increase = 0.0
    right_increase = 0.0
    top_increase = 0.0
    bottom_increase = 0.0

    for i in range(num_cells):
        tile = board[i] or 0

        if (i + 1) % num_columns != 0:
            right_tile = board[i + 1] or 0
            if right_tile > tile:
                right_increase += log2(right_tile - tile)
            elif tile > right_tile:
                left_increase += log2(tile - right_tile)

        if i + num_columns < num_cells:
            bottom_tile = board[i + num_columns] or 0
            if bottom_tile > tile:
                bottom_increase += log2(bottom_tile - tile)
            elif tile > bottom_tile:
                top_increase += log2(tile - bottom_tile)

    return min(left_increase, right_increase) + min(top_increase, bottom_increase)


def smoothness(board: Board, num_columns: int) -> float:
    """Sum of the (log) differences between adjacent tiles."""
    num_cells = len(board)
    result = 0.0

    for i in range(num_cells):
        tile = board[i] or 0

        if (i + 1) % num_columns != 0:
            diff = tile - (board[i + 1] or 0)
            if diff != 0:
                result += log2(abs(diff))

        if i + num_columns < num_cells:
            diff = tile - (board[i + num_columns] or 0)
            if diff != 0:
                result += log2(abs(diff))

    return result


def free_cells(board: Board, num_columns: int) -> float:
    return sum(1 for tile in board if not tile)


def max_tile(board: Board, num_columns: int) -> float:
    return max((tile or 0) for tile in board)


def freedom_degree(board: Board, num_columns: int) -> float:
    """
    1 if we can move both horizontally and vertically, 0 otherwise.
    Penalizes positions where a single forced move would pull big tiles
    away from their side.
    """
    num_cells = len(board)
    can_move_horizontally = False
    can_move_vertically = False

    for i in range(num_cells):
        tile = board[i]

        # Empty/full transition, or two equal adjacent tiles.
        if not can_move_horizontally and (i + 1) % num_columns != 0:
            right_tile = board[i + 1]
            can_move_horizontally = ((not right_tile) != (not tile)
                                     or bool(tile and right_tile == tile))

        if not can_move_vertically and i + num_columns < num_cells:
            bottom_tile = board[i + num_columns]
            can_move_vertically = ((not bottom_tile) != (not tile)
                                   or bool(tile and bottom_tile == tile))

        if can_move_horizontally and can_move_vertically:
            return 1

    return 0


def free_or_paired_cells(board: Board, num_columns: int) -> float:
    """
    Number of free cells plus number of paired tiles (two adjacent tiles with
    the same value). Only right and bottom neighbours are checked so that a
    pair is counted once.
    """
    num_cells = len(board)
    result = 0

    for i in range(num_cells):
        tile = board[i]
        if not tile:
            result += 1
            continue

        if (i + 1) % num_columns != 0 and board[i + 1] == tile:
            result += 1
        if i + num_columns < num_cells and board[i + num_columns] == tile:
            result += 1

    return result


FEATURES = (
    monotonicity,
    smoothness,
    free_cells,
    max_tile,
    freedom_degree,
    free_or_paired_cells,
)

FEATURE_NAMES = (
    "Monotonicity",
    "Difference between adjacent cells",
    "Number of free cells",
    "Max tile",
    "Freedom",
    "Number of free or paired cells",
)
