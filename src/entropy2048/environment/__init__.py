"""
Board simulation for 2048.
"""

from .game2048 import GameManager, Move, merge_row, simulate_move
