"""
Command line and statistics helpers.
"""

from .game_stats import GameStats
