"""2048 artificial player: weighted board features and expectimax search."""

__version__ = "0.1.0"

# Import key components for convenient access
from .environment.game2048 import GameManager, Move
from .agents.features_player import FeaturesPlayer
from .agents.random_player import RandomPlayer
from .agents.weights import WeightVector
