"""
Players and the pieces of the feature-based decision engine.
"""

from .evaluator import Evaluator
from .expectimax import DepthPolicy, ExpectimaxSearch, Layer, SearchResult
from .features import FEATURES, FEATURE_NAMES
from .features_player import FeaturesPlayer
from .random_player import RandomPlayer
from .weights import WeightVector
