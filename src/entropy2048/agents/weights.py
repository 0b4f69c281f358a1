from typing import List, Optional, Sequence

from ..config import DEFAULT_WEIGHTS


class WeightVector:
    """
    Coefficients of the evaluation, one per feature, in the order of
    features.FEATURES. Tuning procedures may replace them between games.
    """

    def __init__(self, weights: Optional[Sequence[float]] = None):
        self._weights = list(weights) if weights is not None else list(DEFAULT_WEIGHTS)

    def get(self) -> List[float]:
        return self._weights

    def set(self, weights: Sequence[float]) -> None:
        self._weights = weights

    def __len__(self):
        return len(self._weights)

    def __repr__(self):
        return f"WeightVector({list(self._weights)!r})"
