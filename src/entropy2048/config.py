BOARD_ROWS = 4
BOARD_COLUMNS = 4

# Probability of each spawned tile value.
SPAWN_PROBABILITIES = {2: 0.9, 4: 0.1}

# Feature weights obtained with the cross-entropy method, taking the spawned
# tile into account (best score 78960). Order: monotonicity, smoothness,
# free cells, max tile, freedom degree, free or paired cells.
DEFAULT_WEIGHTS = [
    -1.07,
    -8.32,
    15.28,
    19.18,
    2.93,
    18.54,
]

# (free cell limit, depth) pairs, checked in order: depth 9 below 3 free cells,
# depth 7 below 5, DEFAULT_DEPTH otherwise.
DEPTH_THRESHOLDS = ((3, 9), (5, 7))
DEFAULT_DEPTH = 5

# Sentinel values of the search layers that found nothing to explore.
ABS_MIN = -1000000.0
ABS_MAX = 1000000.0

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
