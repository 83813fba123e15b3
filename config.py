"""Process-wide settings for the score simulator.

MAXSCORE sizes every joint histogram and bounds every score index. It is read
once at import time; histograms created afterwards keep the value they were
built with, so changing it means building (and zeroing) new buffers.
"""

import os
from pathlib import Path

MAXSCORE_ENV = "BALLGAME_MAXSCORE"
SEED_ENV = "BALLGAME_SEED"

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"

# =============================================================================
# Game rules
# =============================================================================
LINEUP_SIZE = 9
REGULATION_INNINGS = 9
MIN_INNINGS = 10      # innings 0..9 are always started
OVERTIME_AFTER = 9    # runner-on-second tiebreak from inning index 10

# =============================================================================
# Simulation defaults
# =============================================================================
DEFAULT_SIMS = 10000
DEFAULT_SHARDS = 1


def _read_int(name, default):
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    return value


MAXSCORE = _read_int(MAXSCORE_ENV, 256)
if MAXSCORE <= 0:
    raise ValueError(f"{MAXSCORE_ENV} must be positive, got {MAXSCORE}")

DEFAULT_SEED = _read_int(SEED_ENV, None)


def max_score() -> int:
    return MAXSCORE


def buffer_size() -> int:
    """Number of cells a caller must allocate for one joint histogram."""
    return MAXSCORE * MAXSCORE
