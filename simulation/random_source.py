"""Random streams for the simulator.

Every component draws from an explicit `numpy.random.Generator` handed down
from the run that owns it. Anything exposing ``random() -> float in [0, 1)``
is accepted, which keeps scripted streams usable in tests.
"""

import numpy as np


def make_rng(seed=None):
    """Return a Generator for `seed`; an object that already draws is passed through."""
    if hasattr(seed, 'random'):
        return seed
    return np.random.default_rng(seed)


def spawn_rngs(seed, n):
    """`n` statistically independent Generators derived from one seed."""
    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(child) for child in children]


def weighted_index(rng, weights):
    """
    Draw one index with probability proportional to `weights`.

    Uses exactly one ``rng.random()`` call; zero-weight entries are never chosen.
    """
    cumulative = np.cumsum(weights, dtype=float)
    total = cumulative[-1]
    if not total > 0:
        raise ValueError("weights must have a positive sum")
    idx = int(np.searchsorted(cumulative, rng.random() * total, side='right'))
    return min(idx, len(cumulative) - 1)
