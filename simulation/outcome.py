"""At-bat outcome model.

The chance of each of the eight outcomes comes from combining the pitcher's
season rates with the batter's:

    hit       = sqrt(pitcher H/BF * batter BA)
    walk      = pitcher BB/BF
    out       = 1 - hit - walk
    strikeout = sqrt(pitcher SO/BF * batter SO/AB)    (share of outs)

Hits split into 1B/2B/3B/HR by the batter's extra-base shares; the
non-strikeout outs split evenly into tag outs and fly outs.
"""

import math
from enum import IntEnum

import numpy as np

from errors import InvalidStatsError
from .random_source import weighted_index

# float noise allowed below zero before a probability counts as negative
NEGATIVE_TOLERANCE = 1e-12


class Outcome(IntEnum):
    SINGLE = 0
    DOUBLE = 1
    TRIPLE = 2
    HOME_RUN = 3
    TAG_OUT = 4
    FLY_OUT = 5
    STRIKEOUT = 6
    WALK = 7

    @property
    def is_out(self):
        return self in (Outcome.TAG_OUT, Outcome.FLY_OUT, Outcome.STRIKEOUT)


# bases gained by batter and runners
ADVANCES = {
    Outcome.SINGLE: 1,
    Outcome.DOUBLE: 2,
    Outcome.TRIPLE: 3,
    Outcome.HOME_RUN: 4,
    Outcome.TAG_OUT: 1,
    Outcome.FLY_OUT: 0,
    Outcome.STRIKEOUT: 0,
    Outcome.WALK: 1,
}


def compute_prob_dist(pitcher, batter):
    """
    Outcome probabilities for one matchup, indexed by `Outcome`.

    Raises InvalidStatsError when the stat lines drive any probability below
    zero (e.g. BB/BF + hit probability above 1, or more extra-base hits than hits).
    """
    prob_hit = math.sqrt(pitcher.hit_rate * batter.average)
    prob_walk = pitcher.walk_rate
    prob_out = 1.0 - prob_hit - prob_walk

    prob_2b, prob_3b, prob_hr = batter.extra_base_shares()
    prob_1b = 1.0 - prob_2b - prob_3b - prob_hr

    prob_strikeout = math.sqrt(pitcher.strikeout_rate * batter.strikeout_rate)
    prob_flyout = 0.5 * (1.0 - prob_strikeout)
    prob_tagout = prob_flyout

    probs = np.array([
        prob_hit * prob_1b,
        prob_hit * prob_2b,
        prob_hit * prob_3b,
        prob_hit * prob_hr,
        prob_out * prob_tagout,
        prob_out * prob_flyout,
        prob_out * prob_strikeout,
        prob_walk,
    ])

    if (probs < -NEGATIVE_TOLERANCE).any():
        bad = ", ".join(f"{Outcome(i).name}={p:.4f}"
                        for i, p in enumerate(probs) if p < -NEGATIVE_TOLERANCE)
        raise InvalidStatsError(f"negative outcome probability ({bad}) for {pitcher!r} vs {batter!r}")
    return np.clip(probs, 0.0, None)


class OutcomeSampler:
    """Draws at-bat outcomes; distributions are cached per (pitcher, batter) pair."""

    def __init__(self, rng):
        self.rng = rng
        self._cache = {}

    def probabilities(self, pitcher, batter):
        key = (id(pitcher), id(batter))
        entry = self._cache.get(key)
        if entry is None:
            # keep the records alive so their ids stay unique while cached
            entry = self._cache[key] = (compute_prob_dist(pitcher, batter), pitcher, batter)
        return entry[0]

    def draw(self, pitcher, batter):
        return Outcome(weighted_index(self.rng, self.probabilities(pitcher, batter)))

    def simulate_at_bat(self, field, pitcher, batter):
        """Play one at-bat on `field`; True when it produced an out."""
        outcome = self.draw(pitcher, batter)
        if ADVANCES[outcome]:
            field.advance(ADVANCES[outcome])
        if outcome == Outcome.TAG_OUT:
            field.out(self.rng)
        return outcome.is_out
