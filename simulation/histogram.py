"""Joint (away runs, home runs) histogram over many simulated games."""

import numpy as np
import pandas as pd
from scipy.stats import beta

import config


def _as_counts(buffer, max_score):
    """View `buffer` (ndarray or any writable int buffer) as a max_score x max_score array."""
    if isinstance(buffer, np.ndarray):
        arr = buffer
    else:
        arr = np.frombuffer(buffer, dtype=np.intc)
    if arr.size != max_score * max_score:
        raise ValueError(f"histogram buffer needs {max_score * max_score} cells, got {arr.size}")
    if not arr.flags.c_contiguous or not arr.flags.writeable:
        raise ValueError("histogram buffer must be writable and C-contiguous")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"histogram buffer must hold integers, got {arr.dtype}")
    return arr.reshape(max_score, max_score)


class JointHistogram:
    def __init__(self, buffer=None, max_score=None):
        """
        :param buffer: caller-owned storage of max_score**2 integers to fill in
            place (numpy array, ctypes array, array.array('i'), ...). A new
            array is allocated when omitted. Either way it starts zeroed.
        :param max_score: side length; defaults to config.MAXSCORE
        """
        self.max_score = config.MAXSCORE if max_score is None else int(max_score)
        if self.max_score <= 0:
            raise ValueError(f"max_score must be positive, got {self.max_score}")
        if buffer is None:
            self.counts = np.zeros((self.max_score, self.max_score), dtype=np.int64)
        else:
            self.counts = _as_counts(buffer, self.max_score)
            self.counts[...] = 0

    def index(self, i, j):
        """Clamp a score pair onto the grid; values past the edge land on the boundary cell."""
        top = self.max_score - 1
        i = 0 if i < 0 else top if i > top else int(i)
        j = 0 if j < 0 else top if j > top else int(j)
        return i, j

    def get(self, i, j):
        return int(self.counts[self.index(i, j)])

    def set(self, i, j, k):
        self.counts[self.index(i, j)] = k

    def incr(self, i, j):
        self.counts[self.index(i, j)] += 1

    def add(self, item):
        """Count one game's Score, or merge another JointHistogram cell by cell."""
        if isinstance(item, JointHistogram):
            self.merge(item)
        else:
            self.incr(item.away, item.home)

    def merge(self, other):
        if other.max_score != self.max_score:
            raise ValueError(f"cannot merge histograms of size {other.max_score} into {self.max_score}")
        self.counts += other.counts

    def total(self):
        return int(self.counts.sum())

    # -------------------------------------------------------------------------
    # summaries
    # -------------------------------------------------------------------------
    def probabilities(self):
        n = self.total()
        if n == 0:
            raise ValueError("histogram is empty")
        return self.counts / n

    def marginals(self):
        """Run distributions (counts) for the away and home side."""
        return self.counts.sum(axis=1), self.counts.sum(axis=0)

    def home_wins(self):
        # home > away lies strictly above the diagonal
        return int(np.triu(self.counts, k=1).sum())

    def home_win_probability(self):
        n = self.total()
        if n == 0:
            raise ValueError("histogram is empty")
        return self.home_wins() / n

    def win_probability_interval(self, q=0.95):
        """
        Central `q` credible interval for the home win probability.

        Posterior Beta(wins + 1, losses + 1) under a uniform prior.
        """
        wins = self.home_wins()
        losses = self.total() - wins
        lo = beta.ppf((1 - q) / 2, wins + 1, losses + 1)
        hi = beta.ppf((1 + q) / 2, wins + 1, losses + 1)
        return float(lo), float(hi)

    def most_probable_score(self):
        """
        Most frequent run total of each side, taken from its own marginal.

        Ties go to the lowest run total, not to whichever total reached the
        top count first during the run.
        """
        if self.total() == 0:
            raise ValueError("histogram is empty")
        away, home = self.marginals()
        return int(np.argmax(away)), int(np.argmax(home))

    def mean_runs(self):
        if self.total() == 0:
            raise ValueError("histogram is empty")
        away, home = self.marginals()
        runs = np.arange(self.max_score)
        n = self.total()
        return float(runs @ away / n), float(runs @ home / n)

    def to_frame(self):
        """Non-empty cells as a DataFrame with columns away, home, count, probability."""
        away, home = np.nonzero(self.counts)
        df = pd.DataFrame({
            'away': away,
            'home': home,
            'count': self.counts[away, home],
        })
        total = df['count'].sum()
        df['probability'] = df['count'] / total if total else 0.0
        return df.sort_values(by=['away', 'home']).reset_index(drop=True)

    def summary(self):
        lo, hi = self.win_probability_interval()
        away_mean, home_mean = self.mean_runs()
        return {
            'games': self.total(),
            'home_win_probability': self.home_win_probability(),
            'ci_low': lo,
            'ci_high': hi,
            'most_probable_score': self.most_probable_score(),
            'away_mean_runs': away_mean,
            'home_mean_runs': home_mean,
        }

    def __eq__(self, other):
        if not isinstance(other, JointHistogram):
            return NotImplemented
        return self.max_score == other.max_score and np.array_equal(self.counts, other.counts)

    def __repr__(self):
        return f"JointHistogram(max_score={self.max_score}, games={self.total()})"
