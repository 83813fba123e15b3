import math

from errors import InvalidStatsError


def _check_counts(owner, **counts):
    for field, value in counts.items():
        if not math.isfinite(value):
            raise InvalidStatsError(f"{owner} {field} must be finite, got {value}")
        if value < 0:
            raise InvalidStatsError(f"{owner} {field} must be non-negative, got {value}")


class Pitcher:
    FIELDS = ('H', 'BB', 'SO', 'BF')

    def __init__(self, hits, walks, strikeouts, batters_faced):
        """
        :param hits: hits allowed over the season (H)
        :param walks: walks allowed (BB)
        :param strikeouts: strikeouts (SO)
        :param batters_faced: batters faced (BF), must be positive
        """
        _check_counts('pitcher', H=hits, BB=walks, SO=strikeouts, BF=batters_faced)
        if batters_faced == 0:
            raise InvalidStatsError("pitcher BF must be positive")
        self.hits = float(hits)
        self.walks = float(walks)
        self.strikeouts = float(strikeouts)
        self.batters_faced = float(batters_faced)

    @classmethod
    def from_fields(cls, values):
        return cls(*values)

    @property
    def hit_rate(self):
        return self.hits / self.batters_faced

    @property
    def walk_rate(self):
        return self.walks / self.batters_faced

    @property
    def strikeout_rate(self):
        return self.strikeouts / self.batters_faced

    def __repr__(self):
        return (f"Pitcher(H={self.hits:g}, BB={self.walks:g}, "
                f"SO={self.strikeouts:g}, BF={self.batters_faced:g})")


class Batter:
    FIELDS = ('AB', 'H', '2B', '3B', 'HR', 'SO', 'BA')

    def __init__(self, at_bats, hits, doubles, triples, home_runs, strikeouts, average):
        """
        :param at_bats: at-bats (AB), must be positive
        :param hits: hits (H); expected to cover doubles + triples + home runs
        :param average: batting average (BA), used directly as the batter's hit rate
        """
        _check_counts('batter', AB=at_bats, H=hits, TWOB=doubles, THREEB=triples,
                      HR=home_runs, SO=strikeouts, BA=average)
        if at_bats == 0:
            raise InvalidStatsError("batter AB must be positive")
        self.at_bats = float(at_bats)
        self.hits = float(hits)
        self.doubles = float(doubles)
        self.triples = float(triples)
        self.home_runs = float(home_runs)
        self.strikeouts = float(strikeouts)
        self.average = float(average)

    @classmethod
    def from_fields(cls, values):
        return cls(*values)

    @property
    def strikeout_rate(self):
        return self.strikeouts / self.at_bats

    def extra_base_shares(self):
        """Share of hits that went for 2B, 3B and HR (all zero without hits)."""
        if self.hits <= 0:
            return 0.0, 0.0, 0.0
        return (self.doubles / self.hits,
                self.triples / self.hits,
                self.home_runs / self.hits)

    def __repr__(self):
        return (f"Batter(AB={self.at_bats:g}, H={self.hits:g}, 2B={self.doubles:g}, "
                f"3B={self.triples:g}, HR={self.home_runs:g}, SO={self.strikeouts:g}, "
                f"BA={self.average:.3f})")
