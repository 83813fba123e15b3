from .random_source import weighted_index

BASES = ('1st', '2nd', '3rd')


class Field:
    """Runners on base and runs scored during one half-inning."""

    def __init__(self, overtime=False):
        self.bases = {'1st': 0, '2nd': 0, '3rd': 0}
        self.run_counter = 0
        if overtime:
            # tiebreak: every extra half-inning opens with a runner on second
            self.bases['2nd'] = 1

    def advance(self, n):
        """Move the batter and every runner `n` bases, one base at a time."""
        for step in range(n):
            self.run_counter += self.bases['3rd']
            self.bases['3rd'] = self.bases['2nd']
            self.bases['2nd'] = self.bases['1st']
            self.bases['1st'] = 1 if step == 0 else 0

    def out(self, rng):
        """Erase one runner from an occupied base, chosen by occupancy weight."""
        occupied = sum(self.bases.values())
        if occupied == 0:
            return
        weights = [self.bases[base] / occupied for base in BASES]
        self.bases[BASES[weighted_index(rng, weights)]] = 0

    def runs(self):
        return self.run_counter

    def occupancy(self):
        return tuple(self.bases[base] for base in BASES)

    def __repr__(self):
        return f"Field(bases={self.occupancy()}, runs={self.run_counter})"
