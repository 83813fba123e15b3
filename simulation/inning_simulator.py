from .field import Field
from .outcome import OutcomeSampler


class InningSimulator:
    def __init__(self, rng):
        self.sampler = OutcomeSampler(rng)
        self.reset_inning()

    def reset_inning(self, overtime=False):
        self.field = Field(overtime)
        self.outs = 0
        self.at_bats = 0

    def simulate_inning(self, offense, defense, overtime=False):
        """
        Play one half-inning and return the runs scored.

        :param offense: batting Team; its lineup keeps rotating across calls
        :param defense: fielding Team, supplies the pitcher
        :param overtime: start with a runner on second (extra-inning tiebreak)
        """
        self.reset_inning(overtime)
        while self.outs < 3:
            pitcher = defense.current_pitcher()
            batter = offense.next_batter()
            if self.sampler.simulate_at_bat(self.field, pitcher, batter):
                self.outs += 1
            self.at_bats += 1
        return self.field.runs()
