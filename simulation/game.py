from dataclasses import dataclass

from config import MIN_INNINGS, OVERTIME_AFTER, REGULATION_INNINGS
from .inning_simulator import InningSimulator
from .random_source import make_rng


@dataclass
class Score:
    away: int = 0
    home: int = 0

    @property
    def tied(self) -> bool:
        return self.away == self.home

    @property
    def home_won(self) -> bool:
        return self.home > self.away


class Game:
    def __init__(self, away, home, rng=None):
        self.away = away
        self.home = home
        self.inning_simulator = InningSimulator(make_rng(rng))
        self.line_score = {'away': [], 'home': []}

    def simulate_game(self):
        """
        Play innings until at least 10 have been started and the score is not tied.

        Home skips its half once the regulation innings are done and it already
        leads. Half-innings from inning index 10 on use the tiebreak start.
        """
        score = Score()
        self.line_score = {'away': [], 'home': []}
        inning = 0
        while inning < MIN_INNINGS or score.tied:
            overtime = inning > OVERTIME_AFTER
            runs = self.inning_simulator.simulate_inning(self.away, self.home, overtime)
            score.away += runs
            self.line_score['away'].append(runs)
            if inning < REGULATION_INNINGS or score.away >= score.home:
                runs = self.inning_simulator.simulate_inning(self.home, self.away, overtime)
                score.home += runs
                self.line_score['home'].append(runs)
            inning += 1
        return score

    @property
    def innings_played(self):
        return len(self.line_score['away'])
