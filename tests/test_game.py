"""Tests for half-innings and full games."""

import numpy as np

from conftest import ScriptedRandom, make_team, slugger_team, whiffer_team
from simulation.game import Game, Score
from simulation.inning_simulator import InningSimulator


class FakeInnings:
    """Replaces the InningSimulator with scripted half-inning run totals."""

    def __init__(self, game, away_runs, home_runs):
        self.game = game
        self.runs = {'away': list(away_runs), 'home': list(home_runs)}
        self.calls = []

    def simulate_inning(self, offense, defense, overtime=False):
        side = 'away' if offense is self.game.away else 'home'
        self.calls.append((side, overtime))
        return self.runs[side].pop(0) if self.runs[side] else 0


def scripted_game(away_runs, home_runs):
    game = Game(make_team(), make_team(), rng=0)
    fake = FakeInnings(game, away_runs, home_runs)
    game.inning_simulator = fake
    return game, fake


class TestHalfInning:
    def test_exactly_three_outs(self):
        sim = InningSimulator(np.random.default_rng(11))
        away, home = make_team(), make_team()
        for _ in range(200):
            sim.simulate_inning(away, home)
            assert sim.outs == 3

    def test_three_up_three_down(self):
        sim = InningSimulator(ScriptedRandom(0.5))
        home, away = whiffer_team(), slugger_team()
        assert sim.simulate_inning(home, away) == 0
        assert sim.at_bats == 3
        assert home.batter_index == 3

    def test_lineup_continues_between_innings(self):
        sim = InningSimulator(ScriptedRandom(0.5))
        home, away = whiffer_team(), slugger_team()
        for _ in range(4):
            sim.simulate_inning(home, away)
        assert home.batter_index == 12 % 9

    def test_overtime_runner_scores_on_home_run(self):
        sim = InningSimulator(ScriptedRandom(0.1, 0.9))
        runs = sim.simulate_inning(slugger_team(), whiffer_team(), overtime=True)
        assert runs == 2


class TestGame:
    def test_traced_game(self):
        # away homers on its first at-bat and flies out ever after; home always strikes out
        away, home = slugger_team(), whiffer_team()
        score = Game(away, home, rng=ScriptedRandom(0.1, 0.9)).simulate_game()
        assert score == Score(1, 0)
        assert away.batter_index == (4 + 9 * 3) % 9
        assert home.batter_index == (10 * 3) % 9

    def test_traced_line_score(self):
        game = Game(slugger_team(), whiffer_team(), rng=ScriptedRandom(0.1, 0.9))
        game.simulate_game()
        assert game.line_score['away'] == [1] + [0] * 9
        assert game.line_score['home'] == [0] * 10
        assert game.innings_played == 10

    def test_random_games_never_tie(self):
        game = Game(make_team(), make_team(), rng=np.random.default_rng(5))
        for _ in range(300):
            score = game.simulate_game()
            assert not score.tied
            assert len(game.line_score['away']) >= 10
            assert len(game.line_score['home']) >= 9
            assert sum(game.line_score['away']) == score.away
            assert sum(game.line_score['home']) == score.home

    def test_home_only_skips_when_leading(self):
        game = Game(make_team(), make_team(), rng=np.random.default_rng(8))
        for _ in range(300):
            score = game.simulate_game()
            skipped = len(game.line_score['home']) < len(game.line_score['away'])
            assert len(game.line_score['away']) - len(game.line_score['home']) in (0, 1)
            if skipped:
                assert score.home_won

    def test_same_seed_same_game(self):
        first = Game(make_team(), make_team(), rng=42).simulate_game()
        second = Game(make_team(), make_team(), rng=42).simulate_game()
        assert first == second


class TestGameRules:
    def test_home_leading_skips_last_half(self):
        game, fake = scripted_game([0] * 10, [1])
        assert game.simulate_game() == Score(0, 1)
        assert [side for side, _ in fake.calls].count('away') == 10
        assert [side for side, _ in fake.calls].count('home') == 9

    def test_trailing_home_bats_in_tenth(self):
        game, fake = scripted_game([1], [])
        assert game.simulate_game() == Score(1, 0)
        assert [side for side, _ in fake.calls].count('home') == 10

    def test_tiebreak_starts_at_inning_index_ten(self):
        # scoreless through eleven innings, away scores in the twelfth
        game, fake = scripted_game([0] * 11 + [1], [])
        assert game.simulate_game() == Score(1, 0)
        assert len(fake.calls) == 24
        flags = [overtime for _, overtime in fake.calls]
        assert flags[:20] == [False] * 20
        assert flags[20:] == [True] * 4

    def test_walk_off_is_not_cut_short(self):
        # home trails by one into the tenth and scores three
        game, fake = scripted_game([1], [0] * 9 + [3])
        assert game.simulate_game() == Score(1, 3)
        assert game.innings_played == 10
