import sys
from pathlib import Path

import pytest

# Ensure project root is on the path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from config import DATA_DIR
from models.player import Batter, Pitcher
from models.team import Team

TEAMS_DIR = DATA_DIR / "teams"


class ScriptedRandom:
    """Stand-in for a Generator: returns scripted draws, repeating the last one forever."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


class NoDraws:
    def random(self):
        raise AssertionError("no random draw expected")


def make_pitcher(H=180, BB=60, SO=170, BF=800):
    return Pitcher(H, BB, SO, BF)


def make_batter(AB=500, H=125, TWOB=25, THREEB=2, HR=15, SO=110, BA=0.250):
    return Batter(AB, H, TWOB, THREEB, HR, SO, BA)


def make_team(pitcher=None, batter_kwargs=None, name=None):
    pitcher = pitcher or make_pitcher()
    lineup = [make_batter(**(batter_kwargs or {})) for _ in range(9)]
    return Team(pitcher, lineup, name=name)


def slugger_team():
    """Batters that homer or fly out; their pitcher fans every hitter it faces."""
    return make_team(
        pitcher=make_pitcher(H=0, BB=0, SO=100, BF=100),
        batter_kwargs=dict(AB=10, H=10, TWOB=0, THREEB=0, HR=10, SO=0, BA=1.0),
        name="sluggers",
    )


def whiffer_team():
    """Batters that always strike out; their pitcher allows a 50% hit rate to sluggers."""
    return make_team(
        pitcher=make_pitcher(H=25, BB=0, SO=0, BF=100),
        batter_kwargs=dict(AB=10, H=0, TWOB=0, THREEB=0, HR=0, SO=10, BA=0.25),
        name="whiffers",
    )


def write_team_file(path, pitcher_fields, batter_fields, n_batters=9):
    lines = [" ".join(str(v) for v in pitcher_fields)]
    lines += [" ".join(str(v) for v in batter_fields)] * n_batters
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def away_path():
    return TEAMS_DIR / "away.txt"


@pytest.fixture
def home_path():
    return TEAMS_DIR / "home.txt"


@pytest.fixture
def average_path():
    return TEAMS_DIR / "average.txt"


@pytest.fixture
def scripted_paths(tmp_path):
    """Team files for the slugger/whiffer matchup used in traced games."""
    away = write_team_file(tmp_path / "sluggers.txt", (0, 0, 100, 100), (10, 10, 0, 0, 10, 0, 1.0))
    home = write_team_file(tmp_path / "whiffers.txt", (25, 0, 0, 100), (10, 0, 0, 0, 0, 10, 0.25))
    return away, home
