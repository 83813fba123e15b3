"""Entry points that turn two team files into a joint score histogram."""

import logging
import time

from models.team import Team
from .game import Game
from .histogram import JointHistogram
from .random_source import make_rng, spawn_rngs

logger = logging.getLogger(__name__)

STATUS_OK = 0.0


def compute_joint_runs_pdf(result, away, home, sims_n, rng=None):
    """Simulate `sims_n` games between two Teams, counting each final score into `result`."""
    game = Game(away, home, rng)
    for _ in range(sims_n):
        result.add(game.simulate_game())
    return result


def run_simulations(data_buffer, away_path, home_path, sims_n, rng=None):
    """
    Fill a caller-owned buffer with the joint score histogram.

    :param data_buffer: writable storage of config.buffer_size() integers; zeroed first
    :param away_path: team file of the visiting side
    :param home_path: team file of the home side
    :param sims_n: number of games to simulate
    :param rng: seed or Generator; fresh entropy when omitted
    :return: status value, 0.0 on success
    """
    result = JointHistogram(data_buffer)
    away = Team.from_file(away_path)
    home = Team.from_file(home_path)

    t0 = time.perf_counter()
    logger.info("Simulating %d games: %s at %s", sims_n, away.name, home.name)
    compute_joint_runs_pdf(result, away, home, sims_n, rng)
    logger.info("Finished %d games in %.3fs", sims_n, time.perf_counter() - t0)
    return STATUS_OK


def simulate_matchup(away_path, home_path, sims_n, seed=None, max_score=None):
    """Run `sims_n` games on a single stream and return a new JointHistogram."""
    result = JointHistogram(max_score=max_score)
    away = Team.from_file(away_path)
    home = Team.from_file(home_path)
    compute_joint_runs_pdf(result, away, home, sims_n, make_rng(seed))
    return result


def simulate_sharded(away_path, home_path, sims_n, shards, seed=None, max_score=None):
    """
    Split `sims_n` games into `shards` batches with independent streams and merge them.

    Each batch gets its own lineups and its own child of `seed`, so batches
    share no state and the merged result does not depend on merge order.
    """
    if shards < 1:
        raise ValueError(f"shards must be at least 1, got {shards}")
    sizes = [sims_n // shards + (1 if k < sims_n % shards else 0) for k in range(shards)]

    t0 = time.perf_counter()
    result = JointHistogram(max_score=max_score)
    for k, (size, rng) in enumerate(zip(sizes, spawn_rngs(seed, shards))):
        partial = JointHistogram(max_score=result.max_score)
        away = Team.from_file(away_path)
        home = Team.from_file(home_path)
        compute_joint_runs_pdf(partial, away, home, size, rng)
        logger.debug("Shard %d/%d: %d games", k + 1, shards, size)
        result.add(partial)
    logger.info("Merged %d shards (%d games) in %.3fs", shards, sims_n, time.perf_counter() - t0)
    return result
