import logging
from pathlib import Path

import numpy as np

from config import LINEUP_SIZE
from errors import TeamDataError
from models.player import Batter, Pitcher

logger = logging.getLogger(__name__)

PITCHER_TOKENS = len(Pitcher.FIELDS)
BATTER_TOKENS = len(Batter.FIELDS)


def read_tokens(path):
    """Numeric tokens of a team file in reading order; `#` starts a comment."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise TeamDataError(f"cannot read team file ({exc.strerror})", path) from exc

    tokens = []
    for line in text.splitlines():
        tokens.extend(line.split('#', 1)[0].split())
    try:
        values = np.array(tokens, dtype=float)
    except ValueError as exc:
        raise TeamDataError(f"non-numeric token in team file: {exc}", path) from None
    if not np.isfinite(values).all():
        bad = [tok for tok, v in zip(tokens, values) if not np.isfinite(v)]
        raise TeamDataError(f"non-finite value in team file: {bad[0]!r}", path)
    return values


class Team:
    def __init__(self, pitcher, lineup, name=None):
        """
        :param pitcher: Pitcher who throws the whole game for this team
        :param lineup: nine Batter objects in batting order
        """
        if len(lineup) != LINEUP_SIZE:
            raise TeamDataError(f"a lineup needs {LINEUP_SIZE} batters, got {len(lineup)}")
        self.name = name
        self.pitcher = pitcher
        self.lineup = list(lineup)
        self.batter_index = 0  # carries over between innings and games

    @classmethod
    def from_file(cls, path):
        tokens = read_tokens(path)
        needed = PITCHER_TOKENS + LINEUP_SIZE * BATTER_TOKENS
        if tokens.size < needed:
            found = max(tokens.size - PITCHER_TOKENS, 0) // BATTER_TOKENS
            raise TeamDataError(
                f"expected a pitcher line and {LINEUP_SIZE} batter lines, "
                f"found {found} complete batter records", path)

        pitcher = Pitcher.from_fields(tokens[:PITCHER_TOKENS])
        rows = tokens[PITCHER_TOKENS:needed].reshape(LINEUP_SIZE, BATTER_TOKENS)
        lineup = [Batter.from_fields(row) for row in rows]
        logger.debug("Loaded team %s: %r, %d batters", path, pitcher, len(lineup))
        return cls(pitcher, lineup, name=Path(path).stem)

    def current_pitcher(self):
        return self.pitcher

    def next_batter(self):
        batter = self.lineup[self.batter_index]
        self.batter_index = (self.batter_index + 1) % LINEUP_SIZE
        return batter

    def __repr__(self):
        return f"Team({self.name!r}, due_up={self.batter_index + 1})"
