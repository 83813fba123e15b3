"""Exceptions raised by the score simulator."""


class SimulationError(Exception):
    """Base class for simulator errors."""


class TeamDataError(SimulationError, ValueError):
    """A team file is missing, short, or holds non-numeric tokens."""

    def __init__(self, message, path=None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class InvalidStatsError(SimulationError, ValueError):
    """A stat line cannot produce a valid outcome distribution."""
