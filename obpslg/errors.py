# obpslg/errors.py


class ConfigurationError(ValueError):
    """Malformed input data or simulation parameters. Raised before any game is played."""


class ModelInvariantError(RuntimeError):
    """The outcome model produced something outside the seven known outcome kinds."""


class InningLimitExceeded(RuntimeError):
    """A game went past the configured maximum number of innings."""

    def __init__(self, game_id, max_innings, away_runs, home_runs):
        self.game_id = game_id
        self.max_innings = max_innings
        self.away_runs = away_runs
        self.home_runs = home_runs
        super().__init__(
            f"Game {game_id} still tied {away_runs}-{home_runs} after {max_innings} innings."
        )
