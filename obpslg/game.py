# obpslg/game.py

import logging
from dataclasses import dataclass

from .constants import DEFAULT_INNINGS_PER_GAME
from .errors import ConfigurationError, InningLimitExceeded
from .inning import simulate_half_inning

logger = logging.getLogger(__name__)

TOP = "top"
BOTTOM = "bottom"


@dataclass(frozen=True)
class GameResult:
    game_id: int
    away: str
    home: str
    away_runs: int
    home_runs: int
    innings: int
    regulation_innings: int = DEFAULT_INNINGS_PER_GAME
    walk_off: bool = False

    @property
    def winner(self):
        return self.away if self.away_runs > self.home_runs else self.home

    @property
    def extra_innings(self):
        return self.innings > self.regulation_innings

    def as_dict(self):
        data = {
            "game_id": self.game_id,
            "away": self.away,
            "home": self.home,
            "away_runs": self.away_runs,
            "home_runs": self.home_runs,
            "winner": self.winner,
        }
        if self.extra_innings:
            data["innings"] = self.innings
        if self.walk_off:
            data["walk_off"] = True
        return data


class GameObserver:
    """Receives structured game events. Subclasses override the hooks they care about."""

    def half_inning_started(self, game_id, inning, half, batting_team, away_runs, home_runs):
        pass

    def plate_appearance(self, event):
        pass

    def game_finished(self, result):
        pass


class Game:
    """Simulates a single game between two teams."""

    def __init__(self, game_id, away, home, rng, params,
                 innings_per_game=DEFAULT_INNINGS_PER_GAME, max_innings=None, observer=None):
        if max_innings is not None and max_innings < innings_per_game:
            raise ConfigurationError(f"max_innings ({max_innings}) cannot be below innings_per_game ({innings_per_game}).")
        self.game_id = game_id
        self.away = away
        self.home = home
        self.rng = rng
        self.params = params
        self.innings_per_game = innings_per_game
        self.max_innings = max_innings
        self.observer = observer or GameObserver()

        # Game State
        self.inning = 1
        self.away_runs = 0
        self.home_runs = 0
        self.walk_off = False

    def _play_half(self, half, can_walk_off=False):
        team = self.away if half == TOP else self.home
        self.observer.half_inning_started(self.game_id, self.inning, half, team.name,
                                          self.away_runs, self.home_runs)
        result = simulate_half_inning(
            team.next_batter,
            team.lineup,
            self.rng,
            self.params,
            can_walk_off=can_walk_off,
            deficit=self.away_runs - self.home_runs,
            observer=self.observer.plate_appearance,
        )
        team.next_batter = result.next_batter
        if half == TOP:
            self.away_runs += result.runs
        else:
            self.home_runs += result.runs
            self.walk_off = result.walk_off

    def run_game(self):
        """Plays the game to completion and updates both teams' runs and records."""
        logger.debug(f"--- Starting Game {self.game_id}: {self.away.name} at {self.home.name} ---")

        # Early innings: both halves, nobody can walk off
        while self.inning < self.innings_per_game:
            self._play_half(TOP)
            self._play_half(BOTTOM)
            self.inning += 1

        while True:
            if self.max_innings is not None and self.inning > self.max_innings:
                raise InningLimitExceeded(self.game_id, self.max_innings, self.away_runs, self.home_runs)
            self._play_half(TOP)
            # Home bats unless already ahead
            if self.away_runs >= self.home_runs:
                self._play_half(BOTTOM, can_walk_off=True)
            if self.away_runs != self.home_runs:
                break
            self.inning += 1

        result = GameResult(
            game_id=self.game_id,
            away=self.away.name,
            home=self.home.name,
            away_runs=self.away_runs,
            home_runs=self.home_runs,
            innings=self.inning,
            regulation_innings=self.innings_per_game,
            walk_off=self.walk_off,
        )
        self._record(result)
        self.observer.game_finished(result)

        extra = f" in {result.innings} innings" if result.extra_innings else ""
        logger.debug(f"--- Game {self.game_id} Over --- Final Score: {self.away.name} {self.away_runs} - "
                     f"{self.home_runs} {self.home.name}{extra}")
        return result

    def _record(self, result):
        self.away.runs += result.away_runs
        self.home.runs += result.home_runs
        if result.away_runs > result.home_runs:
            self.away.wins += 1
            self.home.losses += 1
        else:
            self.away.losses += 1
            self.home.wins += 1
