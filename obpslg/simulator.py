# obpslg/simulator.py

import logging
import os
import random

import yaml

from .config import ModelParams, load_config
from .constants import *
from .errors import ConfigurationError
from .game import Game
from .narration import PlayByPlayLog
from .player import OutcomeFrequencies
from .team import Team

logger = logging.getLogger(__name__)


def home_team_index(game_number, series_length=DEFAULT_SERIES_LENGTH):
    """
    Index (0 or 1) of the home team for a 1-based game number.

    Home field alternates in blocks of series_length games: the first team hosts
    games 1..series_length, the second team hosts the next block, and so on.
    """
    if game_number < 1:
        raise ValueError(f"game_number is 1-based, got {game_number}.")
    return ((game_number - 1) // series_length) % 2


def _positive_int(sim_params, key, default, allow_none=False):
    value = sim_params.get(key, default)
    if value is None and allow_none:
        return None
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ConfigurationError(f"Simulation parameter '{key}' must be a positive integer, got {value!r}.")
    return value


class Simulator:
    """Runs a season between the two configured teams and keeps the results."""

    def __init__(self, config_path=None, config=None):
        if config is None:
            if config_path is None:
                raise ValueError("Simulator needs either config_path or config.")
            config = load_config(config_path)
        self.config_path = config_path
        self.config = config
        self.simulation_params = dict(self.config.get('simulation_params') or {})
        self.model_params = ModelParams.from_sim_params(self.simulation_params)
        self.num_games = _positive_int(self.simulation_params, 'num_games', DEFAULT_NUM_GAMES)
        self.series_length = _positive_int(self.simulation_params, 'series_length', DEFAULT_SERIES_LENGTH)
        self.lineup_size = _positive_int(self.simulation_params, 'lineup_size', DEFAULT_LINEUP_SIZE)
        self.innings_per_game = _positive_int(self.simulation_params, 'innings_per_game', DEFAULT_INNINGS_PER_GAME)
        self.max_innings = _positive_int(self.simulation_params, 'max_innings', DEFAULT_MAX_INNINGS, allow_none=True)
        if self.max_innings is not None and self.max_innings < self.innings_per_game:
            raise ConfigurationError(
                f"max_innings ({self.max_innings}) cannot be below innings_per_game ({self.innings_per_game}).")
        self.reset_batting_order = bool(self.simulation_params.get('reset_batting_order_each_game', False))
        self.team_specs = self._load_team_specs()

        self.teams = []
        self.results = []  # One dict per game; includes play-by-play lines when verbose
        self.seed = None

    def _load_team_specs(self):
        """Validates the two team entries and builds their outcome frequencies."""
        team_data = self.config.get('teams') or []
        if len(team_data) != 2:
            raise ConfigurationError(f"Configuration must list exactly 2 teams, found {len(team_data)}.")

        specs = []
        for entry in team_data:
            try:
                name = entry['name']
                frequencies = OutcomeFrequencies.from_stats(entry['stats'])
            except KeyError as e:
                logger.error(f"Missing key {e} in team data: {entry}")
                raise ConfigurationError(f"Missing key {e} in team data.") from e
            except ConfigurationError as e:
                raise ConfigurationError(f"Team {entry.get('name', '?')}: {e}") from e
            logger.debug(f"Loaded team spec: {name} -> {frequencies}")
            specs.append((name, frequencies))

        if specs[0][0] == specs[1][0]:
            raise ConfigurationError(f"Both teams are named '{specs[0][0]}'; team names must differ.")
        logger.info(f"Loaded teams: {specs[0][0]} and {specs[1][0]}.")
        return specs

    def build_teams(self):
        return [Team.from_frequencies(name, freqs, self.lineup_size) for name, freqs in self.team_specs]

    def run_season(self, num_games=None, seed=None, verbose=False):
        """
        Plays a full season with fresh teams and a freshly seeded random source.
        Returns the two teams with their records and batting histories filled in.
        """
        num_games = num_games if num_games is not None else self.num_games
        if num_games <= 0:
            raise ConfigurationError(f"num_games must be positive, got {num_games}.")
        self.seed = seed if seed is not None else self.simulation_params.get('seed')
        rng = random.Random(self.seed)

        self.teams = self.build_teams()
        self.results = []
        play_by_play = PlayByPlayLog() if verbose else None

        logger.info(f"Starting season of {num_games} game(s): {self.teams[0].name} vs {self.teams[1].name} "
                    f"(seed={self.seed})")
        for game_number in range(1, num_games + 1):
            home_idx = home_team_index(game_number, self.series_length)
            home, away = self.teams[home_idx], self.teams[1 - home_idx]
            if self.reset_batting_order:
                home.next_batter = away.next_batter = 0

            game = Game(game_id=game_number,
                        away=away,
                        home=home,
                        rng=rng,
                        params=self.model_params,
                        innings_per_game=self.innings_per_game,
                        max_innings=self.max_innings,
                        observer=play_by_play)
            result = game.run_game()

            game_record = result.as_dict()
            if play_by_play is not None:
                game_record['log'] = play_by_play.lines_for(game_number)
            self.results.append(game_record)

            if num_games >= 10 and game_number % (num_games // 10) == 0:
                logger.info(f"Simulated game {game_number}/{num_games}...")

        for team in self.teams:
            logger.info(f"Season finished: {team.name} {team.record}, {team.runs} runs")
        return self.teams

    def season_summary(self):
        """Per-team records, batting lines and outcome counts for the last season run."""
        if not self.teams:
            raise RuntimeError("No season has been run yet.")
        teams = {}
        for team in self.teams:
            line = team.stat_line()
            teams[team.name] = {
                "wins": team.wins,
                "losses": team.losses,
                "record": team.record,
                "winning_percentage": team.winning_percentage,
                "runs": team.runs,
                "batting": line.as_dict(),
                "players": {player.name: player.stat_line().as_dict() for player in team.lineup},
            }
        season = {
            "games": len(self.results),
            "extra_inning_games": sum(1 for r in self.results if 'innings' in r),
            "walk_off_games": sum(1 for r in self.results if r.get('walk_off')),
            "seed": self.seed,
        }
        return {"teams": teams, "season": season}

    def save_results_yaml(self, output_path):
        """Saves the season summary and per-game results to the specified YAML file path."""
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.debug(f"Attempting to save season results (YAML) to: {output_path}")
        output_data = {
            "simulation_summary": self.season_summary(),
            "model_params": {
                "productive_out_ratio": self.model_params.productive_out_ratio,
                "double_play_ratio": self.model_params.double_play_ratio,
                "infield_hit_ratio": self.model_params.infield_hit_ratio,
            },
            "game_details": self.results,
        }
        try:
            with open(output_path, 'w') as f:
                yaml.safe_dump(output_data, f, default_flow_style=False, sort_keys=False, indent=2)
            logger.info(f"YAML results saved to {output_path}.")
        except IOError as e:
            logger.error(f"Error writing YAML results to file {output_path}: {e}")
            raise
