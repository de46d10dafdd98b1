# obpslg/team.py

import logging

from .constants import DEFAULT_LINEUP_SIZE
from .errors import ConfigurationError
from .player import Player
from .stats import StatLine, winning_percentage

logger = logging.getLogger(__name__)


class Team:
    """A fixed batting order plus the team's season totals."""

    def __init__(self, name, lineup):
        if not lineup:
            raise ConfigurationError(f"Team {name} needs at least one player in its lineup.")
        self.name = name
        self.lineup = list(lineup)
        self.runs = 0
        self.wins = 0
        self.losses = 0
        self.next_batter = 0  # Lineup index leading off the team's next half-inning

    @classmethod
    def from_frequencies(cls, name, frequencies, lineup_size=DEFAULT_LINEUP_SIZE):
        """Fills every lineup slot with a copy of the same hitter, each keeping its own history."""
        if lineup_size <= 0:
            raise ConfigurationError(f"lineup_size must be positive, got {lineup_size}.")
        lineup = [Player(f"{name} #{slot + 1}", frequencies) for slot in range(lineup_size)]
        logger.debug(f"Built team {name} with {lineup_size} copies of {frequencies}")
        return cls(name, lineup)

    def stat_line(self):
        total = StatLine()
        for player in self.lineup:
            total = total + player.stat_line()
        return total

    @property
    def games_played(self):
        return self.wins + self.losses

    @property
    def record(self):
        """Win-loss record, e.g. '90-72'."""
        return f"{self.wins}-{self.losses}"

    @property
    def winning_percentage(self):
        return winning_percentage(self.wins, self.losses)

    def __repr__(self):
        return f"Team({self.name!r}, {self.record}, runs={self.runs})"
