# obpslg/constants.py

from enum import IntEnum


class Outcome(IntEnum):
    """Plate appearance outcomes. Order matches the cumulative threshold table."""

    STRIKEOUT = 0
    OUT_IN_PLAY = 1
    WALK_OR_HBP = 2
    SINGLE = 3
    DOUBLE = 4
    TRIPLE = 5
    HOME_RUN = 6

    @property
    def reaches_base(self):
        return self > Outcome.OUT_IN_PLAY

    @property
    def is_hit(self):
        return self > Outcome.WALK_OR_HBP

    @property
    def is_at_bat(self):
        # Walks and hit-by-pitches are not official at-bats
        return self != Outcome.WALK_OR_HBP

    @property
    def bases_awarded(self):
        """Total bases credited to the batter (0 for anything but a hit)."""
        return int(self) - 2 if self.is_hit else 0


# Fixed order of the stats used to build the threshold table
OUTCOME_STAT_KEYS = [
    ('strikeouts', Outcome.STRIKEOUT),
    ('outs_in_play', Outcome.OUT_IN_PLAY),
    ('walks_hbp', Outcome.WALK_OR_HBP),
    ('singles', Outcome.SINGLE),
    ('doubles', Outcome.DOUBLE),
    ('triples', Outcome.TRIPLE),
    ('home_runs', Outcome.HOME_RUN),
]

# Bases
FIRST_BASE = 0
SECOND_BASE = 1
THIRD_BASE = 2

OUTS_PER_INNING = 3

# Play labels produced by the base state machine
PLAY_STRIKEOUT = "strikeout"
PLAY_OUT_IN_PLAY = "out_in_play"
PLAY_DOUBLE_PLAY = "double_play"
PLAY_PRODUCTIVE_OUT = "productive_out"
PLAY_WALK = "walk"
PLAY_SINGLE = "single"  # walk-off before the infield/outfield roll
PLAY_INFIELD_SINGLE = "infield_single"
PLAY_OUTFIELD_SINGLE = "outfield_single"
PLAY_DOUBLE = "double"
PLAY_TRIPLE = "triple"
PLAY_HOME_RUN = "home_run"

# 2023 MLB league averages
# Productive outs / total outs. Sacrifice flies are counted here, so they count against AVG and SLG.
DEFAULT_PRODUCTIVE_OUT_RATIO = 4456 / 16633
# Double plays / double play opportunities
DEFAULT_DOUBLE_PLAY_RATIO = 3466 / 34097
# Infield singles / outfield singles
DEFAULT_INFIELD_HIT_RATIO = 4480 / 26031

# Season defaults
DEFAULT_NUM_GAMES = 162
DEFAULT_SERIES_LENGTH = 3
DEFAULT_LINEUP_SIZE = 9
DEFAULT_INNINGS_PER_GAME = 9
DEFAULT_MAX_INNINGS = 100
