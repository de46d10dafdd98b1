import random

import pytest

from obpslg.config import ModelParams
from obpslg.player import OutcomeFrequencies, Player
from obpslg.team import Team


class ScriptedRandom(random.Random):
    """
    Deterministic random source. randrange returns the scripted draws in order;
    random returns the scripted rolls, then 0.99 once they run out.
    """

    def __init__(self, draws=(), rolls=()):
        super().__init__(0)
        self.draws = list(draws)
        self.rolls = list(rolls)

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        if not self.draws:
            raise AssertionError("ScriptedRandom ran out of plate appearance draws")
        return self.draws.pop(0)

    def random(self):  # type: ignore[override]
        if self.rolls:
            return self.rolls.pop(0)
        return 0.99


# One of each outcome, so a draw of n yields Outcome(n)
EVEN_FREQUENCIES = OutcomeFrequencies(7, 1, 1, 1, 1, 1, 1, 1)
STRIKEOUT_ONLY = OutcomeFrequencies(10, 10, 0, 0, 0, 0, 0, 0)
HOME_RUN_ONLY = OutcomeFrequencies(10, 0, 0, 0, 0, 0, 0, 10)

COLLINS_STATS = {
    'plate_appearances': 12087, 'strikeouts': 467, 'outs_in_play': 6729, 'walks_hbp': 1576,
    'singles': 2643, 'doubles': 438, 'triples': 187, 'home_runs': 47,
}
DEVERS_STATS = {
    'plate_appearances': 3614, 'strikeouts': 747, 'outs_in_play': 1626, 'walks_hbp': 322,
    'singles': 519, 'doubles': 221, 'triples': 7, 'home_runs': 172,
}


def make_lineup(frequencies, size=9, name="P"):
    return [Player(f"{name}{slot + 1}", frequencies) for slot in range(size)]


def make_team(name, frequencies, size=9):
    return Team(name, make_lineup(frequencies, size, name))


@pytest.fixture
def params():
    return ModelParams(productive_out_ratio=0.3, double_play_ratio=0.1, infield_hit_ratio=0.2)


@pytest.fixture
def season_config():
    return {
        'teams': [
            {'name': 'High OBP', 'stats': dict(COLLINS_STATS)},
            {'name': 'High SLG', 'stats': dict(DEVERS_STATS)},
        ],
        'simulation_params': {
            'num_games': 12,
            'series_length': 3,
            'lineup_size': 9,
            'max_innings': 60,
        },
    }
