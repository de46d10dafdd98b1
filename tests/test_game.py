import random

import pytest

from conftest import (
    COLLINS_STATS, DEVERS_STATS, EVEN_FREQUENCIES, HOME_RUN_ONLY, STRIKEOUT_ONLY,
    ScriptedRandom, make_team,
)
from obpslg.errors import ConfigurationError, InningLimitExceeded
from obpslg.game import BOTTOM, TOP, Game, GameObserver
from obpslg.player import OutcomeFrequencies, Player
from obpslg.team import Team


class RecordingObserver(GameObserver):
    def __init__(self):
        self.halves = []
        self.plate_appearances = []
        self.finished = []

    def half_inning_started(self, game_id, inning, half, batting_team, away_runs, home_runs):
        self.halves.append((inning, half, away_runs, home_runs))

    def plate_appearance(self, event):
        self.plate_appearances.append(event)

    def game_finished(self, result):
        self.finished.append(result)


def one_slugger_team(name):
    """Lineup whose leadoff hitter always homers and everyone else always strikes out."""
    lineup = [Player(f"{name}1", HOME_RUN_ONLY)]
    lineup += [Player(f"{name}{slot}", STRIKEOUT_ONLY) for slot in range(2, 10)]
    return Team(name, lineup)


def test_strikeout_teams_hit_the_inning_limit(params):
    away = make_team("A", STRIKEOUT_ONLY)
    home = make_team("H", STRIKEOUT_ONLY)
    game = Game(1, away, home, random.Random(1), params, max_innings=15)
    with pytest.raises(InningLimitExceeded) as excinfo:
        game.run_game()
    assert excinfo.value.max_innings == 15
    assert excinfo.value.away_runs == excinfo.value.home_runs == 0
    # Every inning up to the limit was played in full
    assert game.inning == 16


def test_tie_after_top_of_ninth_plays_bottom_half(params):
    observer = RecordingObserver()
    away = make_team("A", STRIKEOUT_ONLY)
    home = make_team("H", STRIKEOUT_ONLY)
    game = Game(1, away, home, random.Random(1), params, max_innings=9, observer=observer)
    with pytest.raises(InningLimitExceeded):
        game.run_game()
    assert (9, BOTTOM, 0, 0) in observer.halves


def test_home_lead_after_top_of_ninth_skips_bottom_half(params):
    observer = RecordingObserver()
    away = make_team("A", STRIKEOUT_ONLY)
    home = one_slugger_team("H")
    result = Game(1, away, home, random.Random(1), params, observer=observer).run_game()

    assert result.home_runs > 0
    assert result.away_runs == 0
    assert result.innings == 9
    assert not result.walk_off
    assert observer.halves[-1][:2] == (9, TOP)
    assert len(observer.halves) == 17
    assert (home.wins, home.losses, away.wins, away.losses) == (1, 0, 0, 1)


def test_away_lead_after_top_of_ninth_still_plays_bottom_half(params):
    observer = RecordingObserver()
    away = one_slugger_team("A")
    home = make_team("H", STRIKEOUT_ONLY)
    result = Game(1, away, home, random.Random(1), params, observer=observer).run_game()

    assert result.away_runs > result.home_runs == 0
    assert observer.halves[-1][:2] == (9, BOTTOM)
    assert result.winner == "A"
    assert away.runs == result.away_runs


def test_walk_off_home_run_in_the_ninth(params):
    away = make_team("A", EVEN_FREQUENCIES)
    home = make_team("H", EVEN_FREQUENCIES)
    # 8 scoreless innings and a scoreless top of the 9th, then a home run
    rng = ScriptedRandom([0] * 51 + [6])
    result = Game(1, away, home, rng, params).run_game()

    assert (result.away_runs, result.home_runs) == (0, 1)
    assert result.walk_off
    assert result.innings == 9
    assert not result.extra_innings
    # 27 away batters wrap to the top; home sent up 25, the last one being slot 7
    assert away.next_batter == 0
    assert home.next_batter == 7


def test_batting_order_carries_across_games(params):
    away = make_team("A", STRIKEOUT_ONLY, size=7)
    home = one_slugger_team("H")
    Game(1, away, home, random.Random(1), params).run_game()
    # 27 strikeouts through a 7-man order
    assert away.next_batter == 6

    observer = RecordingObserver()
    Game(2, away, home, random.Random(2), params, observer=observer).run_game()
    first_pa = observer.plate_appearances[0]
    assert first_pa.batter_index == 6
    assert first_pa.batter_name == "A7"


def test_extra_inning_game_reports_innings(params):
    rng = random.Random(5)
    freqs_a = OutcomeFrequencies.from_stats(COLLINS_STATS)
    freqs_b = OutcomeFrequencies.from_stats(DEVERS_STATS)
    away, home = make_team("A", freqs_a), make_team("B", freqs_b)
    results = [Game(i, away, home, rng, params, max_innings=60).run_game() for i in range(1, 301)]

    extra = [r for r in results if r.extra_innings]
    assert extra, "300 games should include at least one extra-inning game"
    for r in extra:
        assert r.innings > 9
        assert r.as_dict()["innings"] == r.innings
    for r in results:
        assert r.away_runs != r.home_runs
        if r.walk_off:
            assert r.home_runs > r.away_runs
    assert away.wins + away.losses == 300
    assert away.wins == home.losses
    assert away.runs == sum(r.away_runs for r in results)


def test_max_innings_below_regulation_is_rejected(params):
    with pytest.raises(ConfigurationError):
        Game(1, make_team("A", STRIKEOUT_ONLY), make_team("H", STRIKEOUT_ONLY),
             random.Random(1), params, max_innings=8)
