import pytest

from obpslg.bases import BaseState
from obpslg.constants import PLAY_DOUBLE_PLAY, PLAY_HOME_RUN, Outcome
from obpslg.game import BOTTOM, GameResult
from obpslg.inning import PlateAppearanceEvent
from obpslg.narration import PlayByPlayLog, describe_bases, describe_plate_appearance


@pytest.mark.parametrize("bases, text", [
    (BaseState(), "Bases empty"),
    (BaseState(first=True), "Runner at first"),
    (BaseState(first=True, third=True), "Runners at first and third"),
    (BaseState(second=True, third=True), "Runners at second and third"),
    (BaseState(True, True, True), "Bases loaded"),
])
def test_describe_bases(bases, text):
    assert describe_bases(bases) == text


def test_describe_double_play():
    event = PlateAppearanceEvent(
        batter_index=2, batter_name="P3", outcome=Outcome.OUT_IN_PLAY, play=PLAY_DOUBLE_PLAY,
        bases_before=BaseState(first=True, third=True), bases_after=BaseState(outs=2),
        runs_scored=1, inning_runs=1, walk_off=False,
    )
    assert describe_plate_appearance(event) == (
        "Runners at first and third, 0 out. Batter #3: Grounds into double play. "
        "1 run(s) score. Now: Bases empty, 2 out."
    )


def test_play_by_play_log_collects_lines_per_game():
    log = PlayByPlayLog()
    log.half_inning_started(4, 9, BOTTOM, "Home", 3, 3)
    log.plate_appearance(PlateAppearanceEvent(
        batter_index=0, batter_name="P1", outcome=Outcome.HOME_RUN, play=PLAY_HOME_RUN,
        bases_before=BaseState(outs=1), bases_after=BaseState(outs=1),
        runs_scored=1, inning_runs=1, walk_off=True,
    ))
    log.game_finished(GameResult(4, "Away", "Home", 3, 4, innings=9, walk_off=True))

    lines = log.lines_for(4)
    assert lines[0] == "Score: 3 - 3. Bottom 9 (Home batting):"
    assert lines[1].endswith("Home run. 1 run(s) score. Walk-off!")
    assert lines[2] == "Final score: Away 3 - 4 Home (walk-off)"
    assert log.lines_for(5) == []
