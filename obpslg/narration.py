# obpslg/narration.py

import logging

from .constants import *
from .game import TOP, GameObserver

logger = logging.getLogger(__name__)

PLAY_TEXT = {
    PLAY_STRIKEOUT: "Strikeout.",
    PLAY_OUT_IN_PLAY: "Out in play.",
    PLAY_DOUBLE_PLAY: "Grounds into double play.",
    PLAY_PRODUCTIVE_OUT: "Productive out.",
    PLAY_WALK: "Walk or hit-by-pitch.",
    PLAY_SINGLE: "Single.",
    PLAY_INFIELD_SINGLE: "Infield single.",
    PLAY_OUTFIELD_SINGLE: "Single to the outfield.",
    PLAY_DOUBLE: "Double.",
    PLAY_TRIPLE: "Triple.",
    PLAY_HOME_RUN: "Home run.",
}

_BASE_NAMES = ("first", "second", "third")


def describe_bases(bases):
    """Base situation in broadcast terms, e.g. 'Runners at first and third'."""
    occupied = [name for name, on in zip(_BASE_NAMES, bases.occupied()) if on]
    if not occupied:
        return "Bases empty"
    if len(occupied) == 3:
        return "Bases loaded"
    if len(occupied) == 1:
        return f"Runner at {occupied[0]}"
    return f"Runners at {occupied[0]} and {occupied[1]}"


def describe_plate_appearance(event):
    """One line of play-by-play for a PlateAppearanceEvent."""
    before = event.bases_before
    text = (f"{describe_bases(before)}, {before.outs} out. Batter #{event.batter_index + 1}: "
            f"{PLAY_TEXT.get(event.play, event.outcome.name)}")
    if event.runs_scored:
        text += f" {event.runs_scored} run(s) score."
    if event.walk_off:
        text += " Walk-off!"
    else:
        text += f" Now: {describe_bases(event.bases_after)}, {event.bases_after.outs} out."
    return text


class PlayByPlayLog(GameObserver):
    """
    Renders game events to text. Lines are kept per game in `games` and also sent to
    this module's logger at INFO, so `--show-game-logs` can stream them to stderr.
    """

    def __init__(self, keep_lines=True):
        self.keep_lines = keep_lines
        self.games = {}
        self._current = None

    def _emit(self, line):
        if self.keep_lines and self._current is not None:
            self.games[self._current].append(line)
        logger.info(line)

    def half_inning_started(self, game_id, inning, half, batting_team, away_runs, home_runs):
        if game_id != self._current:
            self._current = game_id
            self.games[game_id] = []
        label = "Top" if half == TOP else "Bottom"
        self._emit(f"Score: {away_runs} - {home_runs}. {label} {inning} ({batting_team} batting):")

    def plate_appearance(self, event):
        self._emit(describe_plate_appearance(event))

    def game_finished(self, result):
        extra = f" in {result.innings} innings" if result.extra_innings else ""
        walk_off = " (walk-off)" if result.walk_off else ""
        self._emit(f"Final score: {result.away} {result.away_runs} - {result.home_runs} "
                   f"{result.home}{extra}{walk_off}")

    def lines_for(self, game_id):
        return self.games.get(game_id, [])
