# obpslg/bases.py

from dataclasses import dataclass, replace

from .constants import *
from .errors import ModelInvariantError


@dataclass(frozen=True)
class BaseState:
    """Runners on base and outs for the half-inning in progress."""

    first: bool = False
    second: bool = False
    third: bool = False
    outs: int = 0

    @property
    def runners(self):
        return int(self.first) + int(self.second) + int(self.third)

    def occupied(self):
        """Tuple of occupancy flags ordered first, second, third."""
        return (self.first, self.second, self.third)


@dataclass(frozen=True)
class Play:
    """What one plate appearance did to the base state."""

    bases: BaseState
    runs: int
    label: str
    walk_off: bool = False


def _is_walk_off(runs, runs_to_win):
    return runs_to_win is not None and runs > 0 and runs >= runs_to_win


def _out_in_play(bases, roll, params):
    outs = bases.outs
    runs = 0
    first, second, third = bases.occupied()
    label = PLAY_OUT_IN_PLAY

    # With two outs the batter's out ends the inning, so nothing else matters
    if outs < 2:
        sub_roll = roll()
        if first and sub_roll < params.double_play_ratio:
            label = PLAY_DOUBLE_PLAY
            outs += 1
            if outs < 2:
                runs += int(third)
                third, second, first = second, False, False
        elif first and sub_roll < params.double_play_ratio + params.productive_out_ratio:
            label = PLAY_PRODUCTIVE_OUT
        elif not first and sub_roll < params.productive_out_ratio:
            label = PLAY_PRODUCTIVE_OUT

        if label == PLAY_PRODUCTIVE_OUT:
            runs += int(third)
            third, second, first = second, first, False

    outs += 1
    return Play(BaseState(first, second, third, outs), runs, label)


def _walk(bases):
    runs = 0
    first, second, third = bases.occupied()
    if first:
        if second:
            if third:
                runs += 1
            third = True
        second = True
    first = True
    return Play(replace(bases, first=first, second=second, third=third), runs, PLAY_WALK)


def _single(bases, roll, params, runs_to_win):
    runs = int(bases.third)
    # Everyone moves up one; the runner from second stops at third for now
    moved = replace(bases, first=True, second=bases.first, third=bases.second)
    if _is_walk_off(runs, runs_to_win):
        return Play(moved, runs, PLAY_SINGLE, walk_off=True)

    if roll() >= params.infield_hit_ratio:
        if moved.third:
            runs += 1
            moved = replace(moved, third=False)
        return Play(moved, runs, PLAY_OUTFIELD_SINGLE, walk_off=_is_walk_off(runs, runs_to_win))
    return Play(moved, runs, PLAY_INFIELD_SINGLE, walk_off=_is_walk_off(runs, runs_to_win))


def advance(bases, outcome, roll, params, runs_to_win=None):
    """
    Applies one plate appearance outcome to the base state.

    roll is a zero-argument callable returning a uniform float in [0, 1). It is only
    called when the outcome needs a sub-roll (outs in play with fewer than two outs,
    and singles), so a scripted roll makes this fully deterministic.

    runs_to_win is None unless the batting team can walk off; then it is the number
    of runs this play needs to end the game. A single stops as soon as the runner
    from third reaches it, before the infield/outfield roll is taken.
    """
    if outcome == Outcome.STRIKEOUT:
        return Play(replace(bases, outs=bases.outs + 1), 0, PLAY_STRIKEOUT)
    elif outcome == Outcome.OUT_IN_PLAY:
        play = _out_in_play(bases, roll, params)
    elif outcome == Outcome.WALK_OR_HBP:
        play = _walk(bases)
    elif outcome == Outcome.SINGLE:
        return _single(bases, roll, params, runs_to_win)
    elif outcome == Outcome.DOUBLE:
        runs = int(bases.second) + int(bases.third)
        play = Play(replace(bases, first=False, second=True, third=bases.first), runs, PLAY_DOUBLE)
    elif outcome == Outcome.TRIPLE:
        play = Play(replace(bases, first=False, second=False, third=True), bases.runners, PLAY_TRIPLE)
    elif outcome == Outcome.HOME_RUN:
        play = Play(replace(bases, first=False, second=False, third=False), bases.runners + 1, PLAY_HOME_RUN)
    else:
        raise ModelInvariantError(f"Unknown plate appearance outcome: {outcome!r}")

    if _is_walk_off(play.runs, runs_to_win):
        play = replace(play, walk_off=True)
    return play
