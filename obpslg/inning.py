# obpslg/inning.py

import logging
from dataclasses import dataclass

from .bases import BaseState, advance
from .constants import OUTS_PER_INNING, Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InningResult:
    runs: int
    next_batter: int
    walk_off: bool = False


@dataclass(frozen=True)
class PlateAppearanceEvent:
    """Structured record of one plate appearance, handed to observers."""

    batter_index: int
    batter_name: str
    outcome: Outcome
    play: str
    bases_before: BaseState
    bases_after: BaseState
    runs_scored: int
    inning_runs: int
    walk_off: bool


def simulate_half_inning(leadoff, lineup, rng, params, can_walk_off=False, deficit=0, observer=None):
    """
    Plays one half-inning for the batting team.

    leadoff is the lineup index of the first batter (taken modulo the lineup size).
    When can_walk_off is set the half-inning ends the moment the team's runs in it
    exceed deficit. The returned next_batter is the lineup index following the last
    batter to come up, so the batting order carries into the team's next half-inning.
    """
    bases = BaseState()
    runs = 0
    batter = leadoff % len(lineup)

    while bases.outs < OUTS_PER_INNING:
        player = lineup[batter]
        outcome = player.sample(rng)
        runs_to_win = deficit - runs + 1 if can_walk_off else None
        play = advance(bases, outcome, rng.random, params, runs_to_win)
        runs += play.runs

        if observer is not None:
            observer(PlateAppearanceEvent(
                batter_index=batter,
                batter_name=player.name,
                outcome=outcome,
                play=play.label,
                bases_before=bases,
                bases_after=play.bases,
                runs_scored=play.runs,
                inning_runs=runs,
                walk_off=play.walk_off,
            ))

        bases = play.bases
        batter = (batter + 1) % len(lineup)
        if play.walk_off:
            logger.debug(f"Walk-off: {runs} run(s) in the half-inning against a deficit of {deficit}.")
            return InningResult(runs, batter, walk_off=True)

    return InningResult(runs, batter)
