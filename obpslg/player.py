# obpslg/player.py

import bisect
import logging
from dataclasses import dataclass, field
from itertools import accumulate

from .constants import OUTCOME_STAT_KEYS, Outcome
from .errors import ConfigurationError, ModelInvariantError
from .stats import StatLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutcomeFrequencies:
    """Career plate appearance outcome counts for one hitter."""

    plate_appearances: int
    strikeouts: int
    outs_in_play: int
    walks_hbp: int
    singles: int
    doubles: int
    triples: int
    home_runs: int
    thresholds: tuple = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        counts = self.counts()
        for (key, _), count in zip(OUTCOME_STAT_KEYS, counts):
            if not isinstance(count, int) or count < 0:
                raise ConfigurationError(f"'{key}' must be a non-negative integer, got {count!r}.")
        if not isinstance(self.plate_appearances, int) or self.plate_appearances <= 0:
            raise ConfigurationError(
                f"'plate_appearances' must be a positive integer, got {self.plate_appearances!r}.")
        if sum(counts) != self.plate_appearances:
            raise ConfigurationError(
                f"Outcome counts sum to {sum(counts)}, but plate_appearances is {self.plate_appearances}.")
        # Cumulative counts in outcome order; the last one always equals plate_appearances
        object.__setattr__(self, 'thresholds', tuple(accumulate(counts)))

    def counts(self):
        """The seven outcome counts in threshold order."""
        return [getattr(self, key) for key, _ in OUTCOME_STAT_KEYS]

    @classmethod
    def from_stats(cls, stats):
        """
        Builds frequencies from a stats mapping as found in the config file.

        Besides the seven outcome categories, accepts 'hits' in place of 'singles',
        'walks' and 'hit_by_pitch' in place of 'walks_hbp', and derives 'outs_in_play'
        (PA - BB - HBP - SO - H) when it is left out.
        """
        try:
            pa = stats['plate_appearances']
            strikeouts = stats['strikeouts']
            doubles = stats.get('doubles', 0)
            triples = stats.get('triples', 0)
            home_runs = stats.get('home_runs', 0)

            if 'walks_hbp' in stats:
                walks_hbp = stats['walks_hbp']
            else:
                walks_hbp = stats.get('walks', 0) + stats.get('hit_by_pitch', 0)

            if 'singles' in stats:
                singles = stats['singles']
            else:
                singles = stats['hits'] - (doubles + triples + home_runs)
                if singles < 0:
                    raise ConfigurationError(
                        f"Derived singles is negative ({singles}): hits is smaller than extra-base hits.")

            if 'outs_in_play' in stats:
                outs_in_play = stats['outs_in_play']
            else:
                hits = singles + doubles + triples + home_runs
                outs_in_play = pa - walks_hbp - strikeouts - hits
                if outs_in_play < 0:
                    raise ConfigurationError(f"Derived outs_in_play is negative ({outs_in_play}).")
                logger.debug(f"Derived outs_in_play={outs_in_play} from PA={pa}")
        except KeyError as e:
            raise ConfigurationError(f"Missing required stat {e} in {sorted(stats)}") from e
        except TypeError as e:
            raise ConfigurationError(f"Non-numeric stat value in {stats}: {e}") from e

        return cls(pa, strikeouts, outs_in_play, walks_hbp, singles, doubles, triples, home_runs)


class Player:
    """A lineup slot: one hitter's frequencies plus every outcome recorded for the slot this season."""

    def __init__(self, name, frequencies):
        self.name = name
        self.frequencies = frequencies
        self.outcomes = []

    def sample(self, rng):
        """
        Draws the result of a new plate appearance and records it.

        A uniform integer below plate_appearances is mapped to the first threshold
        strictly above it, so selection uses the exact integer counts.
        """
        draw = rng.randrange(self.frequencies.plate_appearances)
        index = bisect.bisect_right(self.frequencies.thresholds, draw)
        if index >= len(Outcome):
            raise ModelInvariantError(
                f"Player {self.name}: draw {draw} fell outside thresholds {self.frequencies.thresholds}")
        outcome = Outcome(index)
        self.outcomes.append(outcome)
        return outcome

    def stat_line(self):
        return StatLine.from_outcomes(self.outcomes)

    def __str__(self):
        return f"Player({self.name})"

    def __repr__(self):
        return f"Player({self.name!r}, pa={len(self.outcomes)})"
