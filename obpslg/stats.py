# obpslg/stats.py

import math
from collections import Counter
from dataclasses import dataclass, field

from .constants import Outcome


def round_rate(value):
    """Rounds to the nearest thousandth, halves rounding up. None stays None."""
    if value is None:
        return None
    return math.floor(value * 1000 + 0.5) / 1000


def raw_rate(numerator, denominator):
    """Unrounded rate, or None when the denominator is zero (an empty sample)."""
    if denominator == 0:
        return None
    return numerator / denominator


def format_rate(value):
    """Renders a rate the way a box score does: .342, 1.045, or --- when undefined."""
    if value is None:
        return "---"
    text = f"{value:.3f}"
    return text[1:] if text.startswith("0") else text


@dataclass
class StatLine:
    """Outcome tallies for a player or a team, with the rate stats derived from them."""

    counts: Counter = field(default_factory=Counter)

    @classmethod
    def from_outcomes(cls, outcomes):
        return cls(Counter(Outcome(oc) for oc in outcomes))

    def __add__(self, other):
        return StatLine(self.counts + other.counts)

    def count(self, outcome):
        return self.counts[outcome]

    @property
    def plate_appearances(self):
        return sum(self.counts.values())

    @property
    def at_bats(self):
        return sum(n for oc, n in self.counts.items() if oc.is_at_bat)

    @property
    def hits(self):
        return sum(n for oc, n in self.counts.items() if oc.is_hit)

    @property
    def total_bases(self):
        return sum(oc.bases_awarded * n for oc, n in self.counts.items())

    @property
    def times_on_base(self):
        return sum(n for oc, n in self.counts.items() if oc.reaches_base)

    def _raw_obp(self):
        return raw_rate(self.times_on_base, self.plate_appearances)

    def _raw_slg(self):
        return raw_rate(self.total_bases, self.at_bats)

    @property
    def batting_average(self):
        return round_rate(raw_rate(self.hits, self.at_bats))

    @property
    def on_base_percentage(self):
        return round_rate(self._raw_obp())

    @property
    def slugging(self):
        return round_rate(self._raw_slg())

    @property
    def ops(self):
        obp, slg = self._raw_obp(), self._raw_slg()
        if obp is None or slg is None:
            return None
        return round_rate(obp + slg)

    def as_dict(self):
        """Counts and rates in a plain mapping, suitable for YAML or CSV output."""
        data = {
            "plate_appearances": self.plate_appearances,
            "at_bats": self.at_bats,
            "hits": self.hits,
            "total_bases": self.total_bases,
            "times_on_base": self.times_on_base,
        }
        for outcome in Outcome:
            data[outcome.name.lower()] = self.counts[outcome]
        data.update({
            "batting_average": self.batting_average,
            "on_base_percentage": self.on_base_percentage,
            "slugging": self.slugging,
            "ops": self.ops,
        })
        return data


def winning_percentage(wins, losses):
    return round_rate(raw_rate(wins, wins + losses))
