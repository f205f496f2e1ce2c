"""Combine factor sub-scores into one integer match score."""
from __future__ import annotations

import math

from jobmatch.models import FactorScores

SCORE_FLOOR = 0
SCORE_CEILING = 100


def clamp(value: float, low: float = SCORE_FLOOR, high: float = SCORE_CEILING) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    # round() would send 27.5 to 28 but 26.5 to 26
    return int(math.floor(value + 0.5))


def aggregate(factors: FactorScores) -> int:
    return round_half_up(clamp(factors.total))
