"""Letter grade classification.

Scores are matched against closed bands from highest to lowest.
Anything outside the A to D bands, including out-of-range scores,
resolves to the fallback grade.
"""

from __future__ import annotations

from core.constants import FALLBACK_GRADE
from core.types import GradeBand

GRADE_BANDS: tuple[GradeBand, ...] = (
    GradeBand(letter="A", lower=80, upper=100),
    GradeBand(letter="B", lower=70, upper=79),
    GradeBand(letter="C", lower=60, upper=69),
    GradeBand(letter="D", lower=50, upper=59),
)


def classify_grade(score: int) -> str:
    """Map a score to its letter grade.

    Args:
        score: Integer score, not range-checked.

    Returns:
        Letter grade for the first matching band, else the fallback grade.
    """
    for band in GRADE_BANDS:
        if band.contains(score):
            return band.letter
    return FALLBACK_GRADE
