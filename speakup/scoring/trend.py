"""Score trend relative to recent recordings."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

RECENT_WINDOW = 5
TREND_BAND = 5


class ScoreTrend(StrEnum):
    """Direction of the latest score compared with recent history."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


def score_trend(current_score: int, history: Sequence[int]) -> ScoreTrend:
    """Compares a score with the integer mean of the last five scores."""
    if not history:
        return ScoreTrend.STABLE
    recent = list(history)[-RECENT_WINDOW:]
    recent_average = sum(recent) // len(recent)
    difference = current_score - recent_average
    if difference > TREND_BAND:
        return ScoreTrend.IMPROVING
    if difference < -TREND_BAND:
        return ScoreTrend.DECLINING
    return ScoreTrend.STABLE
