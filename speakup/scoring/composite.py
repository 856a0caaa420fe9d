"""Overall score from available subscores with weight renormalization."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from speakup.domain import SubscoreSet
from speakup.scoring.subscores import clamp_score

BASE_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "clarity": 0.15,
        "pace": 0.18,
        "filler_usage": 0.15,
        "pause_quality": 0.13,
    }
)
OPTIONAL_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "delivery": 0.13,
        "vocabulary": 0.09,
        "structure": 0.05,
        "relevance": 0.10,
    }
)

SUBSTANCE_MIN_WORDS = 20
SUBSTANCE_MIN_SECONDS = 15.0
SUBSTANCE_SCORE_CAP = 40


def weighted_average(
    subscores: SubscoreSet,
    *,
    excluded: frozenset[str] = frozenset(),
) -> float:
    """Weighted mean over the subscores that are present and not excluded.

    Missing optional subscores and excluded dimensions drop out of both the
    numerator and the weight total, so absent data never drags the score down.
    """
    weighted_sum = 0.0
    weight_total = 0.0
    for name, weight in (*BASE_WEIGHTS.items(), *OPTIONAL_WEIGHTS.items()):
        if name in excluded:
            continue
        value = getattr(subscores, name)
        if value is None:
            continue
        weighted_sum += weight * value
        weight_total += weight
    if weight_total <= 0.0:
        return 0.0
    return weighted_sum / weight_total


def compose_overall_score(
    subscores: SubscoreSet,
    *,
    total_words: int,
    duration_seconds: float,
    excluded: frozenset[str] = frozenset(),
) -> int:
    """Combines subscores into the overall 0-100 score.

    Recordings with fewer than 20 words that also last under 15 seconds are
    capped at 40.

    Args:
        subscores: The recording's subscores.
        total_words: Number of words in the timeline.
        duration_seconds: Length of the recording.
        excluded: Subscore names that must not contribute.

    Returns:
        Overall score on a 0-100 scale.
    """
    score = clamp_score(weighted_average(subscores, excluded=excluded))
    if total_words < SUBSTANCE_MIN_WORDS and duration_seconds < SUBSTANCE_MIN_SECONDS:
        score = min(score, SUBSTANCE_SCORE_CAP)
    return score
