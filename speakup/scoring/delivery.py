"""Delivery subscore from microphone levels and content density."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from speakup.analysis.text import STOPWORDS, normalize_token
from speakup.domain import TimedWord
from speakup.scoring.subscores import clamp_score

SILENCE_FLOOR_DB = -40.0
FULL_ENERGY_DB = -10.0
IDEAL_VARIATION_DB = 8.0
MIN_VARIATION_SCORE = 60.0
TARGET_CONTENT_DENSITY = 0.5

ENERGY_WEIGHT = 0.40
VARIATION_WEIGHT = 0.35
DENSITY_WEIGHT = 0.25


def _energy_component(levels: np.ndarray) -> float:
    span = FULL_ENERGY_DB - SILENCE_FLOOR_DB
    return float(np.clip((levels.mean() - SILENCE_FLOOR_DB) / span * 100.0, 0.0, 100.0))


def _variation_component(levels: np.ndarray) -> float:
    voiced = levels[levels > SILENCE_FLOOR_DB]
    if voiced.size < 2:
        return 0.0
    spread = float(voiced.std())
    if spread <= IDEAL_VARIATION_DB:
        return spread / IDEAL_VARIATION_DB * 100.0
    return max(MIN_VARIATION_SCORE, 100.0 - (spread - IDEAL_VARIATION_DB) * 4.0)


def _density_component(words: Sequence[TimedWord]) -> float:
    tokens = [normalize_token(word.text) for word in words if not word.is_filler]
    tokens = [token for token in tokens if token]
    if not tokens:
        return 0.0
    unique_content = {token for token in tokens if token not in STOPWORDS}
    density = len(unique_content) / len(tokens)
    return min(100.0, density / TARGET_CONTENT_DENSITY * 100.0)


def delivery_score(
    words: Sequence[TimedWord],
    volume_samples: Sequence[float] | None,
) -> int | None:
    """Blends vocal energy, level variation and content density.

    Args:
        words: Classified timeline.
        volume_samples: Microphone levels in dBFS sampled during recording.

    Returns:
        Delivery on a 0-100 scale, or ``None`` without volume samples.
    """
    if volume_samples is None or len(volume_samples) == 0:
        return None
    levels = np.asarray(volume_samples, dtype=np.float64)
    levels = levels[np.isfinite(levels)]
    if levels.size == 0:
        return None
    raw = (
        ENERGY_WEIGHT * _energy_component(levels)
        + VARIATION_WEIGHT * _variation_component(levels)
        + DENSITY_WEIGHT * _density_component(words)
    )
    return clamp_score(raw)
