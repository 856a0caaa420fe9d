"""Mandatory subscores: clarity, pace, filler usage and pause quality.

Every calculator is a pure function returning an int clamped to 0-100.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from speakup.domain import PauseInterval, TimedWord

PACE_STD_WPM = 45.0
CONFIDENCE_RAMP_SECONDS = 10.0
NEUTRAL_CLARITY = 50.0

MEDIUM_PAUSE_SECONDS = 1.2
LONG_PAUSE_SECONDS = 3.0
PAUSE_BASE_SCORE = 70.0


def clamp_score(value: float) -> int:
    """Rounds a raw score and clamps it to 0-100."""
    if not np.isfinite(value):
        return 0
    return int(min(100, max(0, round(float(value)))))


def filler_ratio(filler_count: int, total_words: int) -> float:
    """Share of words that are fillers; 0 for an empty transcript."""
    if total_words <= 0:
        return 0.0
    return filler_count / total_words


def _duration_consistency(words: Sequence[TimedWord]) -> float:
    durations = np.asarray(
        [word.duration for word in words if word.duration > 0.0], dtype=np.float64
    )
    if durations.size == 0:
        return 0.0
    mean_duration = float(durations.mean())
    if mean_duration <= 0.0:
        return 0.0
    coefficient_of_variation = float(durations.std()) / mean_duration
    return max(0.0, 100.0 * (1.0 - coefficient_of_variation))


def clarity_score(
    words: Sequence[TimedWord],
    *,
    filler_ratio: float,
    duration_seconds: float,
) -> int:
    """Scores articulation from recognizer confidence and timing regularity.

    Without confidence data the score falls back to filler frequency.
    Clips shorter than ten seconds are pulled toward a neutral 50 because
    their confidence statistics are unreliable.
    """
    confidences = [word.confidence for word in words if word.confidence is not None]
    if not confidences:
        return clamp_score(100.0 - 300.0 * filler_ratio)

    mean_confidence = float(np.mean(confidences))
    raw = 0.65 * mean_confidence * 100.0 + 0.35 * _duration_consistency(words)
    weight = min(1.0, max(0.0, duration_seconds / CONFIDENCE_RAMP_SECONDS))
    return clamp_score(weight * raw + (1.0 - weight) * NEUTRAL_CLARITY)


def pace_score(wpm: float, *, target_wpm: float) -> int:
    """Gaussian pace score centered on the target speaking rate."""
    deviation = wpm - target_wpm
    return clamp_score(100.0 * np.exp(-(deviation**2) / (2.0 * PACE_STD_WPM**2)))


def filler_usage_score(ratio: float) -> int:
    """Linear penalty reaching zero when a fifth of all words are fillers."""
    return clamp_score(100.0 * (1.0 - 5.0 * ratio))


def pause_quality_score(
    pauses: Sequence[PauseInterval],
    *,
    wpm: float,
    target_wpm: float,
    filler_ratio: float,
    duration_seconds: float,
) -> int:
    """Rewards deliberate pauses at sentence transitions, penalizes hesitation.

    Args:
        pauses: Pauses detected in the timeline.
        wpm: Speaking rate over the whole clip.
        target_wpm: The speaker's target rate.
        filler_ratio: Share of words that are fillers.
        duration_seconds: Length of the recording.

    Returns:
        Pause quality on a 0-100 scale.
    """
    if not pauses:
        return 40 if wpm > target_wpm + 20.0 else 60

    score = PAUSE_BASE_SCORE
    strategic_count = 0
    short_or_medium = 0
    for pause in pauses:
        if pause.duration < LONG_PAUSE_SECONDS:
            short_or_medium += 1
        if pause.is_transition:
            strategic_count += 1
            if pause.duration >= LONG_PAUSE_SECONDS:
                score += 8.0
            elif pause.duration >= MEDIUM_PAUSE_SECONDS:
                score += 4.0
        elif pause.duration >= LONG_PAUSE_SECONDS:
            score -= 15.0

    # Silence used in place of fillers.
    if filler_ratio < 0.02 and short_or_medium > 2:
        score += 10.0

    if duration_seconds > 0.0:
        pauses_per_minute = len(pauses) / (duration_seconds / 60.0)
        if pauses_per_minute < 3.0:
            score -= 10.0
        elif pauses_per_minute > 15.0:
            score -= 2.0 * (pauses_per_minute - 15.0)

    if wpm > target_wpm + 10.0:
        score += min(10.0, 2.0 * strategic_count)

    return clamp_score(score)
