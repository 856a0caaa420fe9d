"""Silence segmentation between consecutive timeline words."""

from __future__ import annotations

from collections.abc import Sequence

from speakup.analysis.text import ends_sentence
from speakup.domain import PauseInterval, TimedWord

PAUSE_THRESHOLD_SECONDS = 0.4


def segment_pauses(
    words: Sequence[TimedWord],
    *,
    threshold_seconds: float = PAUSE_THRESHOLD_SECONDS,
) -> list[PauseInterval]:
    """Finds silences longer than ``threshold_seconds`` between words.

    A pause is a transition when the word before it ends a sentence.

    Args:
        words: Timeline sorted by start time.
        threshold_seconds: Gaps strictly above this value become pauses.

    Returns:
        Pauses in timeline order.
    """
    if threshold_seconds < 0.0:
        raise ValueError("threshold_seconds cannot be negative.")
    pauses: list[PauseInterval] = []
    for previous, current in zip(words, words[1:]):
        gap = current.start - previous.end
        if gap > threshold_seconds:
            pauses.append(
                PauseInterval(
                    start_time=previous.end,
                    duration=gap,
                    is_transition=ends_sentence(previous.text),
                )
            )
    return pauses


def summarize_pauses(pauses: Sequence[PauseInterval]) -> tuple[int, float]:
    """Returns pause count and mean pause duration (0 when there are none)."""
    if not pauses:
        return 0, 0.0
    return len(pauses), sum(pause.duration for pause in pauses) / len(pauses)
