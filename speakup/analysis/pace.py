"""Speaking-rate statistics over a whole clip and over rolling windows."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from speakup.domain import TimedWord

ROLLING_WINDOW_SECONDS = 15.0
MIN_ROLLING_SPAN_SECONDS = 5.0


@dataclass(frozen=True, slots=True)
class PaceWindow:
    """Speaking rate within one fixed window of the recording."""

    start_seconds: float
    end_seconds: float
    words_per_minute: float


def words_per_minute(total_words: int, duration_seconds: float) -> float:
    """Words per minute over the clip; 0 when the duration is not positive."""
    if duration_seconds <= 0.0 or total_words <= 0:
        return 0.0
    return total_words / (duration_seconds / 60.0)


def rolling_words_per_minute(
    timestamps: Sequence[float],
    *,
    now: float,
    window_seconds: float = ROLLING_WINDOW_SECONDS,
    min_span_seconds: float = MIN_ROLLING_SPAN_SECONDS,
) -> float | None:
    """Computes WPM over the word timestamps inside the trailing window.

    Args:
        timestamps: Word timestamps in seconds on the recording clock.
        now: Current position on the same clock.
        window_seconds: Length of the trailing window.
        min_span_seconds: Minimum span between the oldest in-window word and
            ``now`` before a rate is reported.

    Returns:
        Words per minute, or ``None`` while the window holds too little data.
    """
    cutoff = now - window_seconds
    recent = [stamp for stamp in timestamps if cutoff <= stamp <= now]
    if not recent:
        return None
    span = now - min(recent)
    if span <= 0.0 or span < min_span_seconds:
        return None
    return len(recent) / span * 60.0


def pace_timeline(
    words: Sequence[TimedWord],
    *,
    window_seconds: float = 10.0,
) -> list[PaceWindow]:
    """Splits the recording into fixed windows and reports WPM per window."""
    if window_seconds <= 0.0:
        raise ValueError("window_seconds must be greater than zero.")
    if not words:
        return []
    clip_end = max(word.end for word in words)
    windows: list[PaceWindow] = []
    window_start = 0.0
    while window_start < clip_end:
        window_end = min(clip_end, window_start + window_seconds)
        count = sum(1 for word in words if window_start <= word.start < window_end)
        windows.append(
            PaceWindow(
                start_seconds=window_start,
                end_seconds=window_end,
                words_per_minute=words_per_minute(count, window_end - window_start),
            )
        )
        window_start += window_seconds
    return windows
