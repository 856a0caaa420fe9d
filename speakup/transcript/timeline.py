"""Normalization of raw recognizer output into a sorted word timeline."""

from __future__ import annotations

from typing import TypeAlias

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from speakup.domain import TimedWord
from speakup.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

RawWordLike: TypeAlias = Sequence[object]


@dataclass(frozen=True, slots=True)
class TimelineBuild:
    """Sorted timeline plus the number of malformed words that were dropped."""

    words: tuple[TimedWord, ...]
    dropped_count: int = 0


def _read_confidence(raw_word: RawWordLike) -> float | None:
    """Returns a clamped finite confidence, or ``None`` when unavailable."""
    if len(raw_word) < 4 or raw_word[3] is None:
        return None
    try:
        confidence = float(raw_word[3])  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(confidence):
        return None
    return min(1.0, max(0.0, confidence))


def _read_timing(raw_word: RawWordLike) -> tuple[float, float] | None:
    try:
        start = float(raw_word[1])  # type: ignore[arg-type]
        end = float(raw_word[2])  # type: ignore[arg-type]
    except (TypeError, ValueError, IndexError):
        return None
    if not (math.isfinite(start) and math.isfinite(end)):
        return None
    if end < start:
        return None
    return start, end


def build_timeline(raw_words: Iterable[RawWordLike] | None) -> TimelineBuild:
    """Builds a chronologically sorted timeline from recognizer word tuples.

    Blank tokens are skipped. Words whose token is not text, or whose timing
    is inverted or non-finite, are dropped and counted. Entries sharing
    ``(text, start)`` are kept, ties stay in recognizer order.

    Args:
        raw_words: ``(word, start, end[, confidence])`` tuples in any order.

    Returns:
        The sorted timeline and the count of malformed words dropped.
    """
    if not raw_words:
        return TimelineBuild(words=())

    accepted: list[TimedWord] = []
    dropped = 0
    for raw_word in raw_words:
        token = raw_word[0] if raw_word else None
        if not isinstance(token, str):
            dropped += 1
            logger.debug("Dropping word with non-text token: %r", raw_word)
            continue
        text = token.strip()
        if not text:
            continue
        timing = _read_timing(raw_word)
        if timing is None:
            dropped += 1
            logger.debug("Dropping malformed word %r: %r", text, raw_word)
            continue
        start, end = timing
        accepted.append(
            TimedWord(
                text=text,
                start=start,
                end=end,
                confidence=_read_confidence(raw_word),
            )
        )

    if dropped:
        logger.warning("Dropped %d malformed word(s) from timeline.", dropped)

    accepted.sort(key=lambda word: word.start)
    return TimelineBuild(words=tuple(accepted), dropped_count=dropped)
