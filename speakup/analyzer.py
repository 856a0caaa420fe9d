"""Batch analysis of one completed recording.

``analyze_transcript`` is a pure, synchronous computation: identical inputs
always produce an identical ``AnalysisResult``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from speakup.analysis.disfluency import classify_disfluencies
from speakup.analysis.pace import words_per_minute
from speakup.analysis.pauses import segment_pauses, summarize_pauses
from speakup.analysis.text import normalize_token
from speakup.config import AnalysisConfig
from speakup.domain import AnalysisResult, FillerInstance, SubscoreSet, TimedWord
from speakup.scoring.composite import compose_overall_score
from speakup.scoring.delivery import delivery_score
from speakup.scoring.language import structure_score, vocabulary_score
from speakup.scoring.relevance import SimilarityProvider, relevance_score
from speakup.scoring.subscores import (
    clarity_score,
    filler_ratio,
    filler_usage_score,
    pace_score,
    pause_quality_score,
)
from speakup.transcript.timeline import RawWordLike, build_timeline
from speakup.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def collect_fillers(words: Sequence[TimedWord]) -> tuple[FillerInstance, ...]:
    """Aggregates filler words per lowercased form, most frequent first."""
    timestamps_by_word: dict[str, list[float]] = {}
    for word in words:
        if not word.is_filler:
            continue
        form = normalize_token(word.text) or word.text.lower()
        timestamps_by_word.setdefault(form, []).append(word.start)
    instances = [
        FillerInstance(word=form, count=len(stamps), timestamps=tuple(stamps))
        for form, stamps in timestamps_by_word.items()
    ]
    instances.sort(key=lambda instance: (-instance.count, instance.word))
    return tuple(instances)


def _excluded_dimensions(config: AnalysisConfig) -> frozenset[str]:
    excluded: set[str] = set()
    if not config.track_fillers:
        excluded.add("filler_usage")
    if not config.track_pauses:
        excluded.add("pause_quality")
    return frozenset(excluded)


def analyze_transcript(
    raw_words: Iterable[RawWordLike] | None,
    *,
    duration_seconds: float | None = None,
    config: AnalysisConfig | None = None,
    volume_samples: Sequence[float] | None = None,
    similarity: SimilarityProvider | None = None,
) -> AnalysisResult:
    """Analyzes a completed transcript into subscores and an overall score.

    Args:
        raw_words: Recognizer ``(word, start, end[, confidence])`` tuples.
        duration_seconds: Actual recording length. Defaults to the end time
            of the last word.
        config: Analysis options. Defaults to ``AnalysisConfig()``.
        volume_samples: Microphone levels in dBFS, enabling delivery scoring.
        similarity: Word-similarity provider used for relevance scoring.

    Returns:
        The immutable analysis result. An empty transcript yields a
        zero-valued result.
    """
    config = config or AnalysisConfig()
    build = build_timeline(raw_words)
    if duration_seconds is None:
        duration_seconds = max((word.end for word in build.words), default=0.0)
    duration_seconds = max(0.0, float(duration_seconds))

    if not build.words:
        logger.info("Empty transcript; returning zero-valued analysis.")
        return AnalysisResult(
            duration_seconds=duration_seconds,
            dropped_word_count=build.dropped_count,
        )

    words = classify_disfluencies(build.words)
    total_words = len(words)
    fillers = collect_fillers(words)
    ratio = filler_ratio(sum(filler.count for filler in fillers), total_words)
    # Untracked fillers must not leak into other subscores.
    scored_ratio = ratio if config.track_fillers else 0.0
    wpm = words_per_minute(total_words, duration_seconds)
    pauses = segment_pauses(words)

    subscores = SubscoreSet(
        clarity=clarity_score(
            words, filler_ratio=scored_ratio, duration_seconds=duration_seconds
        ),
        pace=pace_score(wpm, target_wpm=config.target_wpm),
        filler_usage=filler_usage_score(ratio),
        pause_quality=pause_quality_score(
            pauses,
            wpm=wpm,
            target_wpm=config.target_wpm,
            filler_ratio=scored_ratio,
            duration_seconds=duration_seconds,
        ),
        delivery=delivery_score(words, volume_samples),
        vocabulary=vocabulary_score(words, target_vocabulary=config.target_vocabulary),
        structure=structure_score(words),
        relevance=relevance_score(
            words, prompt_text=config.prompt_text, similarity=similarity
        ),
    )
    overall = compose_overall_score(
        subscores,
        total_words=total_words,
        duration_seconds=duration_seconds,
        excluded=_excluded_dimensions(config),
    )
    pause_count, average_pause = summarize_pauses(pauses) if config.track_pauses else (0, 0.0)

    logger.debug(
        "Analyzed %d words over %.2fs: wpm=%.1f fillers=%.3f overall=%d",
        total_words,
        duration_seconds,
        wpm,
        ratio,
        overall,
    )
    return AnalysisResult(
        subscores=subscores,
        overall_score=overall,
        total_words=total_words,
        words_per_minute=wpm,
        pause_count=pause_count,
        average_pause_length=average_pause,
        filler_words=fillers if config.track_fillers else (),
        duration_seconds=duration_seconds,
        dropped_word_count=build.dropped_count,
    )
