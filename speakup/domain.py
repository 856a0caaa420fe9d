"""Domain data structures for transcripts, pauses, and analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class RawWord(NamedTuple):
    """A word tuple as delivered by the speech recognizer."""

    word: str
    start: float
    end: float
    confidence: float | None = None


@dataclass(frozen=True, slots=True)
class TimedWord:
    """A validated transcript word with timing in seconds."""

    text: str
    start: float
    end: float
    confidence: float | None = None
    is_filler: bool = False

    @property
    def duration(self) -> float:
        """Spoken duration of the word in seconds."""
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class FillerInstance:
    """Occurrences of one filler word form across a recording."""

    word: str
    count: int
    timestamps: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class PauseInterval:
    """A silence between two consecutive words."""

    start_time: float
    duration: float
    is_transition: bool


@dataclass(frozen=True, slots=True)
class SubscoreSet:
    """Independent 0-100 quality dimensions of one recording."""

    clarity: int = 0
    pace: int = 0
    filler_usage: int = 0
    pause_quality: int = 0
    delivery: int | None = None
    vocabulary: int | None = None
    structure: int | None = None
    relevance: int | None = None


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Immutable outcome of analyzing one completed recording."""

    subscores: SubscoreSet = field(default_factory=SubscoreSet)
    overall_score: int = 0
    total_words: int = 0
    words_per_minute: float = 0.0
    pause_count: int = 0
    average_pause_length: float = 0.0
    filler_words: tuple[FillerInstance, ...] = ()
    duration_seconds: float = 0.0
    dropped_word_count: int = 0

    @property
    def filler_count(self) -> int:
        """Total filler occurrences across all word forms."""
        return sum(filler.count for filler in self.filler_words)

    @property
    def filler_ratio(self) -> float:
        """Share of spoken words that were fillers."""
        if self.total_words <= 0:
            return 0.0
        return self.filler_count / self.total_words
