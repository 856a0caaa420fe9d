"""Live feedback over partial recognizer results during a recording.

Each partial result carries the full, possibly revised transcript so far, so
the monitor re-builds and re-classifies the whole partial timeline on every
update instead of diffing. Updates are processed in arrival order; one
monitor instance owns the state of exactly one recording at a time.

The last word of a non-final result may still be mid-phrase, so it is never
assumed to be followed by a pause.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from speakup.analysis.disfluency import classify_disfluencies
from speakup.config import AnalysisConfig
from speakup.streaming.haptics import HapticCueGenerator
from speakup.transcript.timeline import RawWordLike, build_timeline
from speakup.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


class MonitorStatus(StrEnum):
    """Lifecycle of a monitored recording."""

    IDLE = "idle"
    ACTIVE = "active"
    STOPPED = "stopped"


@dataclass(frozen=True)
class PartialTranscript:
    """One delivery from the streaming recognizer."""

    words: Sequence[RawWordLike] = ()
    is_final: bool = False
    error: str | None = None


@dataclass
class StreamingState:
    """Mutable live state, reset at the start of every recording."""

    last_segment_end_time: float = 0.0
    rolling_word_timestamps: list[float] = field(default_factory=list)
    filler_count: int = 0
    word_count: int = 0
    is_active: bool = False


@dataclass(frozen=True)
class StreamingSnapshot:
    """Read-only copy of the live signals for UI and recording control."""

    status: MonitorStatus
    filler_count: int
    word_count: int
    last_segment_end_time: float
    is_active: bool
    is_final: bool = False


class StreamingFeedbackMonitor:
    """Tracks live filler/word counts and the end of the latest segment."""

    def __init__(
        self,
        *,
        config: AnalysisConfig | None = None,
        cue_generator: HapticCueGenerator | None = None,
    ) -> None:
        self._config = config or AnalysisConfig()
        self._cues = cue_generator
        self._state = StreamingState()
        self._status = MonitorStatus.IDLE
        self._is_final = False

    @property
    def status(self) -> MonitorStatus:
        return self._status

    @property
    def state(self) -> StreamingState:
        return self._state

    def snapshot(self) -> StreamingSnapshot:
        """Returns the current live signals."""
        return StreamingSnapshot(
            status=self._status,
            filler_count=self._state.filler_count,
            word_count=self._state.word_count,
            last_segment_end_time=self._state.last_segment_end_time,
            is_active=self._state.is_active,
            is_final=self._is_final,
        )

    def start(self) -> StreamingSnapshot:
        """Resets all state and begins monitoring a new recording."""
        self._state = StreamingState(is_active=True)
        self._status = MonitorStatus.ACTIVE
        self._is_final = False
        if self._cues is not None:
            self._cues.reset()
        logger.debug("Streaming monitor started.")
        return self.snapshot()

    def stop(self) -> StreamingSnapshot:
        """Stops monitoring; safe to call in any state."""
        if self._status is MonitorStatus.ACTIVE:
            logger.debug(
                "Streaming monitor stopped after %d words.", self._state.word_count
            )
        self._state.is_active = False
        self._status = MonitorStatus.STOPPED
        return self.snapshot()

    def process_update(self, update: PartialTranscript) -> StreamingSnapshot:
        """Applies one partial result and returns the refreshed signals.

        Updates arriving while the monitor is not active are ignored. A final
        update or a recognizer error stops the monitor.
        """
        if self._status is not MonitorStatus.ACTIVE:
            logger.debug("Ignoring partial result while %s.", self._status)
            return self.snapshot()

        if update.error is not None:
            logger.warning("Streaming recognizer failed: %s", update.error)
            return self.stop()

        build = build_timeline(update.words)
        words = build.words
        if self._config.track_fillers:
            words = tuple(
                classify_disfluencies(words, trailing_pause=update.is_final)
            )
        filler_count = sum(1 for word in words if word.is_filler)

        previous_fillers = self._state.filler_count
        self._state.word_count = len(words)
        self._state.filler_count = filler_count
        if words:
            self._state.last_segment_end_time = words[-1].end
        self._state.rolling_word_timestamps = [word.start for word in words]

        if self._cues is not None and words:
            now = self._state.last_segment_end_time
            if filler_count > previous_fillers:
                self._cues.process_filler_detected(now=now)
            self._cues.process_word_timestamps(
                self._state.rolling_word_timestamps, now=now
            )

        if update.is_final:
            self._is_final = True
            return self.stop()
        return self.snapshot()

    def consume(self, updates: Iterable[PartialTranscript]) -> StreamingSnapshot:
        """Starts a session and processes updates in arrival order.

        The monitor is always left stopped, including when the update source
        raises or the caller cancels iteration.
        """
        self.start()
        try:
            for update in updates:
                self.process_update(update)
                if self._status is not MonitorStatus.ACTIVE:
                    break
        finally:
            self.stop()
        return self.snapshot()
