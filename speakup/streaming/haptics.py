"""Live coaching cues driven by silence, speaking rate and fillers.

Cues are rendered by an injected ``CuePlayer``. The generator only decides
when to fire; a cooldown between consecutive cues prevents feedback floods.
All times are seconds on the recording clock.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import StrEnum
from typing import Protocol

from speakup.analysis.pace import rolling_words_per_minute
from speakup.config import HapticSettings
from speakup.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


class CueKind(StrEnum):
    """Kinds of live feedback cue."""

    LONG_SILENCE = "long_silence"
    PACE_TOO_FAST = "pace_too_fast"
    PACE_TOO_SLOW = "pace_too_slow"
    FILLER = "filler"


class CuePlayer(Protocol):
    """Renders a cue on the device (haptic pulse, chirp, ...)."""

    def play(self, cue: CueKind) -> None:
        """Plays one cue."""
        ...


class NullCuePlayer:
    """Cue player that discards every cue."""

    def play(self, cue: CueKind) -> None:
        return None


class HapticCueGenerator:
    """Decides when live cues fire, honoring a cooldown between cues."""

    def __init__(
        self,
        player: CuePlayer | None = None,
        *,
        settings: HapticSettings | None = None,
        enabled: bool = True,
    ) -> None:
        self._player: CuePlayer = player or NullCuePlayer()
        self._settings = settings or HapticSettings()
        self.enabled = enabled
        self._last_voiced_time = 0.0
        self._last_cue_time: float | None = None

    @property
    def settings(self) -> HapticSettings:
        return self._settings

    def reset(self, *, now: float = 0.0) -> None:
        """Clears silence tracking and the cooldown for a new recording."""
        self._last_voiced_time = now
        self._last_cue_time = None

    def _can_fire(self, now: float) -> bool:
        if self._last_cue_time is None:
            return True
        return now - self._last_cue_time >= self._settings.cooldown_seconds

    def _fire(self, cue: CueKind, now: float) -> CueKind | None:
        if not self._can_fire(now):
            return None
        self._last_cue_time = now
        logger.debug("Firing %s cue at %.2fs.", cue, now)
        self._player.play(cue)
        return cue

    def process_audio_level(self, level_db: float, *, now: float) -> CueKind | None:
        """Tracks silence from the microphone level; cues after long silence."""
        if not self.enabled:
            return None
        if level_db > self._settings.silence_level_db:
            self._last_voiced_time = now
            return None
        silence = now - self._last_voiced_time
        if silence >= self._settings.silence_threshold_seconds:
            return self._fire(CueKind.LONG_SILENCE, now)
        return None

    def process_filler_detected(self, *, now: float) -> CueKind | None:
        """Cues once for a newly detected filler word."""
        if not self.enabled:
            return None
        return self._fire(CueKind.FILLER, now)

    def process_word_timestamps(
        self,
        timestamps: Sequence[float],
        *,
        now: float,
    ) -> CueKind | None:
        """Cues when the rolling speaking rate leaves the comfortable band."""
        if not self.enabled:
            return None
        wpm = rolling_words_per_minute(
            timestamps,
            now=now,
            window_seconds=self._settings.wpm_window_seconds,
            min_span_seconds=self._settings.min_wpm_span_seconds,
        )
        if wpm is None:
            return None
        if wpm > self._settings.high_wpm:
            return self._fire(CueKind.PACE_TOO_FAST, now)
        if wpm < self._settings.low_wpm:
            return self._fire(CueKind.PACE_TOO_SLOW, now)
        return None
