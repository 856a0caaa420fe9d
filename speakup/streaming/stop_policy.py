"""Graceful stop decision for an in-progress recording."""

from __future__ import annotations

from dataclasses import dataclass

from speakup.config import StopPolicySettings


@dataclass(frozen=True)
class GracefulStopPolicy:
    """Waits for the speaker to finish a sentence before stopping.

    After a stop is requested, the recording is finalized once the last
    recognized segment is at least ``silence_gap_seconds`` old and the
    microphone is below the silence level, or when the grace period runs out.
    """

    settings: StopPolicySettings = StopPolicySettings()

    def should_finalize(
        self,
        *,
        now: float,
        last_segment_end_time: float,
        audio_level_db: float,
        requested_at: float,
    ) -> bool:
        """Returns whether the pending stop can be finalized at ``now``."""
        if now - requested_at >= self.settings.grace_period_seconds:
            return True
        silent_for = now - last_segment_end_time
        return (
            silent_for >= self.settings.silence_gap_seconds
            and audio_level_db < self.settings.silence_level_db
        )
