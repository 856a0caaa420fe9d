"""Tests for live haptic cue decisions."""

from __future__ import annotations

import pytest

from speakup.config import HapticSettings
from speakup.streaming.haptics import CueKind, HapticCueGenerator


class _RecordingPlayer:
    def __init__(self) -> None:
        self.cues: list[CueKind] = []

    def play(self, cue: CueKind) -> None:
        self.cues.append(cue)


def _stamps(step: float, end: float = 10.0) -> list[float]:
    count = int(round(end / step)) + 1
    return [index * step for index in range(count)]


def test_long_silence_fires_after_threshold() -> None:
    """Four seconds below the silence level triggers one cue."""
    player = _RecordingPlayer()
    generator = HapticCueGenerator(player)
    generator.reset(now=0.0)

    assert generator.process_audio_level(-20.0, now=1.0) is None
    assert generator.process_audio_level(-50.0, now=4.0) is None
    assert generator.process_audio_level(-50.0, now=5.0) is CueKind.LONG_SILENCE
    assert player.cues == [CueKind.LONG_SILENCE]


def test_cooldown_suppresses_consecutive_cues() -> None:
    """A second cue within the cooldown window is dropped."""
    player = _RecordingPlayer()
    generator = HapticCueGenerator(player)

    assert generator.process_filler_detected(now=1.0) is CueKind.FILLER
    assert generator.process_filler_detected(now=2.0) is None
    assert generator.process_filler_detected(now=4.0) is CueKind.FILLER
    assert player.cues == [CueKind.FILLER, CueKind.FILLER]


def test_reset_clears_cooldown() -> None:
    """A new recording can cue immediately."""
    generator = HapticCueGenerator()
    generator.process_filler_detected(now=1.0)

    generator.reset(now=1.5)

    assert generator.process_filler_detected(now=1.5) is CueKind.FILLER


@pytest.mark.parametrize(
    ("step", "expected"),
    [
        (0.25, CueKind.PACE_TOO_FAST),
        (1.0, CueKind.PACE_TOO_SLOW),
        (0.5, None),
    ],
)
def test_rolling_pace_cues(step: float, expected: CueKind | None) -> None:
    """Rates above 190 or below 100 WPM cue; comfortable rates do not."""
    generator = HapticCueGenerator()

    assert generator.process_word_timestamps(_stamps(step), now=10.0) is expected


def test_pace_cue_waits_for_enough_speech() -> None:
    """No pace cue fires before the window spans five seconds."""
    generator = HapticCueGenerator()

    assert generator.process_word_timestamps(_stamps(0.1, 3.0), now=3.0) is None


def test_disabled_generator_never_plays() -> None:
    """Disabling cues silences every trigger."""
    player = _RecordingPlayer()
    generator = HapticCueGenerator(player, enabled=False)

    assert generator.process_filler_detected(now=1.0) is None
    assert generator.process_audio_level(-80.0, now=30.0) is None
    assert generator.process_word_timestamps(_stamps(0.25), now=10.0) is None
    assert player.cues == []


def test_haptic_settings_validate_thresholds() -> None:
    """Inverted pace bands are rejected."""
    with pytest.raises(ValueError, match="low_wpm"):
        HapticSettings(low_wpm=200.0, high_wpm=150.0)
    with pytest.raises(ValueError, match="cooldown_seconds"):
        HapticSettings(cooldown_seconds=-1.0)
