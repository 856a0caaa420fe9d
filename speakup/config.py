"""Typed configuration for the speech analysis engine.

Settings are read from the environment (optionally seeded from a ``.env``
file) into frozen dataclasses. ``AnalysisConfig`` is the immutable struct the
batch analyzer and the streaming monitor receive at call time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_TARGET_WPM = 150.0

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class AnalysisConfig:
    """Per-call analysis options.

    Attributes:
        target_wpm: Speaking rate the pace subscore is centered on.
        track_pauses: When False, pause statistics are not reported and the
            pause-quality subscore does not contribute to the overall score.
        track_fillers: When False, filler instances are not reported and the
            filler-usage subscore does not contribute to the overall score.
        target_vocabulary: Words the speaker is practicing.
        prompt_text: Prompt the speaker answered, used for relevance scoring.
    """

    target_wpm: float = DEFAULT_TARGET_WPM
    track_pauses: bool = True
    track_fillers: bool = True
    target_vocabulary: tuple[str, ...] = ()
    prompt_text: str | None = None

    def __post_init__(self) -> None:
        if self.target_wpm <= 0.0:
            raise ValueError("target_wpm must be greater than zero.")


@dataclass(frozen=True)
class HapticSettings:
    """Thresholds for live haptic coaching cues."""

    silence_threshold_seconds: float = 4.0
    silence_level_db: float = -40.0
    high_wpm: float = 190.0
    low_wpm: float = 100.0
    wpm_window_seconds: float = 15.0
    min_wpm_span_seconds: float = 5.0
    cooldown_seconds: float = 3.0

    def __post_init__(self) -> None:
        if self.cooldown_seconds < 0.0:
            raise ValueError("cooldown_seconds cannot be negative.")
        if self.wpm_window_seconds <= 0.0:
            raise ValueError("wpm_window_seconds must be greater than zero.")
        if self.low_wpm > self.high_wpm:
            raise ValueError("low_wpm must not exceed high_wpm.")


@dataclass(frozen=True)
class StopPolicySettings:
    """Controls how an in-progress recording is finalized after stop."""

    silence_gap_seconds: float = 0.7
    silence_level_db: float = -40.0
    grace_period_seconds: float = 3.0

    def __post_init__(self) -> None:
        if self.silence_gap_seconds < 0.0:
            raise ValueError("silence_gap_seconds cannot be negative.")
        if self.grace_period_seconds < 0.0:
            raise ValueError("grace_period_seconds cannot be negative.")


@dataclass(frozen=True)
class AppSettings:
    """Process-level settings resolved from the environment."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    haptics: HapticSettings = field(default_factory=HapticSettings)
    stop_policy: StopPolicySettings = field(default_factory=StopPolicySettings)
    log_level: str = "INFO"


def _read_bool(name: str, default: bool) -> bool:
    raw_value = os.getenv(name, "").strip().lower()
    if not raw_value:
        return default
    if raw_value in _TRUE_VALUES:
        return True
    if raw_value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw_value!r}.")


def _read_float(name: str, default: float) -> float:
    raw_value = os.getenv(name, "").strip()
    if not raw_value:
        return default
    try:
        return float(raw_value)
    except ValueError as err:
        raise ValueError(f"{name} must be a number, got {raw_value!r}.") from err


def _read_words(name: str) -> tuple[str, ...]:
    raw_value = os.getenv(name, "")
    return tuple(word.strip() for word in raw_value.split(",") if word.strip())


def _load_settings() -> AppSettings:
    load_dotenv()
    analysis = AnalysisConfig(
        target_wpm=_read_float("SPEAKUP_TARGET_WPM", DEFAULT_TARGET_WPM),
        track_pauses=_read_bool("SPEAKUP_TRACK_PAUSES", True),
        track_fillers=_read_bool("SPEAKUP_TRACK_FILLERS", True),
        target_vocabulary=_read_words("SPEAKUP_TARGET_VOCABULARY"),
    )
    haptics = HapticSettings(
        silence_threshold_seconds=_read_float("SPEAKUP_HAPTIC_SILENCE_SECONDS", 4.0),
        high_wpm=_read_float("SPEAKUP_HAPTIC_HIGH_WPM", 190.0),
        low_wpm=_read_float("SPEAKUP_HAPTIC_LOW_WPM", 100.0),
        wpm_window_seconds=_read_float("SPEAKUP_HAPTIC_WINDOW_SECONDS", 15.0),
        cooldown_seconds=_read_float("SPEAKUP_HAPTIC_COOLDOWN_SECONDS", 3.0),
    )
    stop_policy = StopPolicySettings(
        silence_gap_seconds=_read_float("SPEAKUP_STOP_SILENCE_GAP_SECONDS", 0.7),
        grace_period_seconds=_read_float("SPEAKUP_STOP_GRACE_SECONDS", 3.0),
    )
    return AppSettings(
        analysis=analysis,
        haptics=haptics,
        stop_policy=stop_policy,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


_SETTINGS: AppSettings | None = None


def get_settings() -> AppSettings:
    """Returns cached settings, loading them on first access."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = _load_settings()
    return _SETTINGS


def reload_settings() -> AppSettings:
    """Re-reads the environment and replaces the cached settings."""
    global _SETTINGS
    _SETTINGS = _load_settings()
    return _SETTINGS
