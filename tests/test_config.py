"""Tests for typed configuration loading and environment refresh."""

from collections.abc import Generator

import pytest

import speakup.config as config


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keeps global settings stable across tests."""
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    config.reload_settings()
    yield
    config.reload_settings()


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables fall back to the documented defaults."""
    for name in (
        "SPEAKUP_TARGET_WPM",
        "SPEAKUP_TRACK_PAUSES",
        "SPEAKUP_TRACK_FILLERS",
        "SPEAKUP_TARGET_VOCABULARY",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = config.reload_settings()

    assert settings.analysis == config.AnalysisConfig()
    assert settings.haptics.silence_threshold_seconds == 4.0
    assert settings.stop_policy.grace_period_seconds == 3.0
    assert settings.log_level == "INFO"


def test_reload_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables should be reflected in loaded settings."""
    monkeypatch.setenv("SPEAKUP_TARGET_WPM", "135")
    monkeypatch.setenv("SPEAKUP_TRACK_PAUSES", "false")
    monkeypatch.setenv("SPEAKUP_TRACK_FILLERS", "yes")
    monkeypatch.setenv("SPEAKUP_TARGET_VOCABULARY", "resilient, pivot ,,leverage")
    monkeypatch.setenv("SPEAKUP_HAPTIC_HIGH_WPM", "180")
    monkeypatch.setenv("SPEAKUP_HAPTIC_COOLDOWN_SECONDS", "5")
    monkeypatch.setenv("SPEAKUP_STOP_GRACE_SECONDS", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config.reload_settings()

    assert settings.analysis.target_wpm == pytest.approx(135.0)
    assert settings.analysis.track_pauses is False
    assert settings.analysis.track_fillers is True
    assert settings.analysis.target_vocabulary == ("resilient", "pivot", "leverage")
    assert settings.haptics.high_wpm == pytest.approx(180.0)
    assert settings.haptics.cooldown_seconds == pytest.approx(5.0)
    assert settings.stop_policy.grace_period_seconds == pytest.approx(2.5)
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached_until_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings are read once and refreshed only on reload."""
    first = config.get_settings()
    monkeypatch.setenv("SPEAKUP_TARGET_WPM", "120")

    assert config.get_settings() is first
    assert config.reload_settings().analysis.target_wpm == pytest.approx(120.0)


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SPEAKUP_TARGET_WPM", "fast"),
        ("SPEAKUP_TARGET_WPM", "0"),
        ("SPEAKUP_TRACK_PAUSES", "sometimes"),
        ("SPEAKUP_HAPTIC_LOW_WPM", "250"),
    ],
)
def test_invalid_values_raise(
    monkeypatch: pytest.MonkeyPatch,
    name: str,
    value: str,
) -> None:
    """Malformed or inconsistent values are rejected at load time."""
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        config.reload_settings()

    monkeypatch.delenv(name)


def test_analysis_config_rejects_non_positive_target() -> None:
    """The target rate must be positive."""
    with pytest.raises(ValueError, match="target_wpm"):
        config.AnalysisConfig(target_wpm=-5.0)
