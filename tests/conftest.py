import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from speakup.domain import RawWord  # noqa: E402


def _spaced_words(
    tokens: Sequence[str],
    *,
    word_seconds: float = 0.3,
    gap_seconds: float = 0.1,
    start: float = 0.0,
    confidence: float | None = None,
) -> list[RawWord]:
    """Lays tokens out back to back with a fixed word length and gap."""
    words: list[RawWord] = []
    cursor = start
    for token in tokens:
        words.append(RawWord(token, cursor, cursor + word_seconds, confidence))
        cursor += word_seconds + gap_seconds
    return words


@pytest.fixture
def spaced_words():
    """Factory for evenly spaced recognizer words."""
    return _spaced_words


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch):
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("speakup.__main__.Halo", _DummyHalo, raising=False)
