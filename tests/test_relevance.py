"""Tests for prompt relevance and coherence scoring."""

from __future__ import annotations

from speakup.scoring.relevance import (
    coherence_score,
    connective_usage,
    content_words,
    prompt_relevance,
    relevance_score,
)
from speakup.transcript.timeline import build_timeline

PROMPT = "Describe your favorite travel destination"
ANSWER = (
    "My favorite travel destination is Lisbon because the food and weather "
    "are wonderful"
)
CONNECTED = (
    "First, the garden needs water every morning. However, the garden also "
    "needs shade because the sun is strong. Therefore, we planted trees near "
    "the garden. Finally, the garden now grows tomatoes and beans."
)
PLAIN = (
    "The garden needs water every morning. The dog sleeps near the door. "
    "Our car is blue. Yesterday it rained over the mountains near town."
)


def _equal_or_half(first: str, second: str) -> float | None:
    if "describe" in (first, second):
        return None
    return 1.0 if first == second else 0.5


def test_content_words_drop_stopwords_and_short_tokens() -> None:
    """Only meaningful words of three or more letters are kept."""
    assert content_words(PROMPT) == ["describe", "favorite", "travel", "destination"]


def test_prompt_relevance_uses_keyword_overlap_without_provider() -> None:
    """Three of four prompt keywords appear in the answer."""
    assert prompt_relevance(PROMPT, ANSWER) == 75


def test_prompt_relevance_blends_semantic_similarity() -> None:
    """Keywords the provider cannot embed are skipped in the semantic mean."""
    assert prompt_relevance(PROMPT, ANSWER, similarity=_equal_or_half) == 90


def test_prompt_relevance_needs_enough_keywords() -> None:
    """Single-keyword prompts and near-empty answers are not scored."""
    assert prompt_relevance("Travel", ANSWER) is None
    assert prompt_relevance(PROMPT, "it is the one") is None


def test_connective_usage_rewards_discourse_markers() -> None:
    """Connected speech scores higher than unconnected statements."""
    assert connective_usage(CONNECTED) > connective_usage(PLAIN)
    assert connective_usage("too short") == 0.5


def test_coherence_prefers_connected_on_topic_speech(spaced_words) -> None:
    """Topic continuity and connectives raise coherence."""
    connected = build_timeline(spaced_words(CONNECTED.split())).words
    plain = build_timeline(spaced_words(PLAIN.split())).words

    assert coherence_score(connected) > coherence_score(plain)


def test_coherence_requires_two_sentences(spaced_words) -> None:
    """A single sentence has no continuity to measure."""
    words = build_timeline(spaced_words(["one", "long", "sentence", "only"])).words

    assert coherence_score(words) is None


def test_relevance_score_prefers_prompt_and_falls_back_to_coherence(
    spaced_words,
) -> None:
    """With a prompt the score is relevance; without one it is coherence."""
    answer = build_timeline(spaced_words(ANSWER.split())).words
    connected = build_timeline(spaced_words(CONNECTED.split())).words

    assert relevance_score(answer, prompt_text=PROMPT) == 75
    assert relevance_score(answer, prompt_text=None) is None
    assert relevance_score(connected, prompt_text=None) == coherence_score(connected)
