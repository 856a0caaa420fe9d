"""Tests for context-aware filler classification."""

from __future__ import annotations

from speakup.analysis.disfluency import (
    CONTEXT_RULES,
    FillerLexicon,
    classify_disfluencies,
    is_filler_word,
)
from speakup.domain import RawWord, TimedWord
from speakup.transcript.timeline import build_timeline


def _classify(raw_words: list[RawWord]) -> dict[str, bool]:
    words = classify_disfluencies(build_timeline(raw_words).words)
    return {word.text: word.is_filler for word in words}


def _flags(raw_words: list[RawWord]) -> list[bool]:
    return [word.is_filler for word in classify_disfluencies(build_timeline(raw_words).words)]


def test_unconditional_fillers_are_always_marked(spaced_words) -> None:
    """Hesitation sounds count regardless of position."""
    raw = spaced_words(["um", "I", "think", "um", "this", "is", "good"])

    flags = _flags(raw)

    assert flags == [True, False, False, True, False, False, False]
    assert sum(flags) == 2


def test_drawn_out_hesitations_collapse_to_known_fillers(spaced_words) -> None:
    """Repeated letters such as 'ummmmm' still match the lexicon."""
    assert _flags(spaced_words(["Ummmmmm,", "hello"])) == [True, False]


def test_like_after_modal_is_a_verb(spaced_words) -> None:
    """'would like' without pauses is content, not a filler."""
    flags = _classify(spaced_words(["I", "would", "like", "coffee"]))

    assert flags["like"] is False


def test_quotative_like_after_linking_verb_is_filler(spaced_words) -> None:
    """'she was like' is a quotative filler."""
    flags = _classify(spaced_words(["she", "was", "like", "no", "way"]))

    assert flags["like"] is True


def test_sentence_initial_like_followed_by_pause_is_filler() -> None:
    """'Like, ...' at the start of speech with a pause after is a filler."""
    flags = _classify(
        [RawWord("Like,", 0.0, 0.3), RawWord("I", 0.8, 0.9), RawWord("said", 1.0, 1.3)]
    )

    assert flags["Like,"] is True


def test_intensifier_so_is_not_filler(spaced_words) -> None:
    """'not so good' uses 'so' as an intensifier."""
    flags = _classify(spaced_words(["it", "was", "not", "so", "good"]))

    assert flags["so"] is False


def test_well_as_adverb_and_as_opener() -> None:
    """'very well' is content while an opening 'Well,' is a filler."""
    adverb = _classify(
        [RawWord("very", 0.0, 0.3), RawWord("well", 0.4, 0.7), RawWord("done", 0.8, 1.0)]
    )
    opener = _classify(
        [RawWord("Well,", 0.0, 0.3), RawWord("maybe", 0.9, 1.2), RawWord("not", 1.3, 1.5)]
    )

    assert adverb["well"] is False
    assert opener["Well,"] is True


def test_right_after_article_is_adjective(spaced_words) -> None:
    """'the right answer' is content; a trailing 'right?' seeks confirmation."""
    adjective = _classify(spaced_words(["the", "right", "answer"]))
    tag = _classify(spaced_words(["that", "works,", "right?"]))

    assert adjective["right"] is False
    assert tag["right?"] is True


def test_just_without_pauses_is_content(spaced_words) -> None:
    """'I just arrived' keeps 'just' as a meaningful adverb."""
    assert _classify(spaced_words(["I", "just", "arrived"]))["just"] is False


def test_terminal_punctuation_starts_a_new_sentence() -> None:
    """A hedge adverb after a full stop counts as sentence-initial."""
    with_stop = _classify(
        [
            RawWord("agree.", 0.0, 0.4),
            RawWord("Actually,", 0.5, 0.9),
            RawWord("no", 1.5, 1.7),
        ]
    )
    without_stop = _classify(
        [
            RawWord("agree", 0.0, 0.4),
            RawWord("actually", 0.5, 0.9),
            RawWord("no", 1.5, 1.7),
        ]
    )

    assert with_stop["Actually,"] is True
    assert without_stop["actually"] is False


def test_filler_phrases_mark_both_words(spaced_words) -> None:
    """Two-word hedges mark both of their words."""
    flags = _flags(spaced_words(["it", "was", "kind", "of", "you", "know", "late"]))

    assert flags == [False, False, True, True, True, True, False]


def test_classification_does_not_mutate_input(spaced_words) -> None:
    """The classifier returns new words and leaves its input untouched."""
    timeline = build_timeline(spaced_words(["um", "hello"])).words

    classified = classify_disfluencies(timeline)

    assert [word.is_filler for word in timeline] == [False, False]
    assert classified[0] == TimedWord("um", 0.0, 0.3, None, True)


def test_context_rules_extend_through_lexicon_data(spaced_words) -> None:
    """New context rules are added as table entries, not classifier code."""
    lexicon = FillerLexicon(
        context_rules={**CONTEXT_RULES, "anyway": lambda ctx: ctx.is_sentence_start}
    )
    timeline = build_timeline(spaced_words(["anyway", "we", "left", "anyway"])).words

    flags = [word.is_filler for word in classify_disfluencies(timeline, lexicon=lexicon)]

    assert flags == [True, False, False, False]


def test_is_filler_word_ignores_context_dependent_words() -> None:
    """The context-free check only accepts unconditional fillers."""
    assert is_filler_word("Um,")
    assert is_filler_word("HMMMM")
    assert not is_filler_word("like")
    assert not is_filler_word("resilient")


def test_open_ended_timeline_does_not_assume_trailing_pause(spaced_words) -> None:
    """A trailing context word only counts once a pause after it is known."""
    timeline = build_timeline(spaced_words(["it", "feels", "like"])).words

    open_ended = classify_disfluencies(timeline, trailing_pause=False)
    settled = classify_disfluencies(timeline)

    assert [word.is_filler for word in open_ended] == [False, False, False]
    assert settled[-1].is_filler is True
