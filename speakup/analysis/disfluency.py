"""Context-aware filler and disfluency classification.

Every word is labeled using a two-tier lexicon: hesitation sounds that are
always fillers, and words whose filler status depends on their neighbours,
surrounding pauses and sentence position. A second pass marks both words of
known two-word filler phrases.

The lexicon is plain data (``FillerLexicon``). Context-dependent entries map
a word to a predicate over ``WordContext``, so new rules are added to the
table without touching the classification loop.
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from speakup.analysis.text import (
    SENTENCE_BREAK_GAP_SECONDS,
    ends_sentence,
    normalize_token,
)
from speakup.domain import TimedWord

CONTEXT_PAUSE_SECONDS = 0.3


@dataclass(frozen=True, slots=True)
class WordContext:
    """Lexical, positional and prosodic context of one word."""

    word: str
    previous: str | None
    next: str | None
    pause_before: bool
    pause_after: bool
    is_sentence_start: bool


FillerRule: TypeAlias = Callable[[WordContext], bool]


UNCONDITIONAL_FILLERS: frozenset[str] = frozenset(
    {
        "um", "umm", "ummm", "ummmm", "hum",
        "uh", "uhh", "uhhh", "uhhhh",
        "er", "err", "errr", "erm",
        "ah", "ahh", "ahhh",
        "eh", "ehh",
        "oh", "ohh",
        "mm", "mmm", "mhm", "mhmm", "mmhmm", "mm-hmm",
        "hmm", "hmmm", "hmmmm",
        "huh", "uh-huh", "uhuh",
        "yeah", "yea",
    }
)

FILLER_PHRASES: frozenset[tuple[str, str]] = frozenset(
    {("you", "know"), ("i", "mean"), ("sort", "of"), ("kind", "of")}
)

_VERB_PRECEDERS = frozenset(
    {
        "would", "do", "does", "did", "don't", "doesn't", "didn't",
        "i", "you", "we", "they", "he", "she", "it",
        "really", "actually", "also", "always", "never",
    }
)
_LINKING_VERBS = frozenset(
    {"was", "is", "are", "were", "be", "been", "being", "felt", "looked", "seemed", "acted"}
)
_FILLER_FOLLOWERS = frozenset(
    {
        "really", "totally", "super", "very", "so", "pretty",
        "kind", "sort", "completely", "absolutely", "honestly",
    }
)
_WELL_MODIFIERS = frozenset({"very", "quite", "as", "pretty", "really"})
_WELL_PARTICIPLES = frozenset({"done", "made", "known", "written", "said"})
_DETERMINERS = frozenset({"the", "a", "an", "that", "this"})


def _like_is_filler(ctx: WordContext) -> bool:
    if ctx.is_sentence_start and ctx.pause_after:
        return True
    # Quotative: "she was like, no way".
    if ctx.previous in _LINKING_VERBS:
        return True
    if ctx.pause_before and ctx.pause_after:
        return True
    if ctx.next in _FILLER_FOLLOWERS:
        return True
    # "would like", "I like".
    if ctx.previous in _VERB_PRECEDERS:
        return False
    return ctx.pause_before or ctx.pause_after


def _so_is_filler(ctx: WordContext) -> bool:
    if ctx.is_sentence_start and ctx.pause_after:
        return True
    if ctx.previous == "not":
        return False
    # Intensifier: "so good".
    if not ctx.pause_after and ctx.next is not None:
        return False
    return ctx.pause_before and ctx.pause_after


def _pause_surrounded(ctx: WordContext) -> bool:
    return ctx.pause_before and ctx.pause_after


def _well_is_filler(ctx: WordContext) -> bool:
    if ctx.is_sentence_start and ctx.pause_after:
        return True
    if ctx.previous in _WELL_MODIFIERS or ctx.next in _WELL_PARTICIPLES:
        return False
    return ctx.pause_before and ctx.pause_after


def _confirmation_is_filler(ctx: WordContext) -> bool:
    # "the right answer" is an adjective, "..., right?" seeks confirmation.
    if ctx.previous in _DETERMINERS:
        return False
    return ctx.pause_before or ctx.pause_after


def _hedge_adverb_is_filler(ctx: WordContext) -> bool:
    if ctx.is_sentence_start and ctx.pause_after:
        return True
    return ctx.pause_before and ctx.pause_after


CONTEXT_RULES: Mapping[str, FillerRule] = MappingProxyType(
    {
        "like": _like_is_filler,
        "so": _so_is_filler,
        "just": _pause_surrounded,
        "well": _well_is_filler,
        "right": _confirmation_is_filler,
        "okay": _confirmation_is_filler,
        "actually": _hedge_adverb_is_filler,
        "basically": _hedge_adverb_is_filler,
        "literally": _hedge_adverb_is_filler,
        "honestly": _hedge_adverb_is_filler,
        "seriously": _hedge_adverb_is_filler,
    }
)


@dataclass(frozen=True)
class FillerLexicon:
    """Filler vocabulary and context rules used by the classifier."""

    unconditional: frozenset[str] = UNCONDITIONAL_FILLERS
    context_rules: Mapping[str, FillerRule] = field(default_factory=lambda: CONTEXT_RULES)
    phrases: frozenset[tuple[str, str]] = FILLER_PHRASES

    def is_unconditional(self, token: str) -> bool:
        """Matches hesitation sounds, including drawn-out spellings."""
        return token in self.unconditional or _collapse_repeats(token) in self.unconditional

    def is_filler(self, ctx: WordContext) -> bool:
        """Applies the unconditional tier, then the word's context rule."""
        if self.is_unconditional(ctx.word):
            return True
        rule = self.context_rules.get(ctx.word)
        return rule(ctx) if rule is not None else False

    def is_phrase(self, first: str, second: str) -> bool:
        return (first, second) in self.phrases


DEFAULT_LEXICON = FillerLexicon()


def _collapse_repeats(token: str) -> str:
    collapsed: list[str] = []
    for char in token:
        if not collapsed or collapsed[-1] != char:
            collapsed.append(char)
    return "".join(collapsed)


def is_filler_word(word: str, *, lexicon: FillerLexicon = DEFAULT_LEXICON) -> bool:
    """Context-free filler check; context-dependent words never match."""
    return lexicon.is_unconditional(normalize_token(word))


def build_word_contexts(
    words: Sequence[TimedWord],
    *,
    trailing_pause: bool = True,
) -> list[WordContext]:
    """Derives pause and sentence-position context for each timeline word.

    The last word is followed by a pause only when ``trailing_pause`` is set;
    in a partial transcript the speaker may still be mid-phrase.
    """
    tokens = [normalize_token(word.text) for word in words]
    contexts: list[WordContext] = []
    last_index = len(words) - 1
    for index, word in enumerate(words):
        if index == 0:
            gap_before = word.start
            pause_before = gap_before > CONTEXT_PAUSE_SECONDS
            sentence_start = True
        else:
            previous_word = words[index - 1]
            gap_before = word.start - previous_word.end
            pause_before = gap_before > CONTEXT_PAUSE_SECONDS
            sentence_start = gap_before > SENTENCE_BREAK_GAP_SECONDS or ends_sentence(
                previous_word.text
            )
        if index == last_index:
            pause_after = trailing_pause
        else:
            pause_after = words[index + 1].start - word.end > CONTEXT_PAUSE_SECONDS
        contexts.append(
            WordContext(
                word=tokens[index],
                previous=tokens[index - 1] if index > 0 else None,
                next=tokens[index + 1] if index < last_index else None,
                pause_before=pause_before,
                pause_after=pause_after,
                is_sentence_start=sentence_start,
            )
        )
    return contexts


def classify_disfluencies(
    words: Sequence[TimedWord],
    *,
    lexicon: FillerLexicon = DEFAULT_LEXICON,
    trailing_pause: bool = True,
) -> list[TimedWord]:
    """Returns a copy of the timeline with ``is_filler`` populated.

    Args:
        words: Timeline sorted by start time.
        lexicon: Filler vocabulary and context rules.
        trailing_pause: Whether the timeline ends in silence. Pass False for
            partial transcripts that are still growing.

    Returns:
        New ``TimedWord`` instances in the same order.
    """
    if not words:
        return []
    contexts = build_word_contexts(words, trailing_pause=trailing_pause)
    flags = [lexicon.is_filler(ctx) for ctx in contexts]
    for index in range(len(words) - 1):
        if lexicon.is_phrase(contexts[index].word, contexts[index + 1].word):
            flags[index] = True
            flags[index + 1] = True
    return [
        replace(word, is_filler=flag) for word, flag in zip(words, flags, strict=True)
    ]
