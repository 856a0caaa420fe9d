"""Target-vocabulary detection with English inflection matching."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from speakup.analysis.disfluency import is_filler_word
from speakup.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

_VOWELS = frozenset("aeiou")
_NON_DOUBLING = frozenset("wxy")
_MAX_DOUBLING_LENGTH = 6

DIRECT_SUFFIXES = ("s", "es", "ed", "ing", "er", "est", "ly")
E_DROP_SUFFIXES = ("ing", "ed", "er", "ive", "ion", "ation", "y", "ly")
Y_TO_I_SUFFIXES = ("ies", "ied", "ier", "iest", "iness", "ily")
DOUBLING_SUFFIXES = ("ing", "ed", "er", "est")


def _is_consonant(char: str) -> bool:
    return char.isalpha() and char not in _VOWELS


def _ends_with_cvc(word: str) -> bool:
    if len(word) < 3 or len(word) > _MAX_DOUBLING_LENGTH:
        return False
    first, middle, last = word[-3], word[-2], word[-1]
    return (
        _is_consonant(first)
        and middle in _VOWELS
        and _is_consonant(last)
        and last not in _NON_DOUBLING
    )


def inflected_forms(word: str) -> frozenset[str]:
    """Returns the bare word plus its regular inflections, lowercased.

    Examples: ``hope`` -> ``hoping``, ``hoped``; ``carry`` -> ``carried``;
    ``stop`` -> ``stopping``. Multi-word targets are returned unchanged.
    """
    base = word.strip().lower()
    if not base:
        return frozenset()
    if " " in base:
        return frozenset({" ".join(base.split())})

    forms = {base}
    forms.update(base + suffix for suffix in DIRECT_SUFFIXES)
    if base.endswith("e") and len(base) > 2:
        stem = base[:-1]
        forms.update(stem + suffix for suffix in E_DROP_SUFFIXES)
    if len(base) > 2 and base.endswith("y") and _is_consonant(base[-2]):
        stem = base[:-1]
        forms.update(stem + suffix for suffix in Y_TO_I_SUFFIXES)
    if _ends_with_cvc(base):
        doubled = base + base[-1]
        forms.update(doubled + suffix for suffix in DOUBLING_SUFFIXES)
    return frozenset(forms)


def build_vocabulary_pattern(word: str) -> re.Pattern[str] | None:
    """Compiles a word-boundary, case-insensitive matcher for a target word."""
    forms = inflected_forms(word)
    if not forms:
        return None
    alternatives = "|".join(
        r"\s+".join(re.escape(part) for part in form.split())
        for form in sorted(forms, key=lambda form: (-len(form), form))
    )
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


def find_vocabulary_matches(text: str, targets: Iterable[str]) -> dict[str, int]:
    """Counts occurrences of each target word (in any inflection) in ``text``.

    Blank targets and filler words are ignored. Targets that never occur are
    omitted from the result.
    """
    matches: dict[str, int] = {}
    for target in targets:
        cleaned = " ".join(target.split())
        if not cleaned:
            continue
        if is_filler_word(cleaned):
            logger.debug("Ignoring filler word %r in target vocabulary.", cleaned)
            continue
        pattern = build_vocabulary_pattern(cleaned)
        if pattern is None:
            continue
        count = len(pattern.findall(text))
        if count:
            matches[cleaned] = matches.get(cleaned, 0) + count
    return matches
