from __future__ import annotations

import logging
import re
from typing import Iterable, List

from .models import TextStatistics

logger = logging.getLogger(__name__)

# \s is restricted to ASCII whitespace: space, \t, \n, \v, \f, \r.
SENTENCE_SPLIT_RE = re.compile(r"[.?!]\s*", re.ASCII)
WORD_SPLIT_RE = re.compile(r"[,.!?]?\s+", re.ASCII)
NON_WHITESPACE_RE = re.compile(r"\S", re.ASCII)
VOWELS = frozenset("aeiouyAEIOUY")
POLYSYLLABLE_THRESHOLD = 2


def _split(pattern: re.Pattern[str], text: str) -> List[str]:
    """
    Split ``text`` on ``pattern`` and drop empty segments from the end.

    A text with no delimiter match comes back whole, so ``""`` gives ``[""]``,
    while a text made only of delimiters (e.g. ``"."``) gives ``[]``.
    Leading empty segments are kept.
    """
    if pattern.search(text) is None:
        return [text]
    parts = pattern.split(text)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def split_sentences(text: str) -> List[str]:
    """Split text on ``.``, ``?`` or ``!`` plus any trailing whitespace."""
    return _split(SENTENCE_SPLIT_RE, text)


def split_words(text: str) -> List[str]:
    """Split text on whitespace, swallowing one preceding ``, . ! ?``."""
    return _split(WORD_SPLIT_RE, text)


def count_characters(text: str) -> int:
    """Count every non-whitespace character, punctuation and digits included."""
    return sum(1 for char in text if NON_WHITESPACE_RE.match(char))


def count_syllables(word: str) -> int:
    """
    Estimate syllables by counting vowel groups.

    A trailing ``e`` is treated as silent and every word has at least one
    syllable.
    """
    count = 0
    prev_was_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not prev_was_vowel:
            count += 1
        prev_was_vowel = is_vowel

    if word[-1:] in ("e", "E"):
        count -= 1

    return max(1, count)


def syllable_counts(words: Iterable[str]) -> List[int]:
    """Return per-word syllable counts in word order."""
    return [count_syllables(word) for word in words]


def compute_statistics(text: str) -> TextStatistics:
    """Extract sentence, word, character and syllable counts from ``text``."""
    words = split_words(text)
    syllables = syllable_counts(words)
    stats = TextStatistics(
        sentence_count=len(split_sentences(text)),
        word_count=len(words),
        character_count=count_characters(text),
        syllable_count=sum(syllables),
        polysyllable_count=sum(1 for n in syllables if n > POLYSYLLABLE_THRESHOLD),
    )
    logger.debug("Computed text statistics: %s", stats)
    return stats
