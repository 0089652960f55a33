"""Tokenisation, syllable estimation and Flesch reading ease."""

from __future__ import annotations

import math
import re
from typing import List

_NEWLINES = re.compile(r"\n+")
_NON_LETTERS = re.compile(r"[^a-z]")
_VOWEL_CLUSTER = re.compile(r"[aeiouy]{1,2}")
_SENTENCE_BREAK = re.compile(r"[.!?]+\s")

READING_EASE_MIN = -50.0
READING_EASE_MAX = 120.0


def clamp(n: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, n))


def round_half_up(n: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(n + 0.5))


def tokenize(text: str) -> List[str]:
    """Split *text* into whitespace-separated words."""
    return _NEWLINES.sub(" ", text or "").split()


def estimate_syllables(word: str) -> int:
    """Estimate the number of syllables in *word* (always at least 1)."""
    w = _NON_LETTERS.sub("", word.lower())
    if not w:
        return 1
    count = len(_VOWEL_CLUSTER.findall(w))
    if w.endswith("e"):
        count = max(1, count - 1)
    return max(1, count)


def flesch_reading_ease(text: str) -> float:
    """Return the Flesch reading-ease score of *text*, clamped to [-50, 120].

    Sentence and word counts floor at 1 so empty text never divides by zero.
    """
    text = text or ""
    sentences = max(1, len([s for s in _SENTENCE_BREAK.split(text) if s]))
    words = tokenize(text)
    syllables = sum(estimate_syllables(w) for w in words)
    word_count = max(1, len(words))
    score = (
        206.835
        - 1.015 * (word_count / sentences)
        - 84.6 * (syllables / word_count)
    )
    return clamp(score, READING_EASE_MIN, READING_EASE_MAX)
