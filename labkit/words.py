"""Per-word statistics and the tokenisers used to feed the word tables."""

from __future__ import annotations

import re
import string
from collections import Counter
from dataclasses import dataclass

VOWELS = "aeiou"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_LETTER_RUN = re.compile(r"[A-Za-z]+")


@dataclass
class WordStats:
    """Counters kept for every distinct word."""

    frequency: int = 0
    length: int = 0
    vowels: int = 0
    repeated_vowels: int = 0
    repeats: int = 0


def analyze_word(word: str) -> WordStats:
    """Compute the statistics of a single occurrence of ``word``.

    ``vowels`` counts vowels case-insensitively, ``repeated_vowels`` counts
    every vowel occurrence beyond the first of its kind, and ``repeats``
    counts positions whose character appears again later in the word.
    """
    lowered = word.translate(_ASCII_LOWER)
    vowel_counts = Counter(char for char in lowered if char in VOWELS)
    repeats = sum(1 for index, char in enumerate(word) if char in word[index + 1:])
    return WordStats(
        frequency=1,
        length=len(word),
        vowels=sum(vowel_counts.values()),
        repeated_vowels=sum(count - 1 for count in vowel_counts.values()),
        repeats=repeats,
    )


def split_on_spaces(line: str) -> list[str]:
    """Return the pieces of ``line`` that are terminated by a space.

    Text after the last space is not a word; consecutive spaces give
    empty pieces.
    """
    return line.split(" ")[:-1]


def extract_letter_words(token: str) -> list[str]:
    """Return the runs of ASCII letters found in ``token``."""
    return _LETTER_RUN.findall(token)