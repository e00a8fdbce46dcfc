"""Bigram string similarity."""

import re
from collections import Counter

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _bigrams(value: str) -> Counter[str]:
    cleaned = _NON_ALNUM.sub("", value.lower())
    return Counter(cleaned[i : i + 2] for i in range(len(cleaned) - 1))


def bigram_similarity(a: str, b: str) -> float:
    """Return the Dice coefficient of two strings' character bigrams.

    Comparison ignores case and non-alphanumeric characters. Strings with
    fewer than two characters have no bigrams and always score 0.
    """
    bigrams_a = _bigrams(a)
    bigrams_b = _bigrams(b)
    if not bigrams_a or not bigrams_b:
        return 0.0
    matching = sum((bigrams_a & bigrams_b).values())
    return 2 * matching / (sum(bigrams_a.values()) + sum(bigrams_b.values()))
