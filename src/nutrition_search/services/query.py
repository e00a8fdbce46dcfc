"""Search query normalization."""

import re

ABBREVIATIONS: dict[str, str] = {
    "chkn": "chicken",
    "brst": "breast",
    "grnd": "ground",
    "whl": "whole",
    "org": "organic",
    "nat": "natural",
    "pnt": "peanut",
    "bttr": "butter",
    "choc": "chocolate",
    "strwbry": "strawberry",
    "blubrry": "blueberry",
    "brkfst": "breakfast",
    "sndk": "sandwich",
    "yog": "yogurt",
    "yogrt": "yogurt",
    "avocdo": "avocado",
    "avo": "avocado",
    "broc": "broccoli",
    "cauli": "cauliflower",
    "sw": "sweet",
    "pot": "potato",
    "tom": "tomato",
    "sal": "salmon",
    "turk": "turkey",
    "spag": "spaghetti",
    "oatml": "oatmeal",
    "pb": "peanut butter",
    "oj": "orange juice",
}

_NON_LETTERS = re.compile(r"[^a-z]")


def expand_abbreviations(term: str) -> str:
    """Expand known food abbreviations ("chkn brst" -> "chicken breast")."""
    words = term.lower().split()
    return " ".join(ABBREVIATIONS.get(word, word) for word in words)


def canonical_name(name: str) -> str:
    """Return the dedup key for a product name."""
    return _NON_LETTERS.sub("", name.lower())
