"""
Edit-distance similarity used by the fuzzy match tier.

similarity = 1 - distance / max(len(a), len(b)), where distance is the unit-cost
Levenshtein distance over the full strings.
"""

from rapidfuzz.distance import Levenshtein

FUZZY_THRESHOLD = 0.6


def levenshtein(a: str, b: str) -> int:
    # insert, delete and substitute all cost 1
    return Levenshtein.distance(a, b, weights=(1, 1, 1))


def similarity(a: str, b: str) -> float:
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - levenshtein(a, b) / longest


def are_similar(a: str, b: str, threshold: float = FUZZY_THRESHOLD) -> bool:
    return similarity(a, b) > threshold
