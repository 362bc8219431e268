"""
Bounded edit-distance search over lexicon keys.
"""
from __future__ import annotations

from typing import Iterable, NamedTuple, Optional

from rapidfuzz.distance import Levenshtein

# Max Levenshtein distance accepted as a fuzzy hit. Fixed for all query
# lengths; override per resolver via config.toml [resolver].max_distance.
DEFAULT_MAX_DISTANCE = 2


class FuzzyMatch(NamedTuple):
    key: str
    distance: int


def levenshtein(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance (insert, delete, substitute)."""
    return Levenshtein.distance(a, b)


def nearest(
    query: str, keys: Iterable[str], max_distance: int = DEFAULT_MAX_DISTANCE
) -> Optional[FuzzyMatch]:
    """
    Closest key within max_distance, or None.
    Keys are scanned in the given order; on equal distance the first key wins.
    """
    best: Optional[FuzzyMatch] = None
    for key in keys:
        # distance >= length difference
        if abs(len(key) - len(query)) > max_distance:
            continue
        # above the cutoff rapidfuzz returns max_distance + 1
        d = Levenshtein.distance(query, key, score_cutoff=max_distance)
        if d <= max_distance and (best is None or d < best.distance):
            best = FuzzyMatch(key, d)
            if d == 0:
                break
    return best
