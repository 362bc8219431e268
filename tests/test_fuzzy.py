# tests/test_fuzzy.py
import pytest

from resolver.fuzzy import DEFAULT_MAX_DISTANCE, FuzzyMatch, levenshtein, nearest


@pytest.mark.parametrize(
    "a,b,d",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("vin", "vin", 0),
        ("kitten", "sitting", 3),
        ("chocolatt noir", "chocolat noir", 1),
        ("vin rouje", "vin rouge", 1),
        ("flaw", "lawn", 2),
        ("the", "th\u00e9", 1),
    ],
)
def test_levenshtein(a, b, d):
    assert levenshtein(a, b) == d
    assert levenshtein(b, a) == d


def test_default_threshold_is_two():
    assert DEFAULT_MAX_DISTANCE == 2


def test_nearest_returns_best_key_and_distance():
    keys = ["vin blanc", "vin rouge", "champagne"]
    assert nearest("vin rouje", keys) == FuzzyMatch("vin rouge", 1)


def test_nearest_strictly_smaller_replaces():
    # "abyz" is at 2, "abcy" at 1: the closer key wins even though it comes later
    assert nearest("abcx", ["abyz", "abcy"]) == FuzzyMatch("abcy", 1)


def test_nearest_tie_first_key_wins():
    assert nearest("cat", ["bat", "hat", "cut"]) == FuzzyMatch("bat", 1)
    assert nearest("cat", ["cut", "bat", "hat"]) == FuzzyMatch("cut", 1)


def test_nearest_threshold_boundary():
    keys = ["chocolat noir"]
    assert nearest("chocolat nor", keys).distance == 1
    assert nearest("chocolat no", keys) == FuzzyMatch("chocolat noir", 2)
    assert nearest("chocolat n", keys) is None


def test_nearest_custom_threshold():
    assert nearest("chocolat n", ["chocolat noir"], max_distance=3) == FuzzyMatch("chocolat noir", 3)
    assert nearest("vin rouje", ["vin rouge"], max_distance=0) is None


def test_nearest_empty_candidates():
    assert nearest("vin", []) is None


def test_nearest_distance_two_tie_keeps_file_order():
    # both keys are two edits from the query
    keys = ["vin rose", "vin sec"]
    assert nearest("vin re", keys) == FuzzyMatch("vin rose", 2)
    assert nearest("vin re", list(reversed(keys))) == FuzzyMatch("vin sec", 2)


def test_nearest_far_keys_never_reported_past_cutoff():
    # same length, every character differs: distance 4, above the cutoff
    assert nearest("abcd", ["wxyz"]) is None
    assert nearest("abcd", ["wxyz"], max_distance=4) == FuzzyMatch("wxyz", 4)
