import itertools

import Levenshtein
import pytest

from spellcheck.ranker import levenshtein

WORDS = ["", "a", "cat", "caat", "hat", "kitten", "sitting", "flaw", "lawn", "abc", "cba", "banana"]


def test_distance_identity_and_empty():
    for w in WORDS:
        assert levenshtein(w, w) == 0
        assert levenshtein("", w) == len(w)
        assert levenshtein(w, "") == len(w)


def test_distance_is_symmetric():
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein(a, b) == levenshtein(b, a)


@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("caat", "cat", 1),
    ("caat", "hat", 2),
    ("abc", "cba", 2),
])
def test_known_distances(a, b, expected):
    assert levenshtein(a, b) == expected


def test_matches_reference_library():
    # python-Levenshtein uses the same unit costs
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein(a, b) == Levenshtein.distance(a, b)
