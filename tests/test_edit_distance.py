import pytest

from app.domain.services.edit_distance import levenshtein_distance


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "tea", 3),
        ("latte", "latte", 0),
        ("late", "latte", 1),
        ("kitten", "sitting", 3),
        ("mocha", "macha", 1),
        ("flaw", "lawn", 2),
        ("ab", "ba", 2),  # no transpositions
    ],
)
def test_known_distances(a, b, expected):
    assert levenshtein_distance(a, b) == expected


@pytest.mark.parametrize("a,b", [("espresso", "expresso"), ("", "chai"), ("green tea", "tea")])
def test_symmetric(a, b):
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)


def test_case_sensitive():
    assert levenshtein_distance("Latte", "latte") == 1
