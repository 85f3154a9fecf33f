import pytest

from app.domain.models.query import QueryParams, ReviewFilter, SortOption, parse_page


def test_defaults():
    params = QueryParams.from_raw()
    assert params.keyword == ""
    assert params.categories == frozenset()
    assert params.sort is SortOption.NONE
    assert params.page == 1


def test_from_raw_parses_request_values():
    params = QueryParams.from_raw(keyword="  latte ", categories=["Tea", "", "Coffee"], sort="priceDesc", page="2")
    assert params.keyword == "latte"
    assert params.categories == frozenset({"Tea", "Coffee"})
    assert params.sort is SortOption.PRICE_DESC
    assert params.page == 2


def test_unknown_sort_means_no_reordering():
    assert SortOption.parse("cheapest") is SortOption.NONE
    assert SortOption.parse(None) is SortOption.NONE


@pytest.mark.parametrize("raw,expected", [("3", 3), (4, 4), ("0", 1), ("-5", 1), ("abc", 1), ("", 1), (None, 1)])
def test_parse_page(raw, expected):
    assert parse_page(raw) == expected


def test_review_filter_parse():
    assert ReviewFilter.parse("verified-reviews") is ReviewFilter.VERIFIED
    assert ReviewFilter.parse("nope") is ReviewFilter.ALL


def test_cache_fingerprint_ignores_category_order_and_keyword_case():
    a = QueryParams.from_raw(keyword="Latte", categories=["Tea", "Coffee"])
    b = QueryParams.from_raw(keyword="latte", categories=["Coffee", "Tea"])
    assert a.cache_fingerprint() == b.cache_fingerprint()
