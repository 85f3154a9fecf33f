from app.domain.models.query import QueryParams, SortOption
from app.domain.services.catalog_query_svc import filter_catalog, run_catalog_query

from conftest import make_product


def names(products):
    return [p.name for p in products]


def test_category_and_price_sort_end_to_end():
    catalog = [
        make_product(1, "Iced Mocha", "Coffee", price=120),
        make_product(2, "Green Tea", "Tea", price=80),
    ]
    params = QueryParams(keyword="", categories=frozenset({"Tea"}), sort=SortOption.PRICE_ASC)
    assert names(run_catalog_query(catalog, params)) == ["Green Tea"]


def test_keyword_and_category_combine(drinks):
    params = QueryParams(keyword="latte", categories=frozenset({"Coffee"}))
    assert names(run_catalog_query(drinks, params)) == ["Caramel Latte"]


def test_keyword_then_sort(drinks):
    params = QueryParams(keyword="latte", sort=SortOption.PRICE_ASC)
    assert names(run_catalog_query(drinks, params)) == ["Chai Latte", "Caramel Latte"]


def test_no_filters_returns_whole_catalog_in_order(drinks):
    assert run_catalog_query(drinks, QueryParams()) == drinks


def test_no_match_is_empty_list(drinks):
    assert run_catalog_query(drinks, QueryParams(keyword="sandwich")) == []
    assert run_catalog_query([], QueryParams(keyword="latte")) == []


def test_filtering_is_idempotent(drinks):
    params = QueryParams(keyword="tea", categories=frozenset({"Tea", "Coffee"}))
    once = filter_catalog(drinks, params)
    assert filter_catalog(once, params) == once
