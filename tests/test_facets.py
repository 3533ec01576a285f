"""Tests for filter facet derivation."""

from unittest.mock import MagicMock

from utils.orders.facets import derive_facets, seed_price_range
from utils.orders.filters import FilterCriteria
from utils.orders.store import OrderStore


def test_facets_bound_every_total(sample_orders):
    facets = derive_facets(sample_orders)

    assert facets.price_bounds == (50, 250.5)
    assert all(facets.min_amount <= o.total_amount <= facets.max_amount for o in sample_orders)


def test_facets_collect_distinct_item_names(sample_orders):
    facets = derive_facets(sample_orders)
    assert set(facets.product_names) == {"Cotton Tee", "Denim Jeans", "Wool Scarf", "Linen Shirt"}
    assert len(facets.product_names) == 4


def test_empty_collection_has_zero_bounds():
    facets = derive_facets([])
    assert facets.price_bounds == (0, 0)
    assert facets.product_names == ()


def test_seed_resets_narrow_range_to_full_span(sample_orders):
    facets = derive_facets(sample_orders)
    criteria = FilterCriteria(status="Shipped", price_range=(60, 70))

    seeded = seed_price_range(criteria, facets)

    assert seeded.price_range == (50, 250.5)
    assert seeded.status == "Shipped"


def test_seed_leaves_criteria_when_max_is_zero():
    criteria = FilterCriteria(price_range=(1, 2))
    assert seed_price_range(criteria, derive_facets([])) is criteria


def test_store_facets_follow_reload(make_order):
    queries = MagicMock()
    queries.fetch_orders.return_value = [make_order(total=10)]
    store = OrderStore(queries=queries)

    store.reload()
    assert store.facets.max_amount == 10

    queries.fetch_orders.return_value = [make_order(total=10), make_order(total=90)]
    store.reload()
    assert store.facets.price_bounds == (10, 90)
