"""Tests for the product catalog, queries and manager."""

import json
from unittest.mock import MagicMock

import pytest

from utils.api import ApiError
from utils.products.catalog import (
    distinct_options, filter_products, format_product_option, product_lookup
)
from utils.products.common import validate_product_update
from utils.products.manager import ProductError, ProductManager, ProductValidationError
from utils.products.models import ProductSummary
from utils.products.queries import ProductQueries

PRODUCT_DOCS = [
    {"_id": "p1", "name": "Cotton Tee", "category": "Men", "subCategory": "Topwear",
     "tags": ["summer", "basics"], "price": 499, "sizes": ["M", "L"], "color": ["Blue"],
     "bestSeller": True, "createdAt": "2024-04-01T00:00:00.000Z"},
    {"_id": "p2", "name": "Wool Scarf", "category": "Women", "subCategory": "Winterwear",
     "tags": ["winter"], "price": 899, "sizes": ["M"]},
    {"_id": "p3", "name": "Kids Shorts", "category": "Kids", "subCategory": "Bottomwear",
     "tags": ["summer"], "price": 299, "inStock": False},
]


@pytest.fixture
def products():
    return [ProductSummary.from_api(d) for d in PRODUCT_DOCS]


def test_from_api_maps_fields(products):
    tee = products[0]
    assert tee.id == "p1"
    assert tee.sub_category == "Topwear"
    assert tee.colors == ("Blue",)
    assert tee.best_seller
    assert tee.created_at is not None
    assert products[2].in_stock is False


def test_distinct_options(products):
    options = distinct_options(products)
    assert options["categories"] == ["Men", "Women", "Kids"]
    assert options["tags"] == ["summer", "basics", "winter"]


def test_picker_filters_combine(products):
    assert [p.id for p in filter_products(products, tag="summer")] == ["p1", "p3"]
    assert [p.id for p in filter_products(products, category="Kids", tag="summer")] == ["p3"]
    assert filter_products(products) == products


def test_option_label(products):
    assert format_product_option(products[0]) == "Cotton Tee | Cat: Men | Sub: Topwear | Tags: summer, basics"
    assert set(product_lookup(products)) == {"p1", "p2", "p3"}


class TestProductQueries:

    def test_list_is_public_with_limit(self):
        client = MagicMock()
        client.get.return_value = {"success": True, "products": PRODUCT_DOCS}

        result = ProductQueries(client=client).get_products(limit=50)

        client.get.assert_called_once_with("/api/product/list", params={"limit": 50}, auth=False)
        assert len(result) == 3

    def test_update_encodes_arrays_and_flags(self):
        client = MagicMock()
        client.patch.return_value = {"success": True, "message": "Product Updated"}

        message = ProductQueries(client=client).update_product(
            "p1", {"name": "Tee", "price": 450, "sizes": ["M"], "bestSeller": False, "brand": None}
        )

        assert message == "Product Updated"
        args, kwargs = client.patch.call_args
        assert args == ("/api/product/update/p1",)
        form = kwargs["data"]
        assert json.loads(form["sizes"]) == ["M"]
        assert form["bestSeller"] == "false"
        assert form["price"] == "450"
        assert "brand" not in form

    def test_remove(self):
        client = MagicMock()
        client.post.return_value = {"success": True, "message": "Product Removed"}

        assert ProductQueries(client=client).remove_product("p2") == "Product Removed"
        client.post.assert_called_once_with("/api/product/remove", json={"id": "p2"})


class TestProductManager:

    def test_validation_blocks_before_backend(self):
        queries = MagicMock()
        manager = ProductManager(queries=queries)

        with pytest.raises(ProductValidationError):
            manager.update_product("p1", {"name": "", "price": -5})
        queries.update_product.assert_not_called()

    def test_unknown_sizes_only_warn(self):
        results = validate_product_update({"name": "Tee", "sizes": ["M", "XXXL"]})
        assert results.is_valid
        assert results.rule_ids() == ["P3"]

    def test_update_reloads_list(self, products):
        queries = MagicMock()
        queries.update_product.return_value = "Product Updated"
        queries.get_products.return_value = products
        manager = ProductManager(queries=queries)

        assert manager.update_product("p1", {"name": "Tee"}) == "Product Updated"
        assert manager.products == products

    def test_remove_failure(self):
        queries = MagicMock()
        queries.remove_product.side_effect = ApiError("Not Authorized", 401)

        with pytest.raises(ProductError):
            ProductManager(queries=queries).remove_product("p1")

    def test_failed_reload_keeps_list(self, products):
        queries = MagicMock()
        manager = ProductManager(queries=queries)
        manager.products = products
        queries.get_products.side_effect = ApiError("down")

        with pytest.raises(ProductError):
            manager.reload()
        assert manager.products == products
