"""Tests for the product catalog"""
from decimal import Decimal

from store.data.seed import PRODUCT_SEED
from store.repos.catalog_repo import CatalogRepo


def test_default_catalog_has_ten_products():
    repo = CatalogRepo()
    repo.initialize()

    products = repo.list_all()
    assert len(PRODUCT_SEED) == 10
    assert [p.id for p in products] == list(range(1, 11))
    assert products[0].name == "Portátil Ultraligero X"
    assert products[0].price == Decimal("1299.99")


def test_initialize_assigns_ids_once():
    repo = CatalogRepo()
    repo.initialize()
    repo.initialize()

    assert len(repo.list_all()) == 10
    assert repo.max_id() == 10


def test_find_by_id(catalog):
    product = catalog.find_by_id(1)

    assert product.name == "Keyboard"
    assert product.price == Decimal("10.00")


def test_find_unknown_returns_none(catalog):
    assert catalog.find_by_id(999) is None
    assert catalog.find_by_id(0) is None


def test_list_all_is_a_copy(catalog):
    products = catalog.list_all()
    products.clear()

    assert len(catalog.list_all()) == 3
