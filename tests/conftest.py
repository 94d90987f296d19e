"""Pytest configuration and fixtures"""
import pytest
from fastapi.testclient import TestClient

from store.api import create_app
from store.repos.cart_repo import SessionCartRepo
from store.repos.catalog_repo import CatalogRepo
from store.repos.order_repo import OrderRepo
from store.services.cart_service import CartService
from store.services.order_service import OrderService

SMALL_SEED = (
    ("Keyboard", "Mechanical keyboard", "10.00", "https://example.com/keyboard.jpg"),
    ("Mouse", "Wireless mouse", "0.10", "https://example.com/mouse.jpg"),
    ("Monitor", "27 inch monitor", "0.20", "https://example.com/monitor.jpg"),
)


@pytest.fixture
def catalog():
    """Catalog with three products: 10.00, 0.10, 0.20"""
    repo = CatalogRepo(SMALL_SEED)
    repo.initialize()
    return repo


@pytest.fixture
def sessions():
    return SessionCartRepo(ttl_seconds=60)


@pytest.fixture
def cart_service(catalog, sessions):
    return CartService(catalog=catalog, sessions=sessions)


@pytest.fixture
def order_service(sessions):
    return OrderService(sessions=sessions, orders=OrderRepo())


@pytest.fixture
def client():
    """Test client with a fresh in-memory store"""
    return TestClient(create_app())
