# store/services/cart_service.py
from decimal import Decimal
from typing import List

from store.domain.models import CartLine, Product
from store.repos.cart_repo import SessionCartRepo
from store.repos.catalog_repo import CatalogRepo
from store.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y katalogu i koszyka dla warstwy HTTP.
    query (list_products, get_cart_contents, get_cart_total) tylko odczyt
    commands (add, update, clear) modyfikuja koszyk sesji

    Niepoprawne dane (nieznany produkt, ilosc <= 0 przy dodawaniu) sa
    ignorowane bez bledu.
    """

    def __init__(self, catalog: CatalogRepo, sessions: SessionCartRepo):
        self.catalog = catalog
        self.sessions = sessions

    #query
    def list_products(self) -> List[Product]:
        return self.catalog.list_all()

    def get_product(self, product_id: int) -> Product | None:
        return self.catalog.find_by_id(product_id)

    def get_cart_contents(self, session_id: str) -> List[CartLine]:
        cart = self.sessions.get(session_id)
        return cart.lines() if cart is not None else []

    def get_cart_total(self, session_id: str) -> Decimal:
        cart = self.sessions.get(session_id)
        return cart.total() if cart is not None else Decimal("0")

    #commands
    def add_to_cart(self, session_id: str, product_id: int, quantity: int) -> None:
        product = self.catalog.find_by_id(product_id)
        if not product:
            logger.info(f"Ignoring unknown product {product_id} for session {session_id}")
            return

        if quantity <= 0:
            logger.info(f"Ignoring non-positive quantity {quantity} for product {product_id}")
            return

        cart = self.sessions.get_or_create(session_id)
        cart.add_item(product, quantity)
        logger.info(f"Dodano {quantity} x produkt {product_id} do koszyka sesji {session_id}")

    def update_cart_item(self, session_id: str, product_id: int, quantity: int) -> None:
        cart = self.sessions.get(session_id)
        if cart is None:
            return

        cart.update_quantity(product_id, quantity)
        if quantity <= 0:
            logger.info(f"Usunieto produkt {product_id} z koszyka sesji {session_id}")
        else:
            logger.info(f"Ustawiono ilosc produktu {product_id} na {quantity} (sesja {session_id})")

    def clear_cart(self, session_id: str) -> None:
        cart = self.sessions.get(session_id)
        if cart is not None:
            cart.clear()
            logger.info(f"Wyczyszczono koszyk sesji {session_id}")
