# store/services/order_service.py
import threading
from datetime import datetime, timezone
from itertools import count

from store.domain.cart import Cart
from store.domain.errors import EmptyCartError
from store.domain.models import Order
from store.repos.cart_repo import SessionCartRepo
from store.repos.order_repo import OrderRepo
from store.utils.settings import ORDER_ID_START
from store.utils.logging import get_logger

logger = get_logger(__name__)

PAID = "PAID"

#licznik id zamowien wspolny dla calego procesu, zaczyna sie nad zakresem id katalogu
_order_ids = count(ORDER_ID_START + 1)
_order_ids_lock = threading.Lock()


def next_order_id() -> int:
    with _order_ids_lock:
        return next(_order_ids)


def checkout(cart: Cart) -> Order:
    """
    Zamienia koszyk w zamowienie i czysci koszyk.

    Cala operacja (total, snapshot, clear) idzie pod lockiem koszyka, wiec
    rownolegle add/update nie wejda miedzy snapshot a clear.
    Platnosc jest symulowana - status zawsze PAID.
    """
    with cart.lock:
        if cart.is_empty():
            raise EmptyCartError()

        order = Order(
            id=next_order_id(),
            lines=cart.snapshot(),
            total_amount=cart.total(),
            status=PAID,
            created_at=datetime.now(timezone.utc),
        )
        cart.clear()

    return order


class OrderService:
    """
    Serwis zamowien, oddzielony od CartService.
    """

    def __init__(self, sessions: SessionCartRepo, orders: OrderRepo):
        self.sessions = sessions
        self.repo = orders

    def checkout(self, session_id: str) -> Order:
        cart = self.sessions.get(session_id)
        if cart is None:
            raise EmptyCartError()

        order = checkout(cart)
        self.repo.create_order(session_id, order)

        logger.info(
            f"Order {order.id} created for session {session_id}, "
            f"total {order.total_amount}, {len(order.lines)} lines"
        )
        return order

    def get_order(self, order_id: int, session_id: str) -> Order | None:
        found = self.repo.get_order(order_id)
        if not found:
            return None

        owner, order = found
        if owner != session_id:
            raise PermissionError("Brak dostepu do zamowienia")

        return order
