# store/repos/order_repo.py
import threading
from typing import Dict, Iterable, Tuple

from store.domain.models import Order


class OrderRepo:
    """Zlozone zamowienia w pamieci: order_id -> (session_id, Order)."""

    def __init__(self):
        self._orders: Dict[int, Tuple[str, Order]] = {}
        self._lock = threading.Lock()

    def create_order(self, session_id: str, order: Order) -> Order:
        with self._lock:
            self._orders[order.id] = (session_id, order)
        return order

    def get_order(self, order_id: int) -> Tuple[str, Order] | None:
        with self._lock:
            return self._orders.get(order_id)

    def drop_sessions(self, session_ids: Iterable[str]) -> int:
        #zamowienia wygaslej sesji i tak nie da sie juz pobrac
        dead = set(session_ids)
        with self._lock:
            order_ids = [oid for oid, (owner, _) in self._orders.items() if owner in dead]
            for oid in order_ids:
                del self._orders[oid]
        return len(order_ids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
