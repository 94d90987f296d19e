# store/domain/cart.py
import threading
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List

from store.domain.models import CartLine, Product


class Cart:
    """
    Koszyk jednej sesji: product_id -> CartLine.
    Wszystkie zmiany ida przez jeden lock (RLock, bo checkout trzyma go
    przez cala operacje i w srodku wola total/snapshot/clear).
    Szukanie produktu w katalogu robi serwis, tu trafia juz Product.
    """

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.lock = threading.RLock()
        self._lines: Dict[int, CartLine] = {}
        self.last_active_at = datetime.now(timezone.utc)

    def touch(self) -> None:
        self.last_active_at = datetime.now(timezone.utc)

    def add_item(self, product: Product, quantity: int) -> None:
        if quantity <= 0:
            return

        with self.lock:
            line = self._lines.get(product.id)
            if line:
                line.quantity += quantity
            else:
                self._lines[product.id] = CartLine(product=product, quantity=quantity)

    def update_quantity(self, product_id: int, quantity: int) -> None:
        with self.lock:
            if quantity <= 0:
                self._lines.pop(product_id, None)
                return

            #ustawiamy ilosc absolutnie, nie tworzymy nowej pozycji
            line = self._lines.get(product_id)
            if line:
                line.quantity = quantity

    def total(self) -> Decimal:
        with self.lock:
            return sum((line.total_price for line in self._lines.values()), Decimal("0"))

    def clear(self) -> None:
        with self.lock:
            self._lines.clear()

    def snapshot(self) -> Dict[int, CartLine]:
        with self.lock:
            return {pid: line.copy() for pid, line in self._lines.items()}

    def lines(self) -> List[CartLine]:
        with self.lock:
            return [self._lines[pid].copy() for pid in sorted(self._lines)]

    def is_empty(self) -> bool:
        with self.lock:
            return not self._lines

    def __len__(self) -> int:
        with self.lock:
            return len(self._lines)
