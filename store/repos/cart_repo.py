# store/repos/cart_repo.py
import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from store.domain.cart import Cart
from store.utils.settings import CART_TTL_SECONDS
from store.utils.logging import get_logger

logger = get_logger(__name__)


class SessionCartRepo:
    """
    Koszyki w pamieci, po jednym na sesje (session_id -> Cart).
    Porzucone koszyki usuwa expire_idle (wolane cyklicznie z tasks/expire.py).
    """

    def __init__(self, ttl_seconds: int = CART_TTL_SECONDS):
        self.ttl = timedelta(seconds=ttl_seconds)
        self._carts: Dict[str, Cart] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Cart | None:
        with self._lock:
            cart = self._carts.get(session_id)
        if cart is not None:
            cart.touch()
        return cart

    def get_or_create(self, session_id: str) -> Cart:
        with self._lock:
            cart = self._carts.get(session_id)
            if cart is None:
                cart = Cart(session_id)
                self._carts[session_id] = cart
                logger.info(f"Created cart for session {session_id}")
        cart.touch()
        return cart

    def expire_idle(self, now: datetime | None = None) -> List[str]:
        """Usuwa koszyki bezczynne dluzej niz ttl, zwraca id wygaszonych sesji."""
        now = now or datetime.now(timezone.utc)
        cutoff = now - self.ttl

        with self._lock:
            expired = [sid for sid, cart in self._carts.items() if cart.last_active_at < cutoff]
            for sid in expired:
                del self._carts[sid]

        if expired:
            logger.info(f"Expired {len(expired)} idle carts")
        return expired

    def __len__(self) -> int:
        with self._lock:
            return len(self._carts)
