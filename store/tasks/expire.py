# store/tasks/expire.py
import asyncio

from store.repos.cart_repo import SessionCartRepo
from store.repos.order_repo import OrderRepo
from store.utils.settings import SESSION_SWEEP_INTERVAL_SECONDS
from store.utils.logging import get_logger

logger = get_logger(__name__)


def expire_carts_task(sessions: SessionCartRepo, orders: OrderRepo | None = None) -> int:
    logger.info("Expire carts task started")
    expired = sessions.expire_idle()

    #razem z sesja znikaja jej zamowienia
    dropped = orders.drop_sessions(expired) if orders is not None and expired else 0

    logger.info(f"Expired {len(expired)} carts ({dropped} orders dropped), {len(sessions)} still active")
    return len(expired)


async def run_expiry_loop(
    sessions: SessionCartRepo,
    orders: OrderRepo | None = None,
    interval: float = SESSION_SWEEP_INTERVAL_SECONDS,
):
    """Petla w tle (lifespan aplikacji), co `interval` sekund czysci porzucone koszyki."""
    while True:
        await asyncio.sleep(interval)
        try:
            expire_carts_task(sessions, orders)
        except Exception as e:
            logger.warning(f"Expire carts task failed: {e}")
