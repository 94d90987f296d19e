# store/services/notification_service.py
from store.utils.logging import get_logger

logger = get_logger(__name__)


def send_order_notification(session_id: str, order_id: int, total_amount: str) -> dict:
    """
    Potwierdzenie zamowienia, puszczane jako background task po checkoutcie.
    W prawdziwym systemie poszedlby email, tu tylko log.
    """
    logger.info(f"[NOTIFICATION] Session {session_id}: order {order_id} paid ({total_amount})")
    return {"session_id": session_id, "order_id": order_id, "status": "sent"}
