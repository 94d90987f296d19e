# store/api/routers/orders.py
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from store.api.deps import get_order_service, get_session_id
from store.domain.errors import EmptyCartError
from store.domain.schemas import OrderOut
from store.services.notification_service import send_order_notification
from store.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/checkout", response_model=OrderOut, status_code=201)
def checkout(
    background_tasks: BackgroundTasks,
    session_id: str = Depends(get_session_id),
    svc: OrderService = Depends(get_order_service),
):
    """
    Symulowana platnosc: zamienia koszyk sesji w zamowienie i czysci koszyk.
    Powiadomienie idzie w tle.
    """
    try:
        order = svc.checkout(session_id)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))

    background_tasks.add_task(send_order_notification, session_id, order.id, str(order.total_amount))
    return OrderOut.from_order(order)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    session_id: str = Depends(get_session_id),
    svc: OrderService = Depends(get_order_service),
):
    try:
        order = svc.get_order(order_id, session_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))

    if not order:
        raise HTTPException(status_code=404, detail="Zamowienie nie istnieje")
    return OrderOut.from_order(order)
