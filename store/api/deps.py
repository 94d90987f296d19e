# store/api/deps.py
import uuid

from fastapi import Cookie, Request, Response

from store.services.cart_service import CartService
from store.services.order_service import OrderService
from store.utils.settings import SESSION_COOKIE_NAME


def get_session_id(
    response: Response,
    session_id: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> str:
    #brak ciasteczka -> nowa sesja
    if not session_id:
        session_id = uuid.uuid4().hex
        response.set_cookie(SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
    return session_id


def get_cart_service(request: Request) -> CartService:
    state = request.app.state
    return CartService(catalog=state.catalog, sessions=state.sessions)


def get_order_service(request: Request) -> OrderService:
    state = request.app.state
    return OrderService(sessions=state.sessions, orders=state.orders)
