# store/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException

from store.api.deps import get_cart_service, get_session_id
from store.domain.schemas import CartLineOut, CartOut, ItemIn, QuantityIn
from store.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def cart_out(svc: CartService, session_id: str) -> CartOut:
    return CartOut(
        items=[CartLineOut.from_line(line) for line in svc.get_cart_contents(session_id)],
        total=svc.get_cart_total(session_id),
    )


@router.get("/", response_model=CartOut)
def get_cart(
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_cart_service),
):
    return cart_out(svc, session_id)


@router.post("/items", response_model=CartOut)
def add_item(
    payload: ItemIn,
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_cart_service),
):
    if payload.quantity <= 0:
        raise HTTPException(status_code=400, detail="Ilosc musi byc wieksza niz 0")

    svc.add_to_cart(session_id, payload.product_id, payload.quantity)
    return cart_out(svc, session_id)


@router.put("/items/{product_id}", response_model=CartOut)
def update_item(
    product_id: int,
    payload: QuantityIn,
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_cart_service),
):
    if payload.quantity < 0:
        raise HTTPException(status_code=400, detail="Ilosc nie moze byc ujemna")

    svc.update_cart_item(session_id, product_id, payload.quantity)
    return cart_out(svc, session_id)


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(
    product_id: int,
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_cart_service),
):
    svc.update_cart_item(session_id, product_id, 0)
    return cart_out(svc, session_id)


@router.delete("/", response_model=CartOut)
def clear_cart(
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_cart_service),
):
    svc.clear_cart(session_id)
    return cart_out(svc, session_id)
