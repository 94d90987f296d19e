# store/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from store.api.deps import get_cart_service
from store.domain.schemas import ProductOut
from store.services.cart_service import CartService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=List[ProductOut])
def list_products(svc: CartService = Depends(get_cart_service)):
    return svc.list_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, svc: CartService = Depends(get_cart_service)):
    product = svc.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Produkt nie znaleziony")
    return product
