# store/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime

from store.domain.models import CartLine, Order, OrderLine


class ProductOut(BaseModel):
    """Schema dla produktu z katalogu (response)."""

    id: int
    name: str
    description: str
    price: Decimal
    image_url: str

    model_config = ConfigDict(from_attributes=True)


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., description="ID produktu (nieznane id jest ignorowane)")
    quantity: int = Field(1, description="Ilość produktu")


class QuantityIn(BaseModel):
    """Schema dla zmiany ilości pozycji w koszyku (0 usuwa pozycję)."""

    quantity: int


class CartLineOut(BaseModel):
    product_id: int
    name: str
    unit_price: Decimal
    quantity: int
    total_price: Decimal

    @classmethod
    def from_line(cls, line: CartLine | OrderLine) -> "CartLineOut":
        return cls(
            product_id=line.product_id,
            name=line.product.name,
            unit_price=line.product.price,
            quantity=line.quantity,
            total_price=line.total_price,
        )


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    items: List[CartLineOut]
    total: Decimal


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    status: str
    items: List[CartLineOut]
    total_amount: Decimal
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderOut":
        return cls(
            id=order.id,
            status=order.status,
            items=[CartLineOut.from_line(line) for line in order.items],
            total_amount=order.total_amount,
            created_at=order.created_at,
        )
