# store/domain/models.py
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Product:
    """Produkt z katalogu, niezmienny przez caly czas zycia procesu."""

    id: int
    name: str
    description: str
    price: Decimal
    image_url: str


@dataclass
class CartLine:
    """Pozycja w koszyku (produkt + ilosc)."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def total_price(self) -> Decimal:
        return self.product.price * self.quantity

    def copy(self) -> "CartLine":
        return replace(self)


@dataclass(frozen=True)
class OrderLine:
    """Pozycja zamowienia - zamrozona kopia CartLine."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def total_price(self) -> Decimal:
        return self.product.price * self.quantity

    @classmethod
    def from_cart_line(cls, line: CartLine) -> "OrderLine":
        return cls(product=line.product, quantity=line.quantity)


@dataclass(frozen=True)
class Order:
    """Zamknieta migawka koszyka po udanym checkoutcie."""

    id: int
    lines: Mapping[int, CartLine | OrderLine]
    total_amount: Decimal
    status: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        #kopia linii, zeby nikt z zewnatrz nie zmienil zamowienia
        frozen = MappingProxyType(
            {pid: OrderLine.from_cart_line(line) for pid, line in self.lines.items()}
        )
        object.__setattr__(self, "lines", frozen)

    @property
    def items(self) -> list[OrderLine]:
        return [self.lines[pid] for pid in sorted(self.lines)]
