# store/repos/catalog_repo.py
from decimal import Decimal
from itertools import count
from typing import Dict, Iterable, List, Sequence

from store.data.seed import PRODUCT_SEED
from store.domain.models import Product
from store.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogRepo:
    """Katalog tylko do odczytu, ladowany raz przy starcie."""

    def __init__(self, seed: Iterable[Sequence] = PRODUCT_SEED):
        self._seed = tuple(seed)
        self._products: Dict[int, Product] = {}
        self._initialized = False

    def initialize(self) -> None:
        if self._initialized:
            return

        ids = count(1)
        for name, description, price, image_url in self._seed:
            pid = next(ids)
            self._products[pid] = Product(
                id=pid,
                name=name,
                description=description,
                price=Decimal(price),
                image_url=image_url,
            )

        self._initialized = True
        logger.info(f"Catalog initialized with {len(self._products)} products")

    def list_all(self) -> List[Product]:
        return [self._products[pid] for pid in sorted(self._products)]

    def find_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def max_id(self) -> int:
        return max(self._products, default=0)
