"""In-memory product data access."""

from __future__ import annotations

from typing import Protocol

from common.models import Product

SEED_PRODUCT_ID = 1
SEED_PRODUCT_NAME = "Sample 01"


class ProductRepository(Protocol):
    async def get_products(self) -> list[Product]: ...

    async def get_product(self, product_id: int) -> Product | None: ...


class InMemoryProductRepository:
    """Serves a single seeded product; nothing is ever stored."""

    async def get_product(self, product_id: int) -> Product | None:
        if product_id != SEED_PRODUCT_ID:
            return None
        return Product(id=SEED_PRODUCT_ID, name=SEED_PRODUCT_NAME)

    async def get_products(self) -> list[Product]:
        return [Product(id=SEED_PRODUCT_ID, name=SEED_PRODUCT_NAME)]
