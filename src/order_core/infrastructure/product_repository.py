from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.ports import ProductRepository

if TYPE_CHECKING:
    from collections.abc import Iterable

    from order_core.domain.entities import Product


class InMemoryProductRepository(ProductRepository):
    """In-memory catalog for testing and local runs.

    Products are frozen dataclasses, so returning the stored instances
    is safe.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[str, Product] = {}
        for product in products:
            self.add(product)

    def add(self, product: Product) -> None:
        self._products[product.id] = product

    def find_by_ids(self, product_ids: Iterable[str]) -> list[Product]:
        return [self._products[pid] for pid in set(product_ids) if pid in self._products]
