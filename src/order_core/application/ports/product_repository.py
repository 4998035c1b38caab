from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from order_core.domain.entities import Product


class ProductRepository(ABC):
    """Port for catalog lookups (read-only)."""

    @abstractmethod
    def find_by_ids(self, product_ids: Iterable[str]) -> list[Product]:
        """Resolve product references in one batched query.

        Args:
            product_ids: Distinct product references.

        Returns:
            The matching products, in no particular order. Unknown ids are
            simply absent from the result; callers match by id.
        """
