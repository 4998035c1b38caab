from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.domain.value_objects import Money


@dataclass(frozen=True, slots=True)
class Product:
    """Catalog product as stored server-side.

    Owned by the catalog and read-only to this package. The price here is
    authoritative; prices sent by clients are never used.
    """

    id: str
    name: str
    image: str
    price: Money
