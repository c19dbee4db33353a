"""Product repository interface.

Extends ``IRepository[Product]`` with the row-locking read and the
snapshot-based write used by order fulfillment.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import ProductStateDTO
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[ProductStateDTO]:
        """Snapshot a product while holding a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction; the lock is released when
        that transaction ends.  Returns ``None`` if the product does not exist.
        """

    @abstractmethod
    def update_availability(self, state: ProductStateDTO) -> ProductStateDTO:
        """Persist the ``available`` count carried by ``state``."""
