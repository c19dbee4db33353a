"""Order repository interface.

Extends ``IRepository[Order]`` with the read used by fulfillment:
an order together with its linked products.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def get_with_products(self, id: int) -> Optional[Order]:
        """Retrieve an order with its line items and products eager-loaded."""

    @abstractmethod
    def line_product_ids(self, order: Order) -> List[int]:
        """Product IDs of ``order``'s line items, in insertion order."""
