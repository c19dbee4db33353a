"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Look-ups return ``None`` for missing orders; the Service Layer decides
how to translate that into an error.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction
from django.db.models import Prefetch

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Order]:
        return Order.objects.filter(id=id).first()

    def get_with_products(self, id: int) -> Optional[Order]:
        """Retrieve an order with eager-loaded line items.

        Items are prefetched with their product (single batched query,
        ordered by line item ID) to avoid N+1 look-ups.
        """
        return (
            Order.objects.prefetch_related(
                Prefetch(
                    "items",
                    queryset=OrderItem.objects.select_related("product").order_by("id"),
                )
            )
            .filter(id=id)
            .first()
        )

    def line_product_ids(self, order: Order) -> List[int]:
        return [item.product_id for item in order.items.all()]

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order."""
        entity.save()
        logger.info("order.saved", order_id=entity.id)
        return entity

    @transaction.atomic
    def create(self, product_ids: List[int], notes: str = "") -> Order:
        """Create an order linking ``product_ids`` in the given order."""
        order = Order(notes=notes)
        order.save()
        OrderItem.objects.bulk_create(
            [OrderItem(order=order, product_id=product_id) for product_id in product_ids]
        )
        logger.info("order.created", order_id=order.id, item_count=len(product_ids))
        return order
