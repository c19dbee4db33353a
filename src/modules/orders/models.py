"""Order and OrderItem models.

Business rules implemented:
- An order references a set of products through ``OrderItem`` line items.
- Line items are processed in insertion order (ascending ``OrderItem.id``).
- Each line item stands for exactly one unit; quantity is not modeled.
- Product FK uses PROTECT so a product referenced by an order cannot vanish.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from shared.domain.events import DomainEventMixin


class Order(DomainEventMixin, BaseModel):
    """Order aggregate root.

    Orders are created outside the fulfillment flow and are read-only
    from its point of view; processing only mutates the linked products.
    """

    notes: models.TextField = models.TextField(blank=True, default="")
    products: models.ManyToManyField = models.ManyToManyField(
        "products.Product",
        through="orders.OrderItem",
        related_name="orders",
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Order #{self.pk}"


class OrderItem(BaseModel):
    """Line item linking an Order to a Product."""

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )

    class Meta:
        db_table = "order_items"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.order} -> {self.product}"
