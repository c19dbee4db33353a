"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderProcessed(DomainEvent):
    """Raised when every line item of an order has been decided."""

    shipped: int = 0
    notified: int = 0
    failed: int = 0
