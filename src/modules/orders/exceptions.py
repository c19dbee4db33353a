"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.exceptions import NotFoundError, PersistenceError

if TYPE_CHECKING:
    from modules.orders.dtos import ProcessOrderResultDTO


class OrderNotFound(NotFoundError):
    """The requested order does not exist."""


class OrderProcessingIncomplete(PersistenceError):
    """At least one line item could not be persisted.

    The remaining line items were processed and committed; ``result``
    carries every line outcome and the aggregated errors.
    """

    def __init__(self, result: ProcessOrderResultDTO) -> None:
        super().__init__(
            f"Order {result.order_id}: {len(result.errors)} line item(s) failed to persist."
        )
        self.result = result
