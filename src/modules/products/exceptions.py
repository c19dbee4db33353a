"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFoundError, PersistenceError


class ProductNotFound(NotFoundError):
    """A product linked to an order no longer exists."""


class ProductUpdateFailed(PersistenceError):
    """The availability update of a single product could not be stored."""

    def __init__(self, product_id: int, reason: str) -> None:
        super().__init__(f"Product {product_id}: {reason}")
        self.product_id = product_id
        self.reason = reason
