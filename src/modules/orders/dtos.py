"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``LineOutcomeDTO``: what happened to one line item.
- ``ProcessOrderResultDTO``: acknowledgment of a processed order.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from modules.notifications.notices import Notice
from modules.orders.constants import LineOutcome


class LineOutcomeDTO(BaseModel):
    """Immutable record of a single line item decision.

    ``available_after`` is the stock count left on the product once the
    decision was applied (``None`` when the product could not be read).
    ``notification_delivered`` is ``None`` when no notice was selected.
    """

    model_config = ConfigDict(frozen=True)

    product_id: int
    outcome: LineOutcome
    available_after: Optional[int] = None
    notification: Optional[Notice] = None
    notification_delivered: Optional[bool] = None
    error: Optional[str] = None


class ProcessOrderResultDTO(BaseModel):
    """Immutable DTO for order processing responses."""

    model_config = ConfigDict(frozen=True)

    order_id: int
    lines: List[LineOutcomeDTO] = []
    errors: List[str] = []

    @property
    def shipped_count(self) -> int:
        return sum(1 for line in self.lines if line.outcome == LineOutcome.SHIPPED)

    @property
    def notified_count(self) -> int:
        return sum(1 for line in self.lines if line.notification is not None)
