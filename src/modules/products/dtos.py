"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``ProductStateDTO``: point-in-time snapshot of a product, the input of
  the availability rules.  The next state is derived with
  ``with_available`` and handed back to the repository; the snapshot
  itself is never mutated.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product


class ProductStateDTO(BaseModel):
    """Immutable snapshot of a product's availability data.

    ``type`` is kept as a plain string so that a value outside
    ``ProductType`` reaches the rules (which treat it as unavailable)
    instead of failing at snapshot time.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    type: str
    available: int
    lead_time: int = 0
    expiry_date: Optional[datetime] = None
    season_start_date: Optional[datetime] = None
    season_end_date: Optional[datetime] = None

    @field_validator("available", "lead_time")
    @classmethod
    def must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Value cannot be negative.")
        return v

    def with_available(self, available: int) -> ProductStateDTO:
        """Return a copy carrying a new ``available`` count (floored at zero)."""
        return self.model_copy(update={"available": max(available, 0)})

    @classmethod
    def from_entity(cls, product: Product) -> ProductStateDTO:
        """Build a snapshot from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            type=product.type,
            available=product.available,
            lead_time=product.lead_time,
            expiry_date=product.expiry_date,
            season_start_date=product.season_start_date,
            season_end_date=product.season_end_date,
        )
