"""Product model with type-dependent availability data.

Business rules implemented:
- RN-PRO-001: ``available`` and ``lead_time`` cannot be negative.
- RN-PRO-002: ``expiry_date`` is set only for EXPIRABLE products.
- RN-PRO-003: ``season_start_date`` / ``season_end_date`` are set only for
  SEASONAL products, both together, start before end.
"""

from __future__ import annotations

import structlog

from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import ProductType

logger = structlog.get_logger(__name__)


class Product(BaseModel):
    """Catalog item.

    ``available`` is the count of units that can ship immediately.
    ``lead_time`` is the number of days until the next restock.
    """

    name = models.CharField(max_length=255)
    type = models.CharField(
        max_length=20,
        choices=ProductType.choices,
        default=ProductType.NORMAL,
    )
    available = models.PositiveIntegerField(default=0)
    lead_time = models.PositiveIntegerField(default=0)
    expiry_date = models.DateTimeField(null=True, blank=True, default=None)
    season_start_date = models.DateTimeField(null=True, blank=True, default=None)
    season_end_date = models.DateTimeField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["type"], name="products_type_idx"),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        errors: dict[str, str] = {}

        if self.type == ProductType.EXPIRABLE:
            if self.expiry_date is None:
                errors["expiry_date"] = "Expirable products require an expiry date."
        elif self.expiry_date is not None:
            errors["expiry_date"] = "Only expirable products carry an expiry date."

        has_season = (self.season_start_date, self.season_end_date) != (None, None)
        if self.type == ProductType.SEASONAL:
            if self.season_start_date is None or self.season_end_date is None:
                errors["season_end_date"] = "Seasonal products require a season window."
            elif self.season_start_date > self.season_end_date:
                errors["season_end_date"] = "Season end must not precede season start."
        elif has_season:
            errors["season_start_date"] = "Only seasonal products carry a season window."

        if errors:
            raise ValidationError(errors)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.id,
                name=self.name,
                type=self.type,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.type})"
