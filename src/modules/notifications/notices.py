"""Customer notices selected when a line item cannot ship.

Each notice carries exactly the parameters its delivery channel needs.
``Notice`` is a discriminated union on ``kind`` so outcomes serialise
unambiguously in API responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class DelayNotice(BaseModel):
    """Out of stock; restock expected in ``lead_time`` days."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["delay"] = "delay"
    lead_time: int
    product_name: str


class SeasonalOutOfStockNotice(BaseModel):
    """Seasonal product requested before its season opens."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["seasonal_out_of_stock"] = "seasonal_out_of_stock"
    product_name: str


class SeasonalUnavailableNotice(BaseModel):
    """No restock can land before the season ends."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["seasonal_unavailable"] = "seasonal_unavailable"
    product_name: str


class ExpiredNotice(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["expired"] = "expired"
    product_name: str
    expiry_date: Optional[datetime] = None


Notice = Annotated[
    Union[DelayNotice, SeasonalOutOfStockNotice, SeasonalUnavailableNotice, ExpiredNotice],
    Field(discriminator="kind"),
]
