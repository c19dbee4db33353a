"""Availability rules per product type.

Two pure functions over a ``ProductStateDTO`` and a reference
timestamp:

- ``is_available``: may one unit be fulfilled?
- ``notification_for``: which notice explains why it cannot ship
  now (``None`` when there is nothing to tell the customer).

Date comparisons are inclusive in favour of availability: a product
expiring exactly at ``now`` still ships, and a restock landing exactly on
the last day of the season is still in season.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

import structlog

from modules.notifications.notices import (
    DelayNotice,
    ExpiredNotice,
    Notice,
    SeasonalOutOfStockNotice,
    SeasonalUnavailableNotice,
)
from modules.products.constants import ProductType
from modules.products.dtos import ProductStateDTO

logger = structlog.get_logger(__name__)


def restock_date(product: ProductStateDTO, now: datetime) -> datetime:
    """Moment the next restock lands if ordered at ``now``."""
    return now + timedelta(days=product.lead_time)


def is_available(product: ProductStateDTO, now: datetime) -> bool:
    match product.type:
        case ProductType.NORMAL:
            return product.available > 0
        case ProductType.SEASONAL:
            return product.available > 0 or _restocks_in_season(product, now)
        case ProductType.EXPIRABLE:
            return product.available > 0 and not _is_expired(product, now)
        case _:
            logger.warning(
                "availability.unknown_type",
                product_id=product.id,
                type=product.type,
            )
            return False


def notification_for(product: ProductStateDTO, now: datetime) -> Optional[Notice]:
    """Select the notice for a product that cannot ship at ``now``.

    Decision table:

    ========== ============================================ ==========================
    type       condition                                    notice
    ========== ============================================ ==========================
    NORMAL     ``available == 0``                           ``DelayNotice``
    SEASONAL   ``available == 0`` and restock after season  ``SeasonalUnavailableNotice``
    SEASONAL   ``available == 0`` and season not open yet   ``SeasonalOutOfStockNotice``
    SEASONAL   ``available == 0``                           ``DelayNotice``
    EXPIRABLE  ``now > expiry_date``                        ``ExpiredNotice``
    ========== ============================================ ==========================

    Anything else yields ``None``.
    """
    match product.type:
        case ProductType.NORMAL:
            if product.available == 0:
                return DelayNotice(lead_time=product.lead_time, product_name=product.name)
            return None
        case ProductType.SEASONAL:
            if product.available != 0:
                return None
            if not _restocks_in_season(product, now):
                return SeasonalUnavailableNotice(product_name=product.name)
            if product.season_start_date is not None and now < product.season_start_date:
                return SeasonalOutOfStockNotice(product_name=product.name)
            return DelayNotice(lead_time=product.lead_time, product_name=product.name)
        case ProductType.EXPIRABLE:
            if _is_expired(product, now):
                return ExpiredNotice(
                    product_name=product.name,
                    expiry_date=product.expiry_date,
                )
            return None
        case _:
            return None


def _restocks_in_season(product: ProductStateDTO, now: datetime) -> bool:
    # A seasonal product without a season end never gets a restock promise.
    if product.season_end_date is None:
        return False
    return restock_date(product, now) <= product.season_end_date


def _is_expired(product: ProductStateDTO, now: datetime) -> bool:
    # A missing expiry date on an expirable product is treated as expired.
    if product.expiry_date is None:
        return True
    return now > product.expiry_date
