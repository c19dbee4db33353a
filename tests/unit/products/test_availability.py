"""Unit tests for the availability rules.

Covers:
- is_available for NORMAL, SEASONAL, EXPIRABLE and unknown types.
- notification_for decision table, including the season-not-open branch.
- Inclusive date boundaries (expiry exactly now, restock on season end).
- Purity: repeated calls with the same inputs agree.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from modules.notifications.notices import (
    DelayNotice,
    ExpiredNotice,
    SeasonalOutOfStockNotice,
    SeasonalUnavailableNotice,
)
from modules.products.availability import is_available, notification_for, restock_date
from modules.products.constants import ProductType
from modules.products.dtos import ProductStateDTO

pytestmark = pytest.mark.unit

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
DAY = timedelta(days=1)


def _normal(**overrides) -> ProductStateDTO:
    data = {"id": 1, "name": "USB Cable", "type": ProductType.NORMAL, "available": 30, "lead_time": 15}
    data.update(overrides)
    return ProductStateDTO(**data)


def _seasonal(**overrides) -> ProductStateDTO:
    data = {
        "id": 2,
        "name": "Watermelon",
        "type": ProductType.SEASONAL,
        "available": 30,
        "lead_time": 15,
        "season_start_date": NOW - 2 * DAY,
        "season_end_date": NOW + 58 * DAY,
    }
    data.update(overrides)
    return ProductStateDTO(**data)


def _expirable(**overrides) -> ProductStateDTO:
    data = {
        "id": 3,
        "name": "Milk",
        "type": ProductType.EXPIRABLE,
        "available": 6,
        "lead_time": 90,
        "expiry_date": NOW + 26 * DAY,
    }
    data.update(overrides)
    return ProductStateDTO(**data)


# ===========================================================================
# is_available
# ===========================================================================


class TestNormalAvailability:
    @pytest.mark.parametrize("available, expected", [(30, True), (1, True), (0, False)])
    def test_available_iff_stock(self, available, expected):
        assert is_available(_normal(available=available), NOW) is expected

    def test_independent_of_now(self):
        product = _normal(available=3)
        assert is_available(product, NOW - 1000 * DAY) is True
        assert is_available(product, NOW + 1000 * DAY) is True


class TestSeasonalAvailability:
    def test_in_season_with_stock(self):
        assert is_available(_seasonal(), NOW) is True

    def test_stock_wins_even_after_season_end(self):
        product = _seasonal(season_start_date=NOW - 90 * DAY, season_end_date=NOW - 30 * DAY)
        assert is_available(product, NOW) is True

    def test_no_stock_restock_before_season_end(self):
        product = _seasonal(available=0, lead_time=2, season_end_date=NOW + 10 * DAY)
        assert is_available(product, NOW) is True

    def test_no_stock_restock_after_season_end(self):
        product = _seasonal(available=0, lead_time=10, season_end_date=NOW + 5 * DAY)
        assert is_available(product, NOW) is False

    def test_restock_exactly_on_season_end_is_available(self):
        product = _seasonal(available=0, lead_time=10, season_end_date=NOW + 10 * DAY)
        assert restock_date(product, NOW) == product.season_end_date
        assert is_available(product, NOW) is True

    def test_missing_season_end_never_promises_restock(self):
        product = _seasonal(available=0, season_start_date=None, season_end_date=None)
        assert is_available(product, NOW) is False


class TestExpirableAvailability:
    def test_fresh_with_stock(self):
        assert is_available(_expirable(), NOW) is True

    def test_expired_with_stock(self):
        assert is_available(_expirable(expiry_date=NOW - 2 * DAY), NOW) is False

    def test_fresh_without_stock(self):
        assert is_available(_expirable(available=0), NOW) is False

    def test_expiring_exactly_now_is_available(self):
        assert is_available(_expirable(expiry_date=NOW), NOW) is True

    def test_one_second_after_expiry_is_unavailable(self):
        product = _expirable(expiry_date=NOW - timedelta(seconds=1))
        assert is_available(product, NOW) is False


class TestUnknownTypeAvailability:
    def test_unknown_type_is_unavailable(self):
        product = _normal(type="DIGITAL", available=100)
        assert is_available(product, NOW) is False


# ===========================================================================
# notification_for
# ===========================================================================


class TestNormalNotification:
    def test_out_of_stock_gets_delay(self):
        product = _normal(available=0, lead_time=10)
        assert notification_for(product, NOW) == DelayNotice(
            lead_time=10, product_name="USB Cable"
        )

    def test_in_stock_gets_nothing(self):
        assert notification_for(_normal(), NOW) is None


class TestSeasonalNotification:
    def test_restock_after_season_end_is_unavailable(self):
        product = _seasonal(
            available=0,
            lead_time=10,
            season_start_date=NOW - DAY,
            season_end_date=NOW + 5 * DAY,
        )
        assert notification_for(product, NOW) == SeasonalUnavailableNotice(
            product_name="Watermelon"
        )

    def test_restock_within_season_gets_delay(self):
        product = _seasonal(
            available=0,
            lead_time=2,
            season_start_date=NOW - DAY,
            season_end_date=NOW + 10 * DAY,
        )
        assert notification_for(product, NOW) == DelayNotice(
            lead_time=2, product_name="Watermelon"
        )

    def test_season_not_open_gets_out_of_stock(self):
        product = _seasonal(
            available=0,
            lead_time=5,
            season_start_date=NOW + 2 * DAY,
            season_end_date=NOW + 10 * DAY,
        )
        assert notification_for(product, NOW) == SeasonalOutOfStockNotice(
            product_name="Watermelon"
        )

    def test_unavailable_takes_precedence_over_season_not_open(self):
        product = _seasonal(
            available=0,
            lead_time=20,
            season_start_date=NOW + 2 * DAY,
            season_end_date=NOW + 10 * DAY,
        )
        assert isinstance(notification_for(product, NOW), SeasonalUnavailableNotice)

    def test_in_stock_gets_nothing(self):
        assert notification_for(_seasonal(), NOW) is None


class TestExpirableNotification:
    def test_expired_gets_expired_notice(self):
        expiry = NOW - 2 * DAY
        product = _expirable(expiry_date=expiry)
        assert notification_for(product, NOW) == ExpiredNotice(
            product_name="Milk", expiry_date=expiry
        )

    def test_expiring_exactly_now_gets_nothing(self):
        assert notification_for(_expirable(expiry_date=NOW), NOW) is None

    def test_fresh_out_of_stock_gets_nothing(self):
        assert notification_for(_expirable(available=0), NOW) is None


class TestUnknownTypeNotification:
    def test_unknown_type_gets_nothing(self):
        assert notification_for(_normal(type="DIGITAL", available=0), NOW) is None


# ===========================================================================
# Purity
# ===========================================================================


@pytest.mark.parametrize(
    "product",
    [
        _normal(available=0),
        _seasonal(available=0, lead_time=10, season_end_date=NOW + 5 * DAY),
        _expirable(expiry_date=NOW - DAY),
    ],
)
def test_rules_are_pure(product):
    assert is_available(product, NOW) == is_available(product, NOW)
    assert notification_for(product, NOW) == notification_for(product, NOW)
    assert product == ProductStateDTO(**product.model_dump())
