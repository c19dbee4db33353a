"""Unit tests for ProductStateDTO."""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone
from pydantic import ValidationError

from modules.products.constants import ProductType
from modules.products.dtos import ProductStateDTO
from modules.products.models import Product

pytestmark = pytest.mark.unit


def _state(**overrides) -> ProductStateDTO:
    data = {"id": 1, "name": "USB Cable", "type": ProductType.NORMAL, "available": 3}
    data.update(overrides)
    return ProductStateDTO(**data)


class TestProductStateDTO:
    def test_is_frozen(self):
        state = _state()
        with pytest.raises(ValidationError):
            state.available = 0

    def test_negative_available_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _state(available=-1)

    def test_with_available_returns_new_value(self):
        state = _state(available=3)
        nxt = state.with_available(2)

        assert nxt.available == 2
        assert state.available == 3
        assert nxt.id == state.id

    def test_with_available_floors_at_zero(self):
        assert _state(available=0).with_available(-1).available == 0

    def test_accepts_unknown_type(self):
        assert _state(type="DIGITAL").type == "DIGITAL"

    def test_from_entity(self):
        expiry = timezone.now() + timedelta(days=2)
        product = Product.objects.create(
            name="Butter",
            type=ProductType.EXPIRABLE,
            available=30,
            lead_time=15,
            expiry_date=expiry,
        )

        state = ProductStateDTO.from_entity(product)

        assert state.id == product.id
        assert state.type == ProductType.EXPIRABLE
        assert state.available == 30
        assert state.lead_time == 15
        assert state.expiry_date == expiry
        assert state.season_end_date is None
