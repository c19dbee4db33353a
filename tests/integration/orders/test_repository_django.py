"""Integration tests for OrderDjangoRepository.

Covers:
- Create: order + items persisted atomically, in the given order.
- Create atomicity: forced error rolls back the entire aggregate.
- Read: get_with_products loads line items without N+1 queries.
- line_product_ids keeps insertion order, duplicates included.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from django.db import IntegrityError

from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.products.models import Product

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


@pytest.fixture()
def product_a():
    return Product.objects.create(name="Repo Product A", available=10, lead_time=3)


@pytest.fixture()
def product_b():
    return Product.objects.create(name="Repo Product B", available=0, lead_time=7)


@pytest.fixture()
def created_order(repo, product_a, product_b):
    return repo.create([product_b.id, product_a.id], notes="repo test")


# ===========================================================================
# Create
# ===========================================================================


class TestCreate:
    def test_create_persists_order(self, repo, created_order):
        order = Order.objects.get(pk=created_order.pk)
        assert order.notes == "repo test"

    def test_create_persists_items(self, created_order, product_a, product_b):
        items = list(OrderItem.objects.filter(order=created_order).order_by("id"))
        assert [item.product_id for item in items] == [product_b.id, product_a.id]

    def test_create_links_products(self, created_order, product_a, product_b):
        assert set(created_order.products.values_list("id", flat=True)) == {
            product_a.id,
            product_b.id,
        }

    def test_create_empty_order(self, repo):
        order = repo.create([])
        assert order.items.count() == 0

    def test_create_atomicity_rolls_back_on_item_failure(self, repo, product_a):
        with patch.object(
            OrderItem.objects, "bulk_create", side_effect=IntegrityError("forced error")
        ):
            with pytest.raises(IntegrityError):
                repo.create([product_a.id])

        assert Order.objects.count() == 0


# ===========================================================================
# Read
# ===========================================================================


class TestRead:
    def test_get_by_id_returns_order(self, repo, created_order):
        assert repo.get_by_id(created_order.id) == created_order

    def test_get_by_id_returns_none_for_missing(self, repo):
        assert repo.get_by_id(999_999) is None

    def test_get_with_products_returns_none_for_missing(self, repo):
        assert repo.get_with_products(999_999) is None

    def test_line_product_ids_in_insertion_order(
        self, repo, created_order, product_a, product_b
    ):
        order = repo.get_with_products(created_order.id)
        assert repo.line_product_ids(order) == [product_b.id, product_a.id]

    def test_same_product_on_two_lines(self, repo, product_a):
        order = repo.create([product_a.id, product_a.id])
        loaded = repo.get_with_products(order.id)
        assert repo.line_product_ids(loaded) == [product_a.id, product_a.id]

    def test_get_with_products_no_n_plus_one(
        self, repo, created_order, django_assert_num_queries
    ):
        with django_assert_num_queries(2):
            order = repo.get_with_products(created_order.id)
            ids = repo.line_product_ids(order)
            names = [item.product.name for item in order.items.all()]

        assert len(ids) == len(names) == 2


class TestSave:
    def test_save_persists_entity(self, repo, created_order):
        created_order.notes = "updated"
        repo.save(created_order)
        assert Order.objects.get(pk=created_order.pk).notes == "updated"
