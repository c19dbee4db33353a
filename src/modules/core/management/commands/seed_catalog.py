from __future__ import annotations

from datetime import timedelta
from typing import Any

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.products.constants import ProductType
from modules.products.models import Product


def demo_catalog(now) -> list[dict[str, Any]]:
    """Products covering every availability rule, dated relative to ``now``."""
    day = timedelta(days=1)
    return [
        {"name": "USB Cable", "type": ProductType.NORMAL, "available": 30, "lead_time": 15},
        {"name": "USB Dongle", "type": ProductType.NORMAL, "available": 0, "lead_time": 10},
        {
            "name": "Butter",
            "type": ProductType.EXPIRABLE,
            "available": 30,
            "lead_time": 15,
            "expiry_date": now + 26 * day,
        },
        {
            "name": "Milk",
            "type": ProductType.EXPIRABLE,
            "available": 6,
            "lead_time": 90,
            "expiry_date": now - 2 * day,
        },
        {
            "name": "Watermelon",
            "type": ProductType.SEASONAL,
            "available": 30,
            "lead_time": 15,
            "season_start_date": now - 2 * day,
            "season_end_date": now + 58 * day,
        },
        {
            "name": "Grapes",
            "type": ProductType.SEASONAL,
            "available": 30,
            "lead_time": 15,
            "season_start_date": now + 180 * day,
            "season_end_date": now + 240 * day,
        },
    ]


class Command(BaseCommand):
    help = "Seed the catalog with one product per availability rule and an order linking them."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--no-order",
            action="store_true",
            help="Only seed products, do not create the demo order.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        now = timezone.now()
        self.stdout.write("Seeding catalog...")

        products: list[Product] = []
        created = 0
        for data in demo_catalog(now):
            product = Product.objects.filter(name=data["name"]).first()
            if product is None:
                product = Product(**data)
                product.full_clean()
                product.save()
                created += 1
            products.append(product)

        order_id = None
        if not options["no_order"]:
            order = OrderDjangoRepository().create(
                [product.id for product in products], notes="Demo order"
            )
            order_id = order.id

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={len(products)} (new={created}), order={order_id}"
            )
        )
