"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising and the Service Layer decides how to translate a
missing entity.  Database failures propagate as ``DatabaseError``.
"""

from __future__ import annotations

from typing import Optional

import structlog

from django.db import transaction
from django.utils import timezone

from modules.products.dtos import ProductStateDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key."""
        return Product.objects.filter(id=id).first()

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    def get_for_update(self, id: int) -> Optional[ProductStateDTO]:
        product = Product.objects.select_for_update().filter(id=id).first()
        if product is None:
            return None
        return ProductStateDTO.from_entity(product)

    @transaction.atomic
    def update_availability(self, state: ProductStateDTO) -> ProductStateDTO:
        """Write ``state.available`` back to the product row.

        Raises:
            ProductNotFound: the row vanished between read and write.
        """
        updated = Product.objects.filter(id=state.id).update(
            available=state.available,
            updated_at=timezone.now(),
        )
        if not updated:
            raise ProductNotFound(f"Product {state.id} not found.")
        logger.info(
            "product.availability_updated",
            product_id=state.id,
            available=state.available,
        )
        return state
