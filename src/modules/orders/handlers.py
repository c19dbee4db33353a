"""Event handlers for Orders domain events."""

from __future__ import annotations

import structlog

from modules.orders.events import OrderProcessed
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class OrderProcessedHandler(IEventHandler[OrderProcessed]):
    def handle(self, event: OrderProcessed) -> None:
        logger.info(
            f"Order {event.aggregate_id} processed",
            order_id=event.aggregate_id,
            shipped=event.shipped,
            notified=event.notified,
            failed=event.failed,
        )


order_processed_handler = OrderProcessedHandler()
