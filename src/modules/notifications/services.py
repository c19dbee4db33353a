"""Celery-backed notification service.

``CeleryNotificationService`` enqueues one task per notice; the caller
never waits for delivery.  ``dispatch_notice`` routes a selected notice
to the matching operation of any ``INotificationService``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

import structlog
from celery import Task

from modules.notifications import tasks
from modules.notifications.exceptions import NotificationDeliveryError
from modules.notifications.interfaces import INotificationService
from modules.notifications.notices import (
    DelayNotice,
    ExpiredNotice,
    Notice,
    SeasonalOutOfStockNotice,
    SeasonalUnavailableNotice,
)

logger = structlog.get_logger(__name__)


class CeleryNotificationService(INotificationService):
    """Hands notices to Celery workers.

    Raises:
        NotificationDeliveryError: the broker refused the message (or, in
            eager mode, the task itself failed).
    """

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        self._enqueue("delay", tasks.send_delay_notification, lead_time, product_name)

    def send_out_of_stock_notification(self, product_name: str) -> None:
        self._enqueue("out_of_stock", tasks.send_out_of_stock_notification, product_name)

    def send_seasonal_unavailable_notification(self, product_name: str) -> None:
        self._enqueue(
            "seasonal_unavailable",
            tasks.send_seasonal_unavailable_notification,
            product_name,
        )

    def send_expiration_notification(
        self, product_name: str, expiry_date: Optional[datetime]
    ) -> None:
        self._enqueue(
            "expiration",
            tasks.send_expiration_notification,
            product_name,
            expiry_date.isoformat() if expiry_date else None,
        )

    def _enqueue(self, kind: str, task: Task, *args: Any) -> None:
        try:
            result = task.delay(*args)
        except Exception as exc:
            logger.error("notification.enqueue_failed", kind=kind, error=str(exc))
            raise NotificationDeliveryError(kind, str(exc)) from exc
        logger.info("notification.enqueued", kind=kind, task_id=result.id)


def dispatch_notice(service: INotificationService, notice: Notice) -> None:
    """Call the ``service`` operation matching ``notice``."""
    match notice:
        case DelayNotice(lead_time=lead_time, product_name=name):
            service.send_delay_notification(lead_time, name)
        case SeasonalOutOfStockNotice(product_name=name):
            service.send_out_of_stock_notification(name)
        case SeasonalUnavailableNotice(product_name=name):
            service.send_seasonal_unavailable_notification(name)
        case ExpiredNotice(product_name=name, expiry_date=expiry_date):
            service.send_expiration_notification(name, expiry_date)
        case _:
            raise TypeError(f"Unsupported notice: {notice!r}")
