"""Notification delivery tasks.

One Celery task per notice kind.  Each task renders the customer-facing
message, logs it, and emails it to ``NOTIFICATION_RECIPIENTS`` when that
setting is non-empty.  Arguments are JSON-serialisable (dates travel as
ISO-8601 strings).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

import structlog
from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from modules.notifications import messages

logger = structlog.get_logger(__name__)

SUBJECTS = {
    "delay": "Delivery delayed",
    "out_of_stock": "Product out of season",
    "seasonal_unavailable": "Product unavailable this season",
    "expiration": "Product expired",
}


@shared_task(name="notifications.send_delay")
def send_delay_notification(lead_time: int, product_name: str) -> Dict[str, Any]:
    return _deliver("delay", messages.delay_message(lead_time, product_name), product_name)


@shared_task(name="notifications.send_out_of_stock")
def send_out_of_stock_notification(product_name: str) -> Dict[str, Any]:
    return _deliver("out_of_stock", messages.out_of_stock_message(product_name), product_name)


@shared_task(name="notifications.send_seasonal_unavailable")
def send_seasonal_unavailable_notification(product_name: str) -> Dict[str, Any]:
    return _deliver(
        "seasonal_unavailable",
        messages.seasonal_unavailable_message(product_name),
        product_name,
    )


@shared_task(name="notifications.send_expiration")
def send_expiration_notification(product_name: str, expiry_date: Optional[str]) -> Dict[str, Any]:
    parsed = datetime.fromisoformat(expiry_date) if expiry_date else None
    return _deliver("expiration", messages.expiration_message(product_name, parsed), product_name)


def _deliver(kind: str, message: str, product_name: str) -> Dict[str, Any]:
    recipients = list(settings.NOTIFICATION_RECIPIENTS)
    if recipients:
        send_mail(
            subject=f"{SUBJECTS[kind]}: {product_name}",
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=recipients,
        )
    logger.info(
        "notification.sent",
        kind=kind,
        product_name=product_name,
        message=message,
        emailed=len(recipients),
    )
    return {"status": "sent", "kind": kind, "message": message}
