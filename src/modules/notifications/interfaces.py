"""Notification service interface.

The fulfillment service depends on this contract only; one operation
per notice kind, each taking the literal parameters of that notice.
Implementations raise ``NotificationDeliveryError`` when the notice
cannot be handed over.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class INotificationService(ABC):
    """Outbound port for customer notifications."""

    @abstractmethod
    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        """Product is out of stock and restocks in ``lead_time`` days."""

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        """Seasonal product ordered before its season opened."""

    @abstractmethod
    def send_seasonal_unavailable_notification(self, product_name: str) -> None:
        """Seasonal product cannot be restocked before its season ends."""

    @abstractmethod
    def send_expiration_notification(
        self, product_name: str, expiry_date: Optional[datetime]
    ) -> None:
        """Perishable product is past its expiry date."""
