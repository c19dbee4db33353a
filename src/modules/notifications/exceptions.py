"""Notification delivery exceptions."""

from __future__ import annotations


class NotificationDeliveryError(Exception):
    """A notice could not be handed to the delivery channel."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"Failed to deliver {kind} notification: {reason}")
        self.kind = kind
        self.reason = reason
