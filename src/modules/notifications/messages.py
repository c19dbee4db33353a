"""Customer-facing texts for each notice kind."""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def delay_message(lead_time: int, product_name: str) -> str:
    unit = "day" if lead_time == 1 else "days"
    return f"{product_name} is out of stock, expected delay of {lead_time} {unit}."


def out_of_stock_message(product_name: str) -> str:
    return f"{product_name} is out of stock: its season has not started yet."


def seasonal_unavailable_message(product_name: str) -> str:
    return f"{product_name} is unavailable for the remainder of the season."


def expiration_message(product_name: str, expiry_date: Optional[datetime]) -> str:
    if expiry_date is None:
        return f"{product_name} has expired and is no longer available."
    return f"{product_name} expired on {expiry_date:%Y-%m-%d} and is no longer available."
