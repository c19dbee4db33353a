"""Order fulfillment constants.

``LineOutcome`` records what happened to a single line item when an
order was processed.
"""

from django.db import models


class LineOutcome(models.TextChoices):
    SHIPPED = "SHIPPED", "Shipped"
    BACKORDERED = "BACKORDERED", "Backordered"
    NOTIFIED = "NOTIFIED", "Customer notified"
    SKIPPED = "SKIPPED", "Skipped"
    FAILED = "FAILED", "Failed"
