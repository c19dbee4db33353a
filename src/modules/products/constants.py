"""Product domain constants.

``ProductType`` is the closed tag on which availability and
notification rules are dispatched.
"""

from django.db import models


class ProductType(models.TextChoices):
    NORMAL = "NORMAL", "Normal"
    SEASONAL = "SEASONAL", "Seasonal"
    EXPIRABLE = "EXPIRABLE", "Expirable"
