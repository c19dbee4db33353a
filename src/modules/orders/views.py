"""Order API views.

Exposes the ``OrderFulfillmentService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; generic exceptions propagate.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.notifications.services import CeleryNotificationService
from modules.orders.exceptions import OrderNotFound, OrderProcessingIncomplete
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderFulfillmentService
from modules.products.repositories.django_repository import ProductDjangoRepository


class OrderViewSet(GenericViewSet):
    """ViewSet for order fulfillment.

    Uses ``OrderFulfillmentService`` with injected repositories and the
    Celery notification service (DIP).  Order IDs are integers; anything
    else does not match the route.
    """

    queryset = Order.objects.all()
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderFulfillmentService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
            notification_service=CeleryNotificationService(),
        )

    # ------------------------------------------------------------------
    # Process
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"])
    def process(self, request: Request, pk: str) -> Response:
        """POST /api/v1/orders/{pk}/process/

        Ships every line item that can ship now and notifies the customer
        about the others.  Returns the per-line outcomes.
        """
        try:
            result = self._service.process_order(int(pk))
        except OrderNotFound:
            return Response(
                {"detail": "Order not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        except OrderProcessingIncomplete as exc:
            return Response(
                {"detail": str(exc), **exc.result.model_dump(mode="json")},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(result.model_dump(mode="json"))
