"""Order fulfillment service layer (Use Cases).

Decides, for every line item of an order, whether one unit ships now;
if not, selects and dispatches the customer notice.

Business rules enforced:
- RN-FUL-001: One reference timestamp per call; every line item of the
  order is decided against it.
- RN-FUL-002: Each product's read-decide-write runs in its own
  transaction holding a row lock (SELECT FOR UPDATE).
- RN-FUL-003: A shipped line decrements ``available`` by exactly one.
- RN-FUL-004: Stock never goes negative.  A seasonal product with no
  stock but a restock landing before the season ends is backordered:
  no decrement, the customer receives the delay (or out-of-season) notice.
- RN-FUL-005: An expired product gets its remaining stock written off.
- RN-FUL-006: A line that fails to persist does not stop the others;
  failures are aggregated and raised once every line has been decided.
- RN-FUL-007: A notice that cannot be delivered is logged and reported
  on the line; it never fails the order.
- RN-FUL-008: A notice is dispatched once its product transaction block
  exits cleanly.  Called inside an outer transaction that block is a
  savepoint, so the notice may leave before the outer commit.
- RN-FUL-009: A failing ``OrderProcessed`` handler is logged and never
  turns a processed order into an error.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, NamedTuple, Optional

import structlog
from django.db import DatabaseError, transaction
from django.utils import timezone

from modules.notifications.exceptions import NotificationDeliveryError
from modules.notifications.notices import ExpiredNotice, Notice
from modules.notifications.services import dispatch_notice
from modules.orders.constants import LineOutcome
from modules.orders.dtos import LineOutcomeDTO, ProcessOrderResultDTO
from modules.orders.events import OrderProcessed
from modules.orders.exceptions import OrderNotFound, OrderProcessingIncomplete
from modules.products.availability import is_available, notification_for
from modules.products.exceptions import ProductNotFound, ProductUpdateFailed
from shared.infrastructure.bus import event_bus as default_event_bus

if TYPE_CHECKING:
    from modules.notifications.interfaces import INotificationService
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.dtos import ProductStateDTO
    from modules.products.repositories.interfaces import IProductRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class LineDecision(NamedTuple):
    """Outcome of the rules for one product at one instant.

    ``next_state`` is ``None`` when the product row must not be written.
    """

    outcome: LineOutcome
    next_state: Optional[ProductStateDTO]
    notice: Optional[Notice]


def decide_line(state: ProductStateDTO, now: datetime) -> LineDecision:
    """Apply the availability rules to one product snapshot."""
    if is_available(state, now):
        if state.available > 0:
            return LineDecision(
                LineOutcome.SHIPPED, state.with_available(state.available - 1), None
            )
        return LineDecision(LineOutcome.BACKORDERED, None, notification_for(state, now))

    notice = notification_for(state, now)
    if notice is None:
        return LineDecision(LineOutcome.SKIPPED, None, None)
    if isinstance(notice, ExpiredNotice) and state.available > 0:
        return LineDecision(LineOutcome.NOTIFIED, state.with_available(0), notice)
    return LineDecision(LineOutcome.NOTIFIED, None, notice)


class OrderFulfillmentService:
    """Application service for order fulfillment.

    Receives repositories and the notification service via constructor
    injection (DIP).  ``clock`` supplies the reference timestamp.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        notification_service: INotificationService,
        clock: Callable[[], datetime] = timezone.now,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._notifications = notification_service
        self._clock = clock
        self._event_bus = event_bus or default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def process_order(self, order_id: int) -> ProcessOrderResultDTO:
        """Decide and apply every line item of an order.

        Raises:
            OrderNotFound: the order does not exist.
            OrderProcessingIncomplete: one or more product updates failed;
                all other line items were still processed.
        """
        order = self._order_repo.get_with_products(order_id)
        if order is None:
            raise OrderNotFound(f"Order {order_id} not found.")

        now = self._clock()
        log = logger.bind(order_id=order_id, reference_time=now.isoformat())
        log.info("fulfillment.started")

        lines: List[LineOutcomeDTO] = []
        errors: List[str] = []
        for product_id in self._order_repo.line_product_ids(order):
            try:
                line = self._process_line(product_id, now)
            except ProductUpdateFailed as exc:
                log.error(
                    "fulfillment.line_failed",
                    product_id=product_id,
                    error=exc.reason,
                )
                errors.append(str(exc))
                line = LineOutcomeDTO(
                    product_id=product_id,
                    outcome=LineOutcome.FAILED,
                    error=exc.reason,
                )
            lines.append(line)

        result = ProcessOrderResultDTO(order_id=order_id, lines=lines, errors=errors)
        self._publish_processed(order, result)

        if errors:
            log.error("fulfillment.incomplete", failed=len(errors))
            raise OrderProcessingIncomplete(result)

        log.info(
            "fulfillment.completed",
            lines=len(lines),
            shipped=result.shipped_count,
            notified=result.notified_count,
        )
        return result

    # ------------------------------------------------------------------
    # Line items
    # ------------------------------------------------------------------

    def _process_line(self, product_id: int, now: datetime) -> LineOutcomeDTO:
        log = logger.bind(product_id=product_id)
        try:
            with transaction.atomic():
                state = self._product_repo.get_for_update(product_id)
                if state is None:
                    raise ProductNotFound(f"Product {product_id} not found.")
                decision = decide_line(state, now)
                if decision.next_state is not None:
                    self._product_repo.update_availability(decision.next_state)
        except (DatabaseError, ProductNotFound) as exc:
            raise ProductUpdateFailed(product_id, str(exc)) from exc

        available_after = (
            decision.next_state.available if decision.next_state is not None else state.available
        )
        log.info(
            "fulfillment.line_decided",
            type=state.type,
            outcome=decision.outcome.value,
            available_after=available_after,
            notice=decision.notice.kind if decision.notice else None,
        )

        delivered = None
        if decision.notice is not None:
            delivered = self._notify(decision.notice, product_id)

        return LineOutcomeDTO(
            product_id=product_id,
            outcome=decision.outcome,
            available_after=available_after,
            notification=decision.notice,
            notification_delivered=delivered,
        )

    def _notify(self, notice: Notice, product_id: int) -> bool:
        """Dispatch ``notice``; report delivery failures instead of raising.

        Any exception from the notification service counts as a failed
        delivery so the remaining line items are still processed.
        """
        try:
            dispatch_notice(self._notifications, notice)
        except NotificationDeliveryError as exc:
            logger.error(
                "fulfillment.notification_failed",
                product_id=product_id,
                kind=notice.kind,
                error=str(exc),
            )
            return False
        except Exception as exc:
            logger.error(
                "fulfillment.notification_failed",
                product_id=product_id,
                kind=notice.kind,
                error=str(exc),
                exc_info=True,
            )
            return False
        return True

    # ------------------------------------------------------------------
    # Domain events
    # ------------------------------------------------------------------

    def _publish_processed(self, order: Order, result: ProcessOrderResultDTO) -> None:
        order.add_domain_event(
            OrderProcessed(
                aggregate_id=result.order_id,
                shipped=result.shipped_count,
                notified=result.notified_count,
                failed=len(result.errors),
            )
        )
        for event in order.domain_events:
            try:
                self._event_bus.publish(event)
            except Exception:
                # Handlers run after every line is committed and notified.
                logger.error(
                    "fulfillment.event_handler_failed",
                    order_id=result.order_id,
                    event_name=event.event_name,
                    exc_info=True,
                )
        order.clear_domain_events()
