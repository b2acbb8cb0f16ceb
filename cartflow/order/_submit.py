"""
Order submission: one create_order call per confirm.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from kungfu import Result, Ok, Error

from cartflow._types import OrderId
from cartflow.backend import CartBackend
from cartflow.cart import CheckoutLine
from cartflow.errors import CartError, CartErrorKind
from cartflow.lift import remote
from cartflow.notify import Notifier, Severity
from cartflow.order._records import OrderLineRecord

logger = structlog.get_logger(__name__)

ORDER_FAILED = "Error creating order"
ORDER_CREATED = "Order created successfully"


class OrderSubmitter:
    """
    Maps confirmation lines to order lines and creates the order.

    No retry and no local order record: the order exists only on the
    server. Both outcomes are notified.
    """

    def __init__(self, backend: CartBackend, notifier: Notifier) -> None:
        self._backend = backend
        self._notifier = notifier

    async def confirm(self, lines: Sequence[CheckoutLine]) -> Result[OrderId, CartError]:
        if not lines:
            error = CartError(CartErrorKind.EMPTY_ORDER, "No products to order")
            self._fail(error)
            return Error(error)

        records = [OrderLineRecord.from_domain(line).to_backend() for line in lines]
        result = await remote(
            lambda: self._backend.create_order(records),
            CartErrorKind.ORDER_CREATION,
        )
        match result:
            case Ok(order_id):
                logger.info("order_created", order_id=order_id, lines=len(records))
                self._notifier.notify("Success", ORDER_CREATED, Severity.SUCCESS)
                return Ok(OrderId(str(order_id)))
            case Error(e):
                self._fail(e)
                return Error(e)

    def _fail(self, error: CartError) -> None:
        logger.warning("order_failed", kind=error.kind.name, message=error.message)
        self._notifier.notify(ORDER_FAILED, error.message, Severity.ERROR)


__all__ = ("OrderSubmitter",)
