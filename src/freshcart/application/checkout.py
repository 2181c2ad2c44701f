"""Application service: Checkout use case.

Turns the current cart into a receipt, submits it through a
CheckoutGateway and, only once that call has succeeded, records the order
and takes the submitted lines off the cart.  Anything added while the
submission was in flight stays in the cart.  A failed submission only
sets ``error``; a cancelled one leaves the store as it was.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable

from freshcart.application.cart_store import CartStore
from freshcart.application.notifications import DESTRUCTIVE, Notification
from freshcart.application.receipt import Receipt, build_receipt, new_order_number
from freshcart.domain.exceptions import CheckoutError
from freshcart.domain.model.order import Order
from freshcart.domain.repository.order_repository import OrderRepository
from freshcart.domain.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class CheckoutGateway(ABC):

    @abstractmethod
    async def submit(self, receipt: Receipt) -> None:
        """Send the order off; raise CheckoutError on failure."""


class CheckoutHandler:

    def __init__(
        self,
        store: CartStore,
        gateway: CheckoutGateway,
        order_repo: OrderRepository | None = None,
        store_name: str = "FreshCart Organic Market",
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._gateway = gateway
        self._order_repo = order_repo
        self._store_name = store_name
        self._rng = rng or random.Random()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def handle(
        self,
        phone: str | None = None,
        customer_id: str | None = None,
        delivery_address: str = "",
    ) -> Result:
        lines = self._store.snapshot()
        if not lines:
            return Failure("validation", "Cart is empty")

        receipt = build_receipt(
            lines,
            order_number=new_order_number(self._rng),
            phone=phone,
            now=self._clock(),
            currency=self._store.currency,
            store_name=self._store_name,
        )

        self._store.set_loading(True)
        try:
            await self._gateway.submit(receipt)
        except CheckoutError as exc:
            message = str(exc) or "Checkout failed"
            logger.warning("Checkout of order #%s failed: %s", receipt.order_number, message)
            self._store.set_error(message)
            self._store.notify(Notification("Checkout failed", message, DESTRUCTIVE))
            return Failure("transient", message)
        finally:
            self._store.set_loading(False)

        if self._order_repo is not None:
            order = Order.from_cart(
                lines,
                customer_id=customer_id,
                phone=receipt.phone,
                delivery_address=delivery_address,
                order_number=receipt.order_number,
            )
            self._order_repo.save(order)
            logger.info("Recorded order %s for #%s", order.id, receipt.order_number)

        self._store.set_error(None)
        self._store.settle(lines)
        self._store.notify(Notification("Order placed successfully!"))
        return Success(receipt)
