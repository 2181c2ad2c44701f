"""Stand-in for a payment/ordering backend.

Sleeps for a configurable latency and fails at a configurable rate so the
checkout flow's failure path can be exercised.
"""

from __future__ import annotations

import asyncio
import logging
import random

from freshcart.application.checkout import CheckoutGateway
from freshcart.application.receipt import Receipt
from freshcart.domain.exceptions import CheckoutError

logger = logging.getLogger(__name__)


class SimulatedCheckoutGateway(CheckoutGateway):

    def __init__(
        self,
        delay: float = 1.0,
        failure_rate: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self._delay = delay
        self._failure_rate = failure_rate
        self._rng = rng or random.Random()

    async def submit(self, receipt: Receipt) -> None:
        logger.debug("Submitting order #%s (%s)", receipt.order_number, receipt.total)
        await asyncio.sleep(self._delay)
        if self._failure_rate and self._rng.random() < self._failure_rate:
            raise CheckoutError("Network error while placing order, please try again")
