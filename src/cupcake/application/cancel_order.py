"""Application service: Cancel Order use case."""

from __future__ import annotations

import logging

from cupcake.domain.model.order_state import OrderState

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, order: OrderState) -> None:
        self._order = order

    def handle(self) -> None:
        logger.info("Order cancelled")
        self._order.reset()
