"""Application service: Submit Order use case.

Captures the summary of the in-progress order and then discards it, so
the screen starts over with a fresh order.  There is no persistence; the
returned summary is what gets handed to the customer.
"""

from __future__ import annotations

import logging

from cupcake.application.dto import OrderSummaryDTO
from cupcake.application.show_summary import ShowSummaryHandler
from cupcake.domain.exceptions import ValidationError
from cupcake.domain.model.order_state import OrderState

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(self, order: OrderState) -> None:
        self._order = order

    def handle(self) -> OrderSummaryDTO:
        """Submit the order.

        Raises ValidationError if no flavor has been chosen, mirroring the
        flavor screen which does not let the customer continue without one.
        """
        if self._order.has_no_flavor_set():
            raise ValidationError("Choose a flavor before submitting the order")

        summary = ShowSummaryHandler.to_dto(self._order)
        logger.info(
            "Order submitted: %s x %s for %s, total %s",
            summary.quantity,
            summary.flavor,
            summary.pickup_date,
            summary.total,
        )
        self._order.reset()
        return summary
