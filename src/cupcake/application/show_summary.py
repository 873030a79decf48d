"""Application service: Show Summary use case (query)."""

from __future__ import annotations

from cupcake.application.dto import OrderSummaryDTO
from cupcake.domain.model.order_state import OrderState


class ShowSummaryHandler:

    def __init__(self, order: OrderState) -> None:
        self._order = order

    def handle(self) -> OrderSummaryDTO:
        return self.to_dto(self._order)

    @staticmethod
    def to_dto(order: OrderState) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            quantity=order.quantity,
            flavor=order.flavor,
            pickup_date=order.selected_date,
            total=order.formatted_price(),
            same_day=order.is_same_day_pickup(),
        )
