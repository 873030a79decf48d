"""Pricing policy for cupcake orders.

The business constants are bundled into an immutable ``PricingPolicy``
that is handed to each ``OrderState`` rather than read from module state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from cupcake.domain.exceptions import ValidationError
from cupcake.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
PRICE_PER_CUPCAKE = Decimal("35000.00")
PRICE_FOR_SAME_DAY_PICKUP = Decimal("5000.00")
PICKUP_OPTION_COUNT = 4


@dataclass(frozen=True)
class PricingPolicy:
    price_per_unit: Decimal = PRICE_PER_CUPCAKE
    same_day_surcharge: Decimal = PRICE_FOR_SAME_DAY_PICKUP
    currency: str = "IDR"
    pickup_option_count: int = PICKUP_OPTION_COUNT

    def __post_init__(self) -> None:
        if self.pickup_option_count < 1:
            raise ValidationError("At least one pickup date option is required")

    @property
    def unit_price(self) -> Money:
        return Money(self.price_per_unit, self.currency)

    @property
    def surcharge(self) -> Money:
        return Money(self.same_day_surcharge, self.currency)


DEFAULT_POLICY = PricingPolicy()
