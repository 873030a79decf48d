"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from datetime import date

from cupcake.domain.clock import Clock
from cupcake.domain.model.order_state import OrderState
from cupcake.domain.model.pricing import DEFAULT_POLICY, PricingPolicy
from cupcake.infrastructure.clock import FixedClock, SystemClock
from cupcake.infrastructure.formatting import format_currency


def clock(today: date | None = None) -> Clock:
    if today is not None:
        return FixedClock(today)
    return SystemClock()


def order_state(
    today: date | None = None,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> OrderState:
    return OrderState(clock(today), policy=policy, price_formatter=format_currency)
