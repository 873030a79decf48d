"""Domain service: order pricing.

A pure function of the fields that affect the total.  ``OrderState`` calls
it at the end of every mutator that touches quantity or pickup date.
"""

from __future__ import annotations

from typing import Sequence

from cupcake.domain.model.pricing import DEFAULT_POLICY, PricingPolicy
from cupcake.domain.model.value_objects import Money


def is_same_day(selected_date: str, date_options: Sequence[str]) -> bool:
    """True if *selected_date* is the first (today) pickup option."""
    return bool(date_options) and selected_date == date_options[0]


def compute_price(
    quantity: int,
    selected_date: str,
    date_options: Sequence[str],
    policy: PricingPolicy = DEFAULT_POLICY,
) -> Money:
    """Total for *quantity* cupcakes picked up on *selected_date*.

    The same-day surcharge applies even when the quantity is zero.
    """
    price = policy.unit_price * quantity
    if is_same_day(selected_date, date_options):
        price = price + policy.surcharge
    return price
