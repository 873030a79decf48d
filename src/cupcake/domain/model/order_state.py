"""OrderState: the in-progress order behind the ordering screens.

A flat mutable record with one derived field (``price``).  The presenting
layer owns exactly one instance per order, reads the fields synchronously
and subscribes to ``FieldChanged`` events to know when to re-render.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from cupcake.domain.clock import Clock
from cupcake.domain.events import FieldChanged, OrderField, OrderListener
from cupcake.domain.model.pricing import DEFAULT_POLICY, PricingPolicy
from cupcake.domain.model.value_objects import Money
from cupcake.domain.service.pickup_dates import pickup_date_options
from cupcake.domain.service.pricing import compute_price, is_same_day

logger = logging.getLogger(__name__)


class OrderState:
    """State holder for a single cupcake order.

    Invariants:
    - ``price`` always equals ``compute_price`` over the current quantity
      and selected date, except right after ``reset()`` where it is zero.
    - Listeners are notified only after every field a mutator touches has
      been updated, so no observer sees a stale price.

    Quantity and pickup date are trusted as given: negative quantities are
    not clamped and ``set_date`` does not check membership in
    ``pickup_date_options``.  Offering valid values is the presenter's job.
    """

    def __init__(
        self,
        clock: Clock,
        policy: PricingPolicy = DEFAULT_POLICY,
        price_formatter: Callable[[Money], str] = str,
    ) -> None:
        self._policy = policy
        self._price_formatter = price_formatter
        self._listeners: list[tuple[OrderListener, frozenset[OrderField] | None]] = []
        self._pickup_date_options = pickup_date_options(
            clock.now(), policy.pickup_option_count
        )

        self._quantity = 0
        self._flavor = ""
        self._selected_date = self._pickup_date_options[0]
        self._price = Money.zero(policy.currency)
        self.reset()

    # --- Read access ----------------------------------------------------------

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def flavor(self) -> str:
        return self._flavor

    @property
    def selected_date(self) -> str:
        return self._selected_date

    @property
    def price(self) -> Money:
        return self._price

    @property
    def pickup_date_options(self) -> tuple[str, ...]:
        return self._pickup_date_options

    @property
    def policy(self) -> PricingPolicy:
        return self._policy

    # --- Mutators -------------------------------------------------------------

    def set_quantity(self, number_cupcakes: int) -> None:
        self._quantity = number_cupcakes
        self._update_price()
        logger.debug("Quantity set to %s (price %s)", number_cupcakes, self._price)
        self._notify(OrderField.QUANTITY, OrderField.PRICE)

    def set_flavor(self, desired_flavor: str) -> None:
        """Set the flavor; an empty string clears it."""
        self._flavor = desired_flavor
        logger.debug("Flavor set to %r", desired_flavor)
        self._notify(OrderField.FLAVOR)

    def set_date(self, pickup_date: str) -> None:
        """Select a pickup date.

        *pickup_date* should be one of ``pickup_date_options``; it is
        stored verbatim either way.
        """
        self._selected_date = pickup_date
        self._update_price()
        logger.debug("Pickup date set to %r (price %s)", pickup_date, self._price)
        self._notify(OrderField.SELECTED_DATE, OrderField.PRICE)

    def reset(self) -> None:
        """Discard the order and restore the initial values."""
        self._quantity = 0
        self._flavor = ""
        self._selected_date = self._pickup_date_options[0]
        self._price = Money.zero(self._policy.currency)
        logger.debug("Order reset")
        self._notify(
            OrderField.QUANTITY,
            OrderField.FLAVOR,
            OrderField.SELECTED_DATE,
            OrderField.PRICE,
        )

    # --- Queries --------------------------------------------------------------

    def has_no_flavor_set(self) -> bool:
        return not self._flavor

    def is_same_day_pickup(self) -> bool:
        return is_same_day(self._selected_date, self._pickup_date_options)

    def formatted_price(self) -> str:
        return self._price_formatter(self._price)

    # --- Observation ----------------------------------------------------------

    def subscribe(
        self,
        listener: OrderListener,
        fields: Iterable[OrderField] | None = None,
    ) -> Callable[[], None]:
        """Register *listener* for changes to *fields* (all fields if None).

        Returns a callable that removes the registration.
        """
        entry = (listener, frozenset(fields) if fields is not None else None)
        self._listeners.append(entry)

        def unsubscribe() -> None:
            if entry in self._listeners:
                self._listeners.remove(entry)

        return unsubscribe

    # --- Internal helpers -----------------------------------------------------

    def _update_price(self) -> None:
        self._price = compute_price(
            self._quantity,
            self._selected_date,
            self._pickup_date_options,
            self._policy,
        )

    def _value_of(self, field: OrderField) -> object:
        return getattr(self, field.value)

    def _notify(self, *fields: OrderField) -> None:
        # Snapshot so listeners may unsubscribe while being notified.
        for listener, wanted in list(self._listeners):
            for field in fields:
                if wanted is None or field in wanted:
                    listener(FieldChanged(field, self._value_of(field)))
