"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the live ``OrderState`` to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderSummaryDTO:
    """Output: a snapshot of an order as displayed to the user."""

    quantity: int
    flavor: str
    pickup_date: str
    total: str  # formatted, e.g. "Rp215,000.00"
    same_day: bool

    @property
    def text(self) -> str:
        """Multi-line summary as sent with a submitted order."""
        lines = [
            f"Quantity: {self.quantity} {'cupcake' if self.quantity == 1 else 'cupcakes'}",
            f"Flavor: {self.flavor}",
            f"Pickup date: {self.pickup_date}",
            f"Total: {self.total}",
        ]
        return "\n".join(lines)
