"""Change notifications emitted by an OrderState.

Observers register a plain callable and receive one ``FieldChanged`` per
field touched by a mutator, after the mutator has finished updating every
field it owns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class OrderField(Enum):
    QUANTITY = "quantity"
    FLAVOR = "flavor"
    SELECTED_DATE = "selected_date"
    PRICE = "price"


@dataclass(frozen=True)
class FieldChanged:
    field: OrderField
    value: Any


OrderListener = Callable[[FieldChanged], None]
