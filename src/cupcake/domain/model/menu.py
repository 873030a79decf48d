"""Flavors offered on the ordering screen.

``OrderState`` stores any flavor string; this list is what presenters
offer to the customer.
"""

FLAVORS = (
    "Vanilla",
    "Chocolate",
    "Red Velvet",
    "Salted Caramel",
    "Coffee",
)
