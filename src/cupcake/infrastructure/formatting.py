"""Locale-aware currency formatting.

Python leaves ``LC_MONETARY`` at the C locale unless the process opts in
with ``locale.setlocale``.  The C locale has no currency symbol, so in that
case the Money's own rendering is used instead of ``locale.currency``.
"""

from __future__ import annotations

import locale

from cupcake.domain.model.value_objects import Money


def format_currency(money: Money) -> str:
    if not locale.localeconv().get("currency_symbol"):
        return str(money)
    return locale.currency(money.amount, grouping=True)


def apply_locale(name: str) -> str:
    """Switch the process locale; ``""`` selects the environment's locale.

    Returns the name of the locale now in effect.  Raises ``locale.Error``
    if the locale is not available on this system.
    """
    return locale.setlocale(locale.LC_ALL, name)
